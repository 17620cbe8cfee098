"""Packet server configured through option functions."""

from __future__ import annotations

import logging
import socket
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)

_FAMILIES = {
    "udp": socket.AF_UNSPEC,
    "udp4": socket.AF_INET,
    "udp6": socket.AF_INET6,
}


@dataclass
class ServerConfig:
    """Settings of a packet server."""

    protocol: str = "tcp"
    host: str = "localhost"
    port: int = 8080
    origins: List[str] = field(default_factory=list)

    def address(self) -> str:
        """Return ``host:port``."""
        return f"{self.host}:{self.port}"


Option = Callable[[ServerConfig], None]


def with_protocol(protocol: str) -> Option:
    """Option setting the network protocol."""

    def apply(config: ServerConfig) -> None:
        config.protocol = protocol

    return apply


def with_host(host: str) -> Option:
    """Option setting the host to bind."""

    def apply(config: ServerConfig) -> None:
        config.host = host

    return apply


def with_port(port: int) -> Option:
    """Option setting the port to bind."""

    def apply(config: ServerConfig) -> None:
        config.port = port

    return apply


def with_origins(origins: Sequence[str]) -> Option:
    """Option replacing the list of origins."""

    def apply(config: ServerConfig) -> None:
        config.origins = list(origins)

    return apply


def with_origin(origin: str) -> Option:
    """Option appending one origin."""

    def apply(config: ServerConfig) -> None:
        config.origins.append(origin)

    return apply


class PacketServer:
    """Datagram server that logs every packet it receives."""

    def __init__(self, *args: Optional[Option]) -> None:
        self.config = ServerConfig()
        for option in args:
            if option is not None:
                option(self.config)

    def serve(self) -> None:
        """Bind and log incoming packets forever."""
        family = _FAMILIES.get(self.config.protocol)
        if family is None:
            raise ValueError(f"unsupported packet protocol: {self.config.protocol}")

        infos = socket.getaddrinfo(
            self.config.host, self.config.port, family, socket.SOCK_DGRAM
        )
        sock_family, sock_type, proto, _, sockaddr = infos[0]
        with socket.socket(sock_family, sock_type, proto) as sock:
            sock.bind(sockaddr)
            logger.info("server started, address=%s", self.config.address())
            while True:
                try:
                    data, client = sock.recvfrom(1024)
                except OSError as error:
                    logger.error("error reading packet: %s", error)
                    continue
                logger.info(
                    "received packet, client=%s, data=%s",
                    client,
                    data.decode("utf-8", errors="replace"),
                )


def main(argv: Any = None) -> int:
    """Start a UDP server on 127.0.0.1:3000."""
    logging.basicConfig(level=logging.INFO)
    server = PacketServer(with_host("127.0.0.1"), with_port(3000), with_protocol("udp"))
    try:
        server.serve()
    except (OSError, ValueError) as error:
        logger.error("could not start server: %s", error)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())