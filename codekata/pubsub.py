"""Length-prefixed message framing and topic broadcasting."""

from __future__ import annotations

import logging
import struct
import threading
from typing import BinaryIO, Protocol, Set

logger = logging.getLogger(__name__)

_HEADER = struct.Struct(">I")
_MAX_PAYLOAD = 0xFFFFFFFF


class FrameError(Exception):
    """Raised when a frame is truncated or cannot be encoded."""


def encode_frame(payload: bytes) -> bytes:
    """Prefix ``payload`` with its length as a big-endian 32-bit integer."""
    data = bytes(payload)
    if len(data) > _MAX_PAYLOAD:
        raise FrameError("payload too large for a frame")
    return _HEADER.pack(len(data)) + data


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_frame(stream: BinaryIO) -> bytes:
    """Read one frame's payload.

    Raises EOFError if the stream ends before a frame starts and FrameError
    if it ends in the middle of one.
    """
    header = _read_exact(stream, _HEADER.size)
    if not header:
        raise EOFError("end of stream")
    if len(header) < _HEADER.size:
        raise FrameError("could not read message length")
    (length,) = _HEADER.unpack(header)
    payload = _read_exact(stream, length)
    if len(payload) < length:
        raise FrameError("could not read message")
    return payload


class Subscriber(Protocol):
    def write(self, data: bytes) -> object: ...


class Topic:
    """A named channel that writes each message to all its subscribers."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: Set[Subscriber] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def add_subscriber(self, subscriber: Subscriber) -> None:
        """Register a writable subscriber."""
        with self._lock:
            self._subscribers.add(subscriber)

    def remove_subscriber(self, subscriber: Subscriber) -> None:
        """Unregister a subscriber; unknown ones are ignored."""
        with self._lock:
            self._subscribers.discard(subscriber)

    def broadcast(self, message: bytes) -> int:
        """Write ``message`` and a newline to every subscriber.

        Returns how many subscribers received it; failures are logged.
        """
        data = bytes(message) + b"\n"
        with self._lock:
            subscribers = list(self._subscribers)
        delivered = 0
        for subscriber in subscribers:
            try:
                subscriber.write(data)
                flush = getattr(subscriber, "flush", None)
                if flush is not None:
                    flush()
            except (OSError, ValueError):
                logger.error("could not send message to subscriber")
                continue
            delivered += 1
        return delivered