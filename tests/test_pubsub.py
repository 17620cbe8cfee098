import io

import pytest

from codekata.pubsub import FrameError, Topic, encode_frame, read_frame


class _BrokenSubscriber:
    def write(self, data):
        raise OSError("connection reset")


def test_encode_frame_prefixes_big_endian_length():
    assert encode_frame(b"hello") == b"\x00\x00\x00\x05hello"


def test_encode_empty_frame():
    assert encode_frame(b"") == b"\x00\x00\x00\x00"


@pytest.mark.parametrize("payload", [b"", b"x", b"hello from producer!", bytes(range(256)) * 3])
def test_frame_round_trip(payload):
    assert read_frame(io.BytesIO(encode_frame(payload))) == payload


def test_consecutive_frames_are_read_in_order():
    stream = io.BytesIO(encode_frame(b"first") + encode_frame(b"second"))
    assert read_frame(stream) == b"first"
    assert read_frame(stream) == b"second"
    with pytest.raises(EOFError):
        read_frame(stream)


def test_empty_stream_is_eof():
    with pytest.raises(EOFError):
        read_frame(io.BytesIO(b""))


def test_truncated_header_is_frame_error():
    with pytest.raises(FrameError):
        read_frame(io.BytesIO(b"\x00\x00"))


def test_truncated_payload_is_frame_error():
    data = encode_frame(b"hello")[:-2]
    with pytest.raises(FrameError):
        read_frame(io.BytesIO(data))


def test_topic_broadcast_appends_newline():
    topic = Topic("default")
    first, second = io.BytesIO(), io.BytesIO()
    topic.add_subscriber(first)
    topic.add_subscriber(second)
    assert topic.broadcast(b"hello") == 2
    assert first.getvalue() == b"hello\n"
    assert second.getvalue() == b"hello\n"


def test_topic_subscriber_added_once():
    topic = Topic("default")
    sink = io.BytesIO()
    topic.add_subscriber(sink)
    topic.add_subscriber(sink)
    assert len(topic) == 1
    topic.broadcast(b"msg")
    assert sink.getvalue() == b"msg\n"


def test_removed_subscriber_gets_nothing():
    topic = Topic("default")
    sink = io.BytesIO()
    topic.add_subscriber(sink)
    topic.remove_subscriber(sink)
    topic.remove_subscriber(sink)
    assert len(topic) == 0
    assert topic.broadcast(b"msg") == 0
    assert sink.getvalue() == b""


def test_failing_subscriber_does_not_stop_others():
    topic = Topic("default")
    sink = io.BytesIO()
    topic.add_subscriber(_BrokenSubscriber())
    topic.add_subscriber(sink)
    assert topic.broadcast(b"data") == 1
    assert sink.getvalue() == b"data\n"


def test_broadcast_framed_message_can_be_read_back():
    topic = Topic("default")
    sink = io.BytesIO()
    topic.add_subscriber(sink)
    topic.broadcast(encode_frame(b"payload"))
    sink.seek(0)
    assert read_frame(sink) == b"payload"
    assert sink.read() == b"\n"