import struct

import pytest

from lvhost.evbuf import BufferFullError, Event, EventBuffer

CHUNK = 11
SEQUENCE = 12


@pytest.fixture
def buf():
    evbuf = EventBuffer(256, CHUNK, SEQUENCE)
    evbuf.reset(True)
    return evbuf


def test_new_buffer_is_empty():
    evbuf = EventBuffer(64, CHUNK, SEQUENCE)
    assert evbuf.size() == 0
    assert not evbuf.begin().is_valid()


def test_input_reset_header(buf):
    assert struct.unpack_from("=II", buf.buffer(), 0) == (8, SEQUENCE)
    assert buf.size() == 0


def test_output_reset_header():
    evbuf = EventBuffer(64, CHUNK, SEQUENCE)
    evbuf.reset(False)
    assert struct.unpack_from("=II", evbuf.buffer(), 0) == (64, CHUNK)
    assert evbuf.size() == 0


def test_write_read_round_trip(buf):
    it = buf.end()
    it.write(5, 0, 42, b"\x90\x3c\x7f")
    it.write(9, 0, 43, b"hello world")
    assert list(buf) == [
        Event(5, 0, 42, b"\x90\x3c\x7f"),
        Event(9, 0, 43, b"hello world"),
    ]


def test_size_is_padded_and_end_matches(buf):
    it = buf.end()
    it.write(0, 0, 1, b"abc")
    it.write(0, 0, 1, b"defgh")
    assert buf.size() % 8 == 0
    assert buf.end() == it
    assert buf.end().offset == buf.size()


def test_iteration_stops_at_end(buf):
    buf.end().write(1, 0, 1, b"x")
    it = buf.begin()
    assert it.is_valid()
    after = it.next()
    assert not after.is_valid()
    assert after.next() == after


def test_get_past_end_raises(buf):
    with pytest.raises(IndexError):
        buf.begin().get()


def test_full_buffer_rejects_event():
    evbuf = EventBuffer(32, CHUNK, SEQUENCE)
    evbuf.reset(True)
    it = evbuf.end()
    with pytest.raises(BufferFullError):
        it.write(0, 0, 1, bytes(64))
    assert evbuf.size() == 0
    assert list(evbuf) == []


def test_fills_until_full():
    evbuf = EventBuffer(128, CHUNK, SEQUENCE)
    evbuf.reset(True)
    it = evbuf.end()
    written = 0
    with pytest.raises(BufferFullError):
        while True:
            it.write(written, 0, 1, b"abcd")
            written += 1
    assert written > 0
    assert [e.frames for e in evbuf] == list(range(written))


def test_reset_clears_events(buf):
    buf.end().write(0, 0, 1, b"x")
    buf.reset(True)
    assert list(buf) == []