"""An LV2 atom sequence event buffer held in a byte array."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterator

_ATOM = struct.Struct("=II")  # size, type
_SEQUENCE_BODY_SIZE = 8  # unit, pad
_SEQUENCE_SIZE = _ATOM.size + _SEQUENCE_BODY_SIZE
_EVENT_HEADER = struct.Struct("=qII")  # frames, body size, body type


def _pad_size(size: int) -> int:
    return (size + 7) & ~7


class BufferFullError(Exception):
    """Raised when an event does not fit in an event buffer."""


@dataclass(frozen=True)
class Event:
    """One event read from an event buffer."""

    frames: int
    subframes: int
    type: int
    data: bytes


class EventBuffer:
    """A fixed-capacity buffer of timestamped events in atom sequence layout."""

    def __init__(self, capacity: int, atom_chunk: int, atom_sequence: int) -> None:
        self.capacity = capacity
        self.atom_chunk = atom_chunk
        self.atom_sequence = atom_sequence
        self._buf = bytearray(_SEQUENCE_SIZE + capacity)

    def _header(self) -> tuple[int, int]:
        return _ATOM.unpack_from(self._buf, 0)

    def _set_header(self, size: int, type_: int) -> None:
        _ATOM.pack_into(self._buf, 0, size, type_)

    def reset(self, input: bool) -> None:
        """Clear the buffer, ready for input events or for plugin output."""
        if input:
            self._set_header(_SEQUENCE_BODY_SIZE, self.atom_sequence)
        else:
            self._set_header(self.capacity, self.atom_chunk)

    def size(self) -> int:
        """Return the total padded size of the events stored in the buffer."""
        atom_size, atom_type = self._header()
        if atom_type != self.atom_sequence:
            return 0
        return atom_size - _SEQUENCE_BODY_SIZE

    def buffer(self) -> bytearray:
        """Return the underlying atom sequence bytes, shared, not copied."""
        return self._buf

    def begin(self) -> EventIterator:
        """Return an iterator at the first event."""
        return EventIterator(self, 0)

    def end(self) -> EventIterator:
        """Return an iterator just past the last event."""
        return EventIterator(self, _pad_size(self.size()))

    def __iter__(self) -> Iterator[Event]:
        it = self.begin()
        while it.is_valid():
            yield it.get()
            it = it.next()


class EventIterator:
    """A position in an event buffer."""

    def __init__(self, evbuf: EventBuffer, offset: int = 0) -> None:
        self.evbuf = evbuf
        self.offset = offset

    def __repr__(self) -> str:
        return f"EventIterator(offset={self.offset})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventIterator):
            return NotImplemented
        return self.evbuf is other.evbuf and self.offset == other.offset

    def is_valid(self) -> bool:
        """Return whether the iterator points at an event."""
        return self.offset < self.evbuf.size()

    def next(self) -> EventIterator:
        """Return an iterator at the following event, or this one if at the end."""
        if not self.is_valid():
            return self
        _, body_size, _ = _EVENT_HEADER.unpack_from(
            self.evbuf.buffer(), _SEQUENCE_SIZE + self.offset
        )
        step = _pad_size(_EVENT_HEADER.size + body_size)
        return EventIterator(self.evbuf, self.offset + step)

    def get(self) -> Event:
        """Return the event at this position."""
        if not self.is_valid():
            raise IndexError("event iterator is past the end of the buffer")
        buf = self.evbuf.buffer()
        pos = _SEQUENCE_SIZE + self.offset
        frames, body_size, body_type = _EVENT_HEADER.unpack_from(buf, pos)
        start = pos + _EVENT_HEADER.size
        return Event(frames, 0, body_type, bytes(buf[start : start + body_size]))

    def write(self, frames: int, subframes: int, type: int, data: bytes) -> None:
        """Write an event here and advance past it."""
        evbuf = self.evbuf
        buf = evbuf.buffer()
        atom_size, atom_type = _ATOM.unpack_from(buf, 0)
        size = len(data)
        if evbuf.capacity - _ATOM.size - atom_size < _EVENT_HEADER.size + size:
            raise BufferFullError(
                f"no room for a {size} byte event in a buffer of {evbuf.capacity}"
            )

        pos = _SEQUENCE_SIZE + self.offset
        _EVENT_HEADER.pack_into(buf, pos, frames, size, type)
        start = pos + _EVENT_HEADER.size
        buf[start : start + size] = data

        padded = _pad_size(_EVENT_HEADER.size + size)
        _ATOM.pack_into(buf, 0, atom_size + padded, atom_type)
        self.offset += padded