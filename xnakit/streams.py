"""Byte streams: an abstract stream interface, an in-memory stream and stream helpers."""

from __future__ import annotations

import abc
import enum
from typing import Union

from .errors import ArgumentError, XnaError

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

DEFAULT_COPY_BUFFER_SIZE = 81920
_I32_MAX = 2**31 - 1
_MAX_ARRAY_LENGTH = 0x7FFFFFC7
_MIN_GROWTH = 256


class SeekOrigin(enum.Enum):
    """Reference point for :meth:`Stream.seek`."""

    BEGIN = 0
    CURRENT = 1
    END = 2


class Stream(abc.ABC):
    """A sequence of bytes that can be read, written and positioned."""

    @property
    @abc.abstractmethod
    def can_read(self) -> bool: ...

    @property
    @abc.abstractmethod
    def can_write(self) -> bool: ...

    @property
    @abc.abstractmethod
    def can_seek(self) -> bool: ...

    @property
    @abc.abstractmethod
    def length(self) -> int: ...

    @property
    @abc.abstractmethod
    def position(self) -> int: ...

    @abc.abstractmethod
    def close(self) -> None: ...

    @abc.abstractmethod
    def flush(self) -> None: ...

    @abc.abstractmethod
    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.BEGIN) -> int: ...

    @abc.abstractmethod
    def set_length(self, value: int) -> None: ...

    @abc.abstractmethod
    def read(self, buffer: Buffer, offset: int, count: int) -> int: ...

    @abc.abstractmethod
    def read_byte(self) -> int: ...

    @abc.abstractmethod
    def write(self, buffer: ReadableBuffer, offset: int, count: int) -> None: ...

    @abc.abstractmethod
    def write_byte(self, value: int) -> None: ...

    @abc.abstractmethod
    def copy_to(self, destination: "Stream", buffer_size: int = DEFAULT_COPY_BUFFER_SIZE) -> None: ...

    @abc.abstractmethod
    def write_to(self, stream: "Stream") -> None: ...

    def __enter__(self) -> "Stream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryStream(Stream):
    """A stream whose backing store is a growable byte array in memory."""

    MEM_STREAM_MAX_LENGTH = _I32_MAX

    def __init__(self, capacity: int = 0) -> None:
        capacity = max(capacity, 0)
        self._buffer = bytearray(capacity)
        self._origin = 0
        self._position = 0
        self._length = 0
        self._capacity = capacity
        self._expandable = True
        self._writable = True
        self._exposable = True
        self._is_open = True

    @classmethod
    def from_buffer(cls, buffer: ReadableBuffer, writable: bool = True) -> "MemoryStream":
        """Create a fixed-size stream over a copy of ``buffer``."""
        stream = cls()
        stream._buffer = bytearray(buffer)
        stream._length = len(stream._buffer)
        stream._capacity = len(stream._buffer)
        stream._expandable = False
        stream._writable = writable
        stream._exposable = False
        return stream

    @classmethod
    def from_slice(
        cls,
        buffer: ReadableBuffer,
        index: int,
        count: int,
        writable: bool = True,
        publicly_visible: bool = False,
    ) -> "MemoryStream":
        """Create a fixed-size stream over ``count`` bytes of ``buffer`` starting at ``index``."""
        index = max(index, 0)
        count = max(count, 0)
        if len(buffer) - index < count:
            raise XnaError("Invalid off len.")
        stream = cls()
        stream._buffer = bytearray(buffer)
        stream._origin = index
        stream._position = index
        stream._length = index + count
        stream._capacity = index + count
        stream._expandable = False
        stream._writable = writable
        stream._exposable = publicly_visible
        return stream

    # --- state checks ---------------------------------------------------

    def _ensure_not_closed(self) -> None:
        if not self._is_open:
            raise XnaError("Stream is closed.")

    def _ensure_writable(self) -> None:
        if not self.can_write:
            raise XnaError("Unwritable stream.")

    def _ensure_capacity(self, value: int) -> bool:
        if value < 0:
            raise XnaError("Invalid capacity.")
        if value <= self._capacity:
            return False
        new_capacity = max(value, _MIN_GROWTH)
        if new_capacity < self._capacity * 2:
            new_capacity = self._capacity * 2
        if self._capacity * 2 > _MAX_ARRAY_LENGTH:
            new_capacity = max(value, _MAX_ARRAY_LENGTH)
        self.capacity = new_capacity
        return True

    def _zero(self, start: int, end: int) -> None:
        self._buffer[start:end] = bytes(end - start)

    # --- properties -----------------------------------------------------

    @property
    def can_read(self) -> bool:
        return self._is_open

    @property
    def can_write(self) -> bool:
        return self._writable

    @property
    def can_seek(self) -> bool:
        return self._is_open

    @property
    def length(self) -> int:
        self._ensure_not_closed()
        return self._length - self._origin

    @property
    def position(self) -> int:
        self._ensure_not_closed()
        return self._position - self._origin

    @position.setter
    def position(self, value: int) -> None:
        value = max(value, 0)
        self._ensure_not_closed()
        if value > self.MEM_STREAM_MAX_LENGTH - self._origin:
            raise XnaError("Invalid position.")
        self._position = self._origin + value

    @property
    def capacity(self) -> int:
        self._ensure_not_closed()
        return self._capacity - self._origin

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < self.length:
            raise XnaError("Invalid capacity.")
        self._ensure_not_closed()
        if not self._expandable and value != self.capacity:
            raise XnaError("Invalid capacity.")
        if self._exposable and value != self._capacity:
            if value > 0:
                kept = self._buffer[: min(self._length, value)]
                self._buffer = kept + bytearray(value - len(kept))
            else:
                self._buffer = bytearray()
            self._capacity = value

    def get_buffer(self) -> bytes:
        """Return a copy of the whole backing array."""
        if self._exposable:
            raise XnaError("Unauthorized access.")
        return bytes(self._buffer)

    # --- stream operations ----------------------------------------------

    def close(self) -> None:
        self._is_open = False
        self._writable = False
        self._expandable = False

    def flush(self) -> None:
        """Check the stream is open; written bytes already sit in the backing array."""
        self._ensure_not_closed()

    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.BEGIN) -> int:
        """Move the position and return it, relative to the stream's start."""
        self._ensure_not_closed()
        if origin is SeekOrigin.BEGIN:
            loc = self._origin
        elif origin is SeekOrigin.CURRENT:
            loc = self._position
        else:
            loc = self._length
        if offset > self.MEM_STREAM_MAX_LENGTH - loc:
            raise XnaError("Offset: Out of range.")
        target = loc + offset
        if target < self._origin:
            raise XnaError("Invalid seek: seek before begin.")
        self._position = target
        return self._position - self._origin

    def set_length(self, value: int) -> None:
        if value < 0 or value > _I32_MAX:
            raise XnaError("Value: Out of range.")
        self._ensure_writable()
        if value > _I32_MAX - self._origin:
            raise XnaError("Value: Out of range.")
        new_length = self._origin + value
        allocated = self._ensure_capacity(new_length)
        if not allocated and new_length > self._length:
            self._zero(self._length, new_length)
        self._length = new_length
        if self._position > new_length:
            self._position = new_length

    def _emulated_read(self, count: int) -> int:
        self._ensure_not_closed()
        n = max(min(self._length - self._position, count), 0)
        self._position += n
        return n

    def read(self, buffer: Buffer, offset: int, count: int) -> int:
        validate_buffer_arguments(buffer, offset, count)
        self._ensure_not_closed()
        n = min(self._length - self._position, count)
        if n <= 0:
            return 0
        buffer[offset : offset + n] = self._buffer[self._position : self._position + n]
        self._position += n
        return n

    def read_byte(self) -> int:
        """Return the next byte, or -1 at the end of the stream."""
        self._ensure_not_closed()
        if self._position >= self._length:
            return -1
        value = self._buffer[self._position]
        self._position += 1
        return value

    def write(self, buffer: ReadableBuffer, offset: int, count: int) -> None:
        validate_buffer_arguments(buffer, offset, count)
        self._ensure_not_closed()
        self._ensure_writable()
        end = self._position + count
        if end < 0:
            raise XnaError("Invalid write.")
        if end > self._length:
            must_zero = self._position > self._length
            if end > self._capacity and self._ensure_capacity(end):
                must_zero = False
            if must_zero:
                self._zero(self._length, end)
            self._length = end
        self._buffer[self._position : end] = bytes(buffer[offset : offset + count])
        self._position = end

    def write_byte(self, value: int) -> None:
        self._ensure_writable()
        if self._position >= self._length:
            new_length = self._position + 1
            must_zero = self._position > self._length
            if new_length >= self._capacity and self._ensure_capacity(new_length):
                must_zero = False
            if must_zero:
                self._zero(self._length, self._position)
            self._length = new_length
        self._buffer[self._position] = value
        self._position += 1

    def copy_to(self, destination: Stream, buffer_size: int = DEFAULT_COPY_BUFFER_SIZE) -> None:
        validate_copy_to_arguments(destination, buffer_size)
        self._ensure_not_closed()
        start = self._position
        remaining = self._emulated_read(self._length - start)
        if remaining > 0:
            destination.write(bytes(self._buffer[start : start + remaining]), 0, remaining)

    def write_to(self, stream: Stream) -> None:
        """Write the whole content of this stream to ``stream``."""
        self._ensure_not_closed()
        stream.write(bytes(self._buffer), self._origin, self._length - self._origin)


# --- helpers -------------------------------------------------------------


def validate_buffer_arguments(buffer: ReadableBuffer, offset: int, count: int) -> None:
    if offset < 0:
        raise ArgumentError("Offset cannot be less than 0")
    if count < 0 or count > len(buffer) - offset:
        raise ArgumentError("Count cannot be less than buffer.len() - offset")


def validate_read_at_least_arguments(buffer_length: int, minimum_bytes: int) -> None:
    if minimum_bytes < 0:
        raise ArgumentError("minimum_bytes cannot be less than 0")
    if buffer_length < minimum_bytes:
        raise ArgumentError("buffer_length cannot be less than minimum_bytes")


def validate_copy_to_arguments(destination: Stream, buffer_size: int) -> None:
    if buffer_size <= 0:
        raise XnaError("buffer_size cannot be less or equals zero")
    if not destination.can_write:
        if destination.can_read:
            raise XnaError("Destination is an unwritable stream.")
        raise XnaError("Destination is closed.")


def copy_stream(source: Stream, destination: Stream, buffer_size: int = DEFAULT_COPY_BUFFER_SIZE) -> None:
    """Copy everything left in ``source`` to ``destination`` in chunks."""
    validate_copy_to_arguments(destination, buffer_size)
    if not source.can_read:
        raise XnaError("Unreadable source stream")
    chunk = bytearray(buffer_size)
    while (bytes_read := source.read(chunk, 0, buffer_size)) != 0:
        destination.write(chunk, 0, bytes_read)


def copy_buffer_size(source: Stream) -> int:
    """Choose a copy buffer size suited to what is left in ``source``."""
    size = DEFAULT_COPY_BUFFER_SIZE
    if source.can_seek:
        length = source.length
        position = source.position
        if length <= position:
            size = 1
        else:
            size = min(size, length - position)
    return size


def read_into(source: Stream, buffer: Buffer) -> int:
    """Read as many bytes as one call gives into the whole of ``buffer``."""
    num_read = source.read(buffer, 0, len(buffer))
    if num_read > len(buffer):
        raise XnaError("Stream is too long.")
    return num_read


def read_one_byte(source: Stream) -> int:
    """Read one byte through :meth:`Stream.read`; -1 at the end of the stream."""
    one = bytearray(1)
    return one[0] if source.read(one, 0, 1) else -1


def _read_at_least_core(source: Stream, buffer: Buffer, minimum_bytes: int, throw_on_end_of_stream: bool) -> int:
    view = memoryview(buffer)
    total = 0
    while total < minimum_bytes:
        count = read_into(source, view[total:])
        if count == 0:
            if throw_on_end_of_stream:
                raise XnaError("End of stream")
            return total
        total += count
    return total


def read_exactly(source: Stream, buffer: Buffer, offset: int, count: int) -> None:
    """Fill ``count`` bytes of ``buffer`` from ``offset``, raising at end of stream."""
    validate_buffer_arguments(buffer, offset, count)
    _read_at_least_core(source, memoryview(buffer)[offset : offset + count], count, True)


def read_at_least(
    source: Stream, buffer: Buffer, minimum_bytes: int, throw_on_end_of_stream: bool = True
) -> int:
    """Read at least ``minimum_bytes`` into ``buffer`` and return how many were read."""
    validate_read_at_least_arguments(len(buffer), minimum_bytes)
    return _read_at_least_core(source, buffer, minimum_bytes, throw_on_end_of_stream)


def write_all(destination: Stream, buffer: ReadableBuffer) -> None:
    destination.write(buffer, 0, len(buffer))


def write_one_byte(destination: Stream, value: int) -> None:
    destination.write(bytes([value]), 0, 1)