"""Binary input streams for reading ISO media data."""

from __future__ import annotations

import abc
import dataclasses
import enum
import os
import struct
from typing import BinaryIO, Iterator, Union

from mediabox.utils import to_hex_string

_UINT32 = struct.Struct(">I")


class SeekDirection(enum.Enum):
    """Reference point for :meth:`BinaryStream.seek`."""

    CURRENT = "current"
    BEGIN = "begin"
    END = "end"


@dataclasses.dataclass(frozen=True)
class Matrix:
    """A 3x3 transformation matrix as stored in movie and track headers.

    Values are the raw 32-bit fixed-point words, in file order.
    """

    a: int = 0x00010000
    b: int = 0
    u: int = 0
    c: int = 0
    d: int = 0x00010000
    v: int = 0
    x: int = 0
    y: int = 0
    w: int = 0x40000000

    def __iter__(self) -> Iterator[int]:
        return iter(dataclasses.astuple(self))

    def __str__(self) -> str:
        return "{ " + ", ".join(to_hex_string(value, 32) for value in self) + " }"


class BinaryStream(abc.ABC):
    """A seekable source of bytes with helpers for ISO media primitives."""

    @abc.abstractmethod
    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes, raising EOFError if fewer remain."""

    @abc.abstractmethod
    def tell(self) -> int:
        """Return the current position."""

    @abc.abstractmethod
    def _size(self) -> int:
        """Return the total number of bytes in the stream."""

    @abc.abstractmethod
    def _move_to(self, position: int) -> None:
        """Move to an absolute position already known to be valid."""

    def seek(self, offset: int, direction: SeekDirection = SeekDirection.CURRENT) -> None:
        """Move the position by ``offset`` relative to ``direction``."""
        if direction is SeekDirection.CURRENT:
            target = self.tell() + offset
        elif direction is SeekDirection.BEGIN:
            target = offset
        else:
            target = self._size() + offset
        if target < 0 or target > self._size():
            raise ValueError(f"Invalid seek position: {target}")
        self._move_to(target)

    def available_bytes(self) -> int:
        """Number of bytes left between the position and the end."""
        return self._size() - self.tell()

    def has_bytes_available(self) -> bool:
        """True while the stream is not at its end."""
        return self.available_bytes() > 0

    def get(self, pos: int, length: int) -> bytes:
        """Read ``length`` bytes at absolute ``pos`` without moving the position."""
        saved = self.tell()
        try:
            self.seek(pos, SeekDirection.BEGIN)
            return self.read(length)
        finally:
            self._move_to(saved)

    def read_all(self) -> bytes:
        """Read everything up to the end of the stream."""
        return self.read(self.available_bytes())

    def _unpack(self, fmt: str) -> int:
        layout = struct.Struct(fmt)
        return layout.unpack(self.read(layout.size))[0]

    def read_uint8(self) -> int:
        return self._unpack("B")

    def read_int8(self) -> int:
        return self._unpack("b")

    def read_uint16(self) -> int:
        return self._unpack("=H")

    def read_big_endian_uint16(self) -> int:
        return self._unpack(">H")

    def read_little_endian_uint16(self) -> int:
        return self._unpack("<H")

    def read_uint32(self) -> int:
        return self._unpack("=I")

    def read_big_endian_uint32(self) -> int:
        return self._unpack(">I")

    def read_little_endian_uint32(self) -> int:
        return self._unpack("<I")

    def read_big_endian_int32(self) -> int:
        return self._unpack(">i")

    def read_uint64(self) -> int:
        return self._unpack("=Q")

    def read_big_endian_uint64(self) -> int:
        return self._unpack(">Q")

    def read_little_endian_uint64(self) -> int:
        return self._unpack("<Q")

    def _read_fixed_point(self, integer_length: int, fractional_length: int, byteorder: str) -> float:
        total = integer_length + fractional_length
        if integer_length < 0 or fractional_length < 0 or total not in (8, 16, 32, 64):
            raise ValueError(f"Unsupported fixed-point layout: {integer_length}.{fractional_length}")
        raw = int.from_bytes(self.read(total // 8), byteorder)
        integer = raw >> fractional_length
        fraction = raw & ((1 << fractional_length) - 1)
        return integer + fraction / (1 << fractional_length)

    def read_big_endian_fixed_point(self, integer_length: int, fractional_length: int) -> float:
        return self._read_fixed_point(integer_length, fractional_length, "big")

    def read_little_endian_fixed_point(self, integer_length: int, fractional_length: int) -> float:
        return self._read_fixed_point(integer_length, fractional_length, "little")

    def read_four_cc(self) -> str:
        """Read a four-character code such as a box type."""
        return self.read(4).decode("latin-1")

    def read_pascal_string(self) -> str:
        """Read a string prefixed by a one-byte length."""
        return self.read_string(self.read_uint8())

    def read_string(self, length: int) -> str:
        return self.read(length).decode("utf-8", errors="replace")

    def read_null_terminated_string(self) -> str:
        """Read bytes up to and including a NUL byte; the NUL is dropped."""
        collected = bytearray()
        while (byte := self.read_uint8()) != 0:
            collected.append(byte)
        return collected.decode("utf-8", errors="replace")

    def read_matrix(self) -> Matrix:
        """Read nine big-endian 32-bit words into a :class:`Matrix`."""
        return Matrix(*(_UINT32.unpack(self.read(4))[0] for _ in range(9)))


class DataStream(BinaryStream):
    """A stream over bytes held in memory."""

    def __init__(self, data: Union[bytes, bytearray, memoryview] = b"") -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Invalid read size: {size}")
        available = len(self._data) - self._pos
        if size > available:
            raise EOFError(f"Cannot read {size} bytes: only {available} available")
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def tell(self) -> int:
        return self._pos

    def _size(self) -> int:
        return len(self._data)

    def _move_to(self, position: int) -> None:
        self._pos = position


class FileStream(BinaryStream):
    """A stream reading from a file on disk."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._file: BinaryIO = open(path, "rb")
        self._length = os.fstat(self._file.fileno()).st_size

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Invalid read size: {size}")
        available = self.available_bytes()
        if size > available:
            raise EOFError(f"Cannot read {size} bytes: only {available} available")
        return self._file.read(size)

    def tell(self) -> int:
        return self._file.tell()

    def _size(self) -> int:
        return self._length

    def _move_to(self, position: int) -> None:
        self._file.seek(position, os.SEEK_SET)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "FileStream":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()