"""An in-memory binary serializer with separate read and write modes."""

from __future__ import annotations

import struct
from enum import Enum
from typing import Any

_LENGTH = struct.Struct("<q")
_BYTE_ORDER_CHARS = "@=<>!"


class ESerializeMode(Enum):
    """Whether a serializer is reading or writing."""

    READ = 0
    WRITE = 1


class SerializeError(Exception):
    """Raised on a mode mismatch or a read past the end of the data."""


class Serializer:
    """Appends values to, or reads them back from, a byte buffer.

    Strings are stored as a little-endian 64-bit length followed by UTF-8
    bytes. Struct formats without an explicit byte order are little-endian.
    """

    def __init__(self, mode: ESerializeMode = ESerializeMode.WRITE, data: bytes = b"") -> None:
        self._mode = mode
        self._data = bytearray(data)
        self._offset = 0

    @property
    def mode(self) -> ESerializeMode:
        return self._mode

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    @property
    def offset(self) -> int:
        return self._offset

    def set_mode(self, mode: ESerializeMode) -> None:
        self._mode = mode

    def _require(self, mode: ESerializeMode) -> None:
        if self._mode is not mode:
            if mode is ESerializeMode.WRITE:
                raise SerializeError("cannot write when mode is set to read")
            raise SerializeError("cannot read when mode is set to write")

    def _take(self, count: int) -> bytes:
        if count < 0 or self._offset + count > len(self._data):
            raise SerializeError("out of range")
        chunk = bytes(self._data[self._offset:self._offset + count])
        self._offset += count
        return chunk

    @staticmethod
    def _struct(fmt: str) -> struct.Struct:
        if not fmt or fmt[0] not in _BYTE_ORDER_CHARS:
            fmt = "<" + fmt
        return struct.Struct(fmt)

    def write_string(self, text: str) -> None:
        """Write a length-prefixed string."""
        self._require(ESerializeMode.WRITE)
        encoded = text.encode("utf-8")
        self._data += _LENGTH.pack(len(encoded))
        self._data += encoded

    def write_cstring(self, text: str) -> None:
        """Write the string's bytes with no length and no terminator."""
        self._require(ESerializeMode.WRITE)
        self._data += text.encode("utf-8")

    def write_struct(self, fmt: str, *args: Any) -> None:
        """Write values packed with a ``struct`` format."""
        self._require(ESerializeMode.WRITE)
        self._data += self._struct(fmt).pack(*args)

    def read_string(self) -> str:
        """Read a length-prefixed string."""
        self._require(ESerializeMode.READ)
        (length,) = _LENGTH.unpack(self._take(_LENGTH.size))
        return self._take(length).decode("utf-8")

    def read_cstring(self) -> str:
        """Read bytes up to a NUL byte or the end of the data, skipping the NUL."""
        self._require(ESerializeMode.READ)
        end = self._data.find(0, self._offset)
        if end < 0:
            end = len(self._data)
        text = bytes(self._data[self._offset:end]).decode("utf-8")
        self._offset = end + 1
        return text

    def read_struct(self, fmt: str) -> tuple:
        """Read values packed with a ``struct`` format."""
        self._require(ESerializeMode.READ)
        layout = self._struct(fmt)
        return layout.unpack(self._take(layout.size))