"""Bounds-checked cursor over an in-memory byte buffer."""

import struct

from .errors import SeekOutOfRangeError, UnexpectedEOFError


class BinaryReader:
    """Sequential reader over *data* with an explicitly movable cursor.

    Every read either returns exactly the requested number of bytes and
    advances ``pos``, or raises :class:`UnexpectedEOFError` and leaves
    ``pos`` untouched.  Nothing is ever clamped to the buffer end.
    """

    __slots__ = ("data", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.data = bytes(data)
        self.pos = 0

    def __len__(self) -> int:
        return len(self.data)

    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos

    def _take(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"negative read length {n}")
        if n > self.remaining:
            raise UnexpectedEOFError(
                f"need {n} bytes at offset 0x{self.pos:X}, "
                f"only {self.remaining} remain"
            )
        chunk = self.data[self.pos : self.pos + n]
        self.pos += n
        return chunk

    # -- fixed-width reads --------------------------------------------------

    def read_int(
        self, width: int, *, signed: bool = False, byteorder: str = "little"
    ) -> int:
        """Read a *width*-byte integer with explicit signedness and byte order."""
        return int.from_bytes(self._take(width), byteorder, signed=signed)

    def read_u16(self) -> int:
        return self.read_int(2)

    def read_u32(self) -> int:
        return self.read_int(4)

    def read_i32(self) -> int:
        return self.read_int(4, signed=True)

    def read_u64(self) -> int:
        return self.read_int(8)

    def unpack(self, fmt: struct.Struct) -> tuple:
        """Read one fixed-layout record described by *fmt*."""
        return fmt.unpack(self._take(fmt.size))

    # -- variable-length reads ----------------------------------------------

    def read_bytes(self, n: int) -> bytes:
        return self._take(n)

    def skip(self, n: int) -> None:
        self._take(n)

    def read_cstring(self) -> bytes:
        """Read bytes up to a NUL terminator, consuming the terminator."""
        end = self.data.find(b"\x00", self.pos)
        if end < 0:
            raise UnexpectedEOFError(
                f"unterminated string at offset 0x{self.pos:X}"
            )
        raw = self._take(end - self.pos)
        self.pos += 1
        return raw

    def read_wide_cstring(self) -> bytes:
        """Read UTF-16LE code units up to a zero code unit (consumed)."""
        pos = self.pos
        end = len(self.data) - 1
        while pos < end:
            if self.data[pos] == 0 and self.data[pos + 1] == 0:
                raw = self._take(pos - self.pos)
                self.pos += 2
                return raw
            pos += 2
        raise UnexpectedEOFError(
            f"unterminated UTF-16 string at offset 0x{self.pos:X}"
        )

    # -- positioning ----------------------------------------------------------

    def seek(self, pos: int) -> None:
        """Move the cursor to absolute *pos*; the buffer end itself is legal."""
        if pos < 0 or pos > len(self.data):
            raise SeekOutOfRangeError(
                f"cannot seek to 0x{pos:X} in a {len(self.data)}-byte buffer"
            )
        self.pos = pos
