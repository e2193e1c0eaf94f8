"""Internal helpers for FILETIME conversion, GUID and string formatting."""

import struct
from datetime import UTC, datetime, timedelta

from ._constants import FILETIME_EPOCH_DELTA, FILETIME_TICKS_PER_SECOND

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def filetime_to_datetime(ticks: int) -> datetime | None:
    """Convert a FILETIME tick count to an aware UTC datetime.

    Zero means "not set" and yields ``None``, as does a tick count past the
    range of :class:`datetime` (year 9999).  Sub-second precision is
    dropped; the seconds value is truncated toward zero.
    """
    if ticks == 0:
        return None
    delta = ticks - FILETIME_EPOCH_DELTA
    seconds = abs(delta) // FILETIME_TICKS_PER_SECOND
    if delta < 0:
        seconds = -seconds
    try:
        return _UNIX_EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


def format_guid(data: bytes, off: int = 0) -> str:
    """Format 16 bytes at *off* as an uppercase UUID string (no braces).

    Windows GUIDs are stored in mixed-endian layout:
    uint32-LE, uint16-LE, uint16-LE, 8 raw bytes.
    """
    if len(data) - off < 16:
        return "?"
    d1, d2, d3 = struct.unpack_from("<IHH", data, off)
    d4 = data[off + 8 : off + 10].hex().upper()
    d5 = data[off + 10 : off + 16].hex().upper()
    return f"{d1:08X}-{d2:04X}-{d3:04X}-{d4}-{d5}"


def decode_narrow(raw: bytes, codepage: str) -> str:
    """Decode a code-page string, dropping trailing NUL padding."""
    return raw.rstrip(b"\x00").decode(codepage, errors="replace")


def decode_wide(raw: bytes) -> str:
    """Decode a UTF-16LE string, dropping trailing NUL padding."""
    return raw.decode("utf-16-le", errors="replace").rstrip("\x00")
