"""Decode Windows .lnk files (MS-SHLLINK) into structured data."""

import logging
import struct
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ._constants import (
    ANSI_CODEPAGE,
    FLAG_NAMES,
    HAS_LINK_INFO,
    HAS_LINK_TARGET_ID_LIST,
    HEADER_SIZE,
    IS_UNICODE,
    LINK_CLSID,
    LINK_INFO_UNICODE_HEADER_SIZE,
    STRING_FIELDS,
)
from ._reader import BinaryReader
from ._util import decode_narrow, decode_wide, filetime_to_datetime, format_guid
from .errors import (
    CorruptExtraDataError,
    FormatError,
    InvalidClassIDError,
    InvalidHeaderSizeError,
    InvalidIDListTerminatorError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Fixed-layout records
# ---------------------------------------------------------------------------
# HeaderSize, LinkCLSID
_HEADER_PREFIX = struct.Struct("<I16s")
# LinkFlags, FileAttributes, Creation/Access/WriteTime, FileSize, IconIndex,
# ShowCommand, HotKey, 10 reserved bytes
_HEADER_BODY = struct.Struct("<IIQQQIiIH10x")
# LinkInfoSize, LinkInfoHeaderSize, LinkInfoFlags, VolumeIDOffset,
# LocalBasePathOffset, CommonNetworkRelativeLinkOffset, CommonPathSuffixOffset
_LINK_INFO = struct.Struct("<7I")
# LocalBasePathOffsetUnicode, CommonPathSuffixOffsetUnicode
_LINK_INFO_UNICODE = struct.Struct("<2I")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Header:
    """The fixed 76-byte ShellLinkHeader.

    The ``*_time`` fields are ``None`` when the timestamp is unset or lies
    beyond what :class:`datetime` can hold; the raw FILETIME values are kept
    in the matching ``*_ticks`` fields.
    """

    flags: int
    file_attributes: int
    creation_time: datetime | None
    access_time: datetime | None
    write_time: datetime | None
    file_size: int
    icon_index: int
    show_command: int
    hot_key: int
    creation_ticks: int = 0
    access_ticks: int = 0
    write_ticks: int = 0

    @property
    def hotkey_vk(self) -> int:
        return self.hot_key & 0xFF

    @property
    def hotkey_mod(self) -> int:
        return self.hot_key >> 8

    @property
    def is_unicode(self) -> bool:
        return bool(self.flags & IS_UNICODE)

    @property
    def flag_names(self) -> list[str]:
        return [
            FLAG_NAMES.get(bit, f"Bit{bit}")
            for bit in range(32)
            if self.flags & (1 << bit)
        ]


@dataclass(frozen=True, slots=True)
class LinkInfo:
    """Path strings from the LinkInfo block.

    The VolumeID and CommonNetworkRelativeLink structures are located by
    their offsets but not decoded.
    """

    size: int
    header_size: int
    flags: int
    volume_id_offset: int
    common_network_relative_link_offset: int
    local_base_path: str | None = None
    common_path_suffix: str | None = None
    local_base_path_unicode: str | None = None
    common_path_suffix_unicode: str | None = None


@dataclass(frozen=True, slots=True)
class StringFields:
    """The optional StringData section; ``None`` means the field is absent."""

    name: str | None = None
    relative_path: str | None = None
    working_dir: str | None = None
    arguments: str | None = None
    icon_location: str | None = None

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(field, value)`` for each present field, in on-disk order."""
        for attr, _ in STRING_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                yield attr, value

    @property
    def is_empty(self) -> bool:
        return next(self.items(), None) is None


@dataclass(frozen=True, slots=True)
class LnkFile:
    """A fully decoded .lnk file."""

    header: Header
    link_info: LinkInfo | None
    strings: StringFields

    @property
    def target_path(self) -> str:
        """Local base path joined with the common path suffix, if any."""
        li = self.link_info
        if li is None:
            return ""
        base = li.local_base_path_unicode or li.local_base_path or ""
        suffix = li.common_path_suffix_unicode or li.common_path_suffix or ""
        return base + suffix


# ---------------------------------------------------------------------------
# Section decoders
# ---------------------------------------------------------------------------
def decode_header(reader: BinaryReader) -> tuple[Header, int]:
    """Decode the ShellLinkHeader.  Returns ``(header, link_flags)``."""
    hdr_size, clsid = reader.unpack(_HEADER_PREFIX)
    if hdr_size != HEADER_SIZE:
        raise InvalidHeaderSizeError(
            f"Invalid header size 0x{hdr_size:08X} (expected 0x{HEADER_SIZE:X})"
        )
    if clsid != LINK_CLSID:
        raise InvalidClassIDError(
            f"Invalid link CLSID {{{format_guid(clsid)}}} "
            f"(expected {{{format_guid(LINK_CLSID)}}})"
        )

    (
        flags,
        attrs,
        ctime,
        atime,
        wtime,
        file_size,
        icon_index,
        show_cmd,
        hot_key,
    ) = reader.unpack(_HEADER_BODY)

    header = Header(
        flags=flags,
        file_attributes=attrs,
        creation_time=filetime_to_datetime(ctime),
        access_time=filetime_to_datetime(atime),
        write_time=filetime_to_datetime(wtime),
        file_size=file_size,
        icon_index=icon_index,
        show_command=show_cmd,
        hot_key=hot_key,
        creation_ticks=ctime,
        access_ticks=atime,
        write_ticks=wtime,
    )
    logger.debug("header: flags=0x%08X attrs=0x%08X", flags, attrs)
    return header, flags


def validate_id_list(reader: BinaryReader) -> None:
    """Consume the LinkTargetIDList, checking only its TerminalID."""
    size = reader.read_u16()
    body = reader.read_bytes(size)
    if body[-2:] != b"\x00\x00":
        raise InvalidIDListTerminatorError(
            f"IDList of {size} bytes does not end with a zero TerminalID"
        )
    logger.debug("id list: %d bytes", size)


def _read_narrow_at(reader: BinaryReader, pos: int, codepage: str) -> str:
    reader.seek(pos)
    return reader.read_cstring().decode(codepage, errors="replace")


def _read_wide_at(reader: BinaryReader, pos: int) -> str:
    reader.seek(pos)
    return decode_wide(reader.read_wide_cstring())


def decode_link_info(reader: BinaryReader, codepage: str = ANSI_CODEPAGE) -> LinkInfo:
    """Decode the LinkInfo block and leave the cursor just past it.

    All offsets are relative to the first byte of the block.  The cursor
    always ends at ``start + LinkInfoSize``, whatever the string reads did
    to it.
    """
    start = reader.pos
    (
        size,
        hdr_size,
        li_flags,
        vol_off,
        base_off,
        cnr_off,
        suffix_off,
    ) = reader.unpack(_LINK_INFO)

    # The Unicode offsets only exist when they fit inside the declared block
    uni_base_off = uni_suffix_off = 0
    if size >= hdr_size >= LINK_INFO_UNICODE_HEADER_SIZE:
        uni_base_off, uni_suffix_off = reader.unpack(_LINK_INFO_UNICODE)

    local_base_path = common_path_suffix = None
    local_base_path_unicode = common_path_suffix_unicode = None
    if base_off:
        local_base_path = _read_narrow_at(reader, start + base_off, codepage)
    if suffix_off:
        common_path_suffix = _read_narrow_at(reader, start + suffix_off, codepage)
    if uni_base_off:
        local_base_path_unicode = _read_wide_at(reader, start + uni_base_off)
    if uni_suffix_off:
        common_path_suffix_unicode = _read_wide_at(reader, start + uni_suffix_off)

    reader.seek(start + size)
    logger.debug("link info: @0x%X size=%d flags=0x%X", start, size, li_flags)

    return LinkInfo(
        size=size,
        header_size=hdr_size,
        flags=li_flags,
        volume_id_offset=vol_off,
        common_network_relative_link_offset=cnr_off,
        local_base_path=local_base_path,
        common_path_suffix=common_path_suffix,
        local_base_path_unicode=local_base_path_unicode,
        common_path_suffix_unicode=common_path_suffix_unicode,
    )


def read_string_field(
    reader: BinaryReader, is_unicode: bool, codepage: str = ANSI_CODEPAGE
) -> str:
    """Read one counted StringData entry."""
    count = reader.read_u16()
    if is_unicode:
        return decode_wide(reader.read_bytes(count * 2))
    return decode_narrow(reader.read_bytes(count), codepage)


def decode_string_fields(
    reader: BinaryReader, flags: int, codepage: str = ANSI_CODEPAGE
) -> StringFields:
    """Decode every StringData entry whose gating bit is set in *flags*."""
    is_unicode = bool(flags & IS_UNICODE)
    values = {}
    for attr, bit in STRING_FIELDS:
        if flags & bit:
            values[attr] = read_string_field(reader, is_unicode, codepage)
    logger.debug("string data: %s", ", ".join(values) or "none")
    return StringFields(**values)


def skip_extra_data(reader: BinaryReader) -> int:
    """Skip ExtraData blocks up to the terminal block.  Returns the count."""
    count = 0
    while True:
        block_start = reader.pos
        block_size = reader.read_u32()
        if block_size == 0:
            break
        if block_size < 4:
            raise CorruptExtraDataError(
                f"ExtraData block at 0x{block_start:X} declares size {block_size}"
            )
        reader.skip(block_size - 4)
        count += 1
    logger.debug("extra data: skipped %d block(s)", count)
    return count


# ---------------------------------------------------------------------------
# Main parser
# ---------------------------------------------------------------------------
@contextmanager
def _stage(name):
    try:
        yield
    except FormatError as exc:
        if exc.stage is None:
            exc.stage = name
        raise


def parse_lnk(
    source: str | Path | bytes | bytearray, *, codepage: str = ANSI_CODEPAGE
) -> LnkFile:
    """Parse a .lnk file and return a :class:`LnkFile`.

    Decoding is all-or-nothing: the first malformed or truncated section
    raises a :class:`~lnkinfo.errors.FormatError` whose ``stage`` names
    that section.

    Args:
        source: A file path (str or Path) or raw bytes of a .lnk file.
        codepage: Codec used for non-Unicode strings.
    """
    data = Path(source).read_bytes() if isinstance(source, (str, Path)) else source
    reader = BinaryReader(data)

    with _stage("header"):
        header, flags = decode_header(reader)

    if flags & HAS_LINK_TARGET_ID_LIST:
        with _stage("id_list"):
            validate_id_list(reader)

    link_info = None
    if flags & HAS_LINK_INFO:
        with _stage("link_info"):
            link_info = decode_link_info(reader, codepage)

    with _stage("string_data"):
        strings = decode_string_fields(reader, flags, codepage)

    with _stage("extra_data"):
        skip_extra_data(reader)

    return LnkFile(header=header, link_info=link_info, strings=strings)
