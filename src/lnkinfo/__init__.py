"""lnkinfo -- decode and display Windows .lnk files (MS-SHLLINK)."""

__version__ = "0.1.0"

from .errors import (
    CorruptExtraDataError,
    FormatError,
    InvalidClassIDError,
    InvalidHeaderSizeError,
    InvalidIDListTerminatorError,
    MissingFieldError,
    SeekOutOfRangeError,
    UnexpectedEOFError,
)
from .parser import Header, LinkInfo, LnkFile, StringFields, parse_lnk
from .report import format_lnk

__all__ = [
    "parse_lnk",
    "format_lnk",
    "LnkFile",
    "Header",
    "LinkInfo",
    "StringFields",
    "FormatError",
    "MissingFieldError",
    "UnexpectedEOFError",
    "SeekOutOfRangeError",
    "InvalidHeaderSizeError",
    "InvalidClassIDError",
    "InvalidIDListTerminatorError",
    "CorruptExtraDataError",
    "__version__",
]
