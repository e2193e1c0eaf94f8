"""Exceptions raised while decoding .lnk data."""


class FormatError(Exception):
    """Raised when data does not conform to the MS-SHLLINK format.

    ``stage`` names the decoding step that failed (``"header"``,
    ``"link_info"``, ...).  It is ``None`` until :func:`lnkinfo.parse_lnk`
    tags the error on its way out.
    """

    def __init__(self, message: str, *, stage: str | None = None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage:
            return f"{self.stage}: {self.message}"
        return self.message


class MissingFieldError(FormatError):
    """Raised when a required field is absent or truncated."""


class UnexpectedEOFError(MissingFieldError):
    """A read needed more bytes than remain in the buffer."""


class SeekOutOfRangeError(FormatError):
    """An absolute reposition pointed past the end of the buffer."""


class InvalidHeaderSizeError(FormatError):
    """The HeaderSize field is not 0x4C."""


class InvalidClassIDError(FormatError):
    """The LinkCLSID field does not match the Shell Link class identifier."""


class InvalidIDListTerminatorError(FormatError):
    """The LinkTargetIDList does not end with a zero TerminalID."""


class CorruptExtraDataError(FormatError):
    """An ExtraData block declares a size smaller than its own size field."""
