"""MS-SHLLINK constants and lookup tables shared by the parser and report."""

# ---------------------------------------------------------------------------
# ANSI code page
# ---------------------------------------------------------------------------
# Narrow string fields are stored in the "system default code page" of the
# machine that created the link.  CP-1252 covers Western/English Windows and
# is a strict superset of ASCII.
ANSI_CODEPAGE = "cp1252"

# ---------------------------------------------------------------------------
# ShellLinkHeader (MS-SHLLINK 2.1)
# ---------------------------------------------------------------------------
HEADER_SIZE = 0x4C

LINK_CLSID = b"\x01\x14\x02\x00\x00\x00\x00\x00\xc0\x00\x00\x00\x00\x00\x00\x46"

# FILETIME ticks between 1601-01-01 and 1970-01-01
FILETIME_EPOCH_DELTA = 116444736000000000
FILETIME_TICKS_PER_SECOND = 10000000

# ---------------------------------------------------------------------------
# LinkFlags bits consumed by the decoder
# ---------------------------------------------------------------------------
HAS_LINK_TARGET_ID_LIST = 0x01
HAS_LINK_INFO = 0x02
HAS_NAME = 0x04
HAS_RELATIVE_PATH = 0x08
HAS_WORKING_DIR = 0x10
HAS_ARGUMENTS = 0x20
HAS_ICON_LOCATION = 0x40
IS_UNICODE = 0x80

# StringData fields in on-disk order: (attribute name, gating bit)
STRING_FIELDS = (
    ("name", HAS_NAME),
    ("relative_path", HAS_RELATIVE_PATH),
    ("working_dir", HAS_WORKING_DIR),
    ("arguments", HAS_ARGUMENTS),
    ("icon_location", HAS_ICON_LOCATION),
)

# LinkInfo headers at least this large carry the Unicode path offsets
LINK_INFO_UNICODE_HEADER_SIZE = 0x24

# ---------------------------------------------------------------------------
# LinkFlags bit names
# ---------------------------------------------------------------------------
FLAG_NAMES = {
    0: "HasLinkTargetIDList",
    1: "HasLinkInfo",
    2: "HasName",
    3: "HasRelativePath",
    4: "HasWorkingDir",
    5: "HasArguments",
    6: "HasIconLocation",
    7: "IsUnicode",
    8: "ForceNoLinkInfo",
    9: "HasExpString",
    10: "RunInSeparateProcess",
    11: "Unused1",
    12: "HasDarwinID",
    13: "RunAsUser",
    14: "HasExpIcon",
    15: "NoPidlAlias",
    16: "Unused2",
    17: "RunWithShimLayer",
    18: "ForceNoLinkTrack",
    19: "EnableTargetMetadata",
    20: "DisableLinkPathTracking",
    21: "DisableKnownFolderTracking",
    22: "DisableKnownFolderAlias",
    23: "AllowLinkToLink",
    24: "UnaliasOnSave",
    25: "PreferEnvironmentPath",
    26: "KeepLocalIDListForUNCTarget",
}

# ---------------------------------------------------------------------------
# ShowWindow commands (MS-SHLLINK 2.1.1)
# ---------------------------------------------------------------------------
SHOW_CMD = {1: "SW_SHOWNORMAL", 3: "SW_MAXIMIZED", 7: "SW_MINIMIZED"}

# ---------------------------------------------------------------------------
# Hotkey modifier masks and virtual key names
# ---------------------------------------------------------------------------
HOTKEY_MOD = {0x01: "SHIFT", 0x02: "CTRL", 0x04: "ALT"}

VK_KEYS = {
    **{k: chr(k) for k in range(0x30, 0x3A)},  # 0-9
    **{k: chr(k) for k in range(0x41, 0x5B)},  # A-Z
    **{k: f"F{k - 0x6F}" for k in range(0x70, 0x88)},  # F1-F24
    **{k: f"NUMPAD{k - 0x60}" for k in range(0x60, 0x6A)},  # Numpad 0-9
    0x08: "BACKSPACE",
    0x09: "TAB",
    0x0D: "ENTER",
    0x1B: "ESC",
    0x20: "SPACE",
    0x21: "PAGEUP",
    0x22: "PAGEDOWN",
    0x23: "END",
    0x24: "HOME",
    0x25: "LEFT",
    0x26: "UP",
    0x27: "RIGHT",
    0x28: "DOWN",
    0x2D: "INSERT",
    0x2E: "DELETE",
    0x6A: "MULTIPLY",
    0x6B: "ADD",
    0x6D: "SUBTRACT",
    0x6E: "DECIMAL",
    0x6F: "DIVIDE",
}

# ---------------------------------------------------------------------------
# FILE_ATTRIBUTE_* bits (target file attributes in the header)
# ---------------------------------------------------------------------------
FILE_ATTRIBUTE_NAMES = {
    0x0001: "READONLY",
    0x0002: "HIDDEN",
    0x0004: "SYSTEM",
    0x0010: "DIRECTORY",
    0x0020: "ARCHIVE",
    0x0080: "NORMAL",
    0x0100: "TEMPORARY",
    0x0200: "SPARSE_FILE",
    0x0400: "REPARSE_POINT",
    0x0800: "COMPRESSED",
    0x1000: "OFFLINE",
    0x2000: "NOT_CONTENT_INDEXED",
    0x4000: "ENCRYPTED",
}
