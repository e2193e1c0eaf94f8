"""Shared fixtures for lnkinfo tests."""

import pytest

from lnkdata import (
    FT_2020,
    TERMINAL_BLOCK,
    extra_block,
    header,
    id_list,
    link_info,
    string_field,
)
from lnkinfo._constants import (
    HAS_ARGUMENTS,
    HAS_ICON_LOCATION,
    HAS_LINK_INFO,
    HAS_LINK_TARGET_ID_LIST,
    HAS_NAME,
    HAS_WORKING_DIR,
    IS_UNICODE,
)


@pytest.fixture
def minimal_lnk_bytes():
    """A header with no optional sections, followed by the terminal block."""
    return header(0) + TERMINAL_BLOCK


@pytest.fixture
def full_lnk_bytes():
    """A notepad.exe shortcut with an IDList, LinkInfo and Unicode strings."""
    flags = (
        HAS_LINK_TARGET_ID_LIST
        | HAS_LINK_INFO
        | HAS_NAME
        | HAS_WORKING_DIR
        | HAS_ARGUMENTS
        | HAS_ICON_LOCATION
        | IS_UNICODE
    )
    return (
        header(
            flags,
            ctime=FT_2020,
            atime=FT_2020,
            wtime=FT_2020,
            file_size=201216,
            icon_index=-3,
            hot_key=0x0243,
        )
        + id_list()
        + link_info(r"C:\Windows\notepad.exe", "")
        + string_field("Text editor")
        + string_field(r"C:\Windows")
        + string_field("--flag value")
        + string_field(r"%SystemRoot%\notepad.exe")
        + extra_block(b"\x00" * 88)
        + TERMINAL_BLOCK
    )


@pytest.fixture
def ansi_lnk_bytes():
    """A non-Unicode shortcut whose target is split into base and suffix."""
    flags = HAS_LINK_INFO | HAS_NAME
    return (
        header(flags)
        + link_info("C:\\Program Files\\", "caf\xe9\\app.exe")
        + string_field("Caf\xe9", unicode=False)
        + TERMINAL_BLOCK
    )


@pytest.fixture
def lnk_file(tmp_path, full_lnk_bytes):
    """*full_lnk_bytes* written to disk."""
    path = tmp_path / "notepad.lnk"
    path.write_bytes(full_lnk_bytes)
    return path
