"""Tests for lnkinfo.report."""

from lnkdata import TERMINAL_BLOCK, header
from lnkinfo.parser import parse_lnk
from lnkinfo.report import attribute_names, format_lnk, hotkey_str


class TestFormatLnk:
    def test_sections(self, full_lnk_bytes):
        text = format_lnk(parse_lnk(full_lnk_bytes))
        assert "--- HEADER ---" in text
        assert "--- LINK INFO ---" in text
        assert "--- STRING DATA ---" in text
        assert "--- RESOLVED ---" in text

    def test_contains_fields(self, full_lnk_bytes):
        text = format_lnk(parse_lnk(full_lnk_bytes))
        assert "2020-01-01 00:00:00 UTC" in text
        assert r'"C:\Windows\notepad.exe"' in text
        assert '"--flag value"' in text
        assert r"%SystemRoot%\notepad.exe,-3" in text
        assert "CTRL+C" in text
        assert "- HasLinkInfo" in text

    def test_minimal_omits_optional_sections(self, minimal_lnk_bytes):
        text = format_lnk(parse_lnk(minimal_lnk_bytes))
        assert "LINK INFO" not in text
        assert "STRING DATA" not in text
        assert "CreationTime:    (unset)" in text
        assert "TargetPath:      (empty)" in text

    def test_unrepresentable_time_shown_as_hex(self):
        lnk = parse_lnk(header(0, wtime=0xFFFFFFFFFFFFFFFF) + TERMINAL_BLOCK)
        text = format_lnk(lnk)
        assert "WriteTime:       0xFFFFFFFFFFFFFFFF" in text
        assert "CreationTime:    (unset)" in text

    def test_string_order(self, full_lnk_bytes):
        text = format_lnk(parse_lnk(full_lnk_bytes))
        assert text.index("WorkingDirectory:") < text.index("Arguments:")


class TestHotkey:
    def test_unset(self):
        hdr = parse_lnk(header(0) + TERMINAL_BLOCK).header
        assert hotkey_str(hdr) == ""

    def test_modifiers(self):
        hdr = parse_lnk(header(0, hot_key=0x0574) + TERMINAL_BLOCK).header
        assert hotkey_str(hdr) == "SHIFT+ALT+F5"


class TestAttributes:
    def test_names(self):
        assert attribute_names(0x21) == ["READONLY", "ARCHIVE"]

    def test_none(self):
        assert attribute_names(0) == []
