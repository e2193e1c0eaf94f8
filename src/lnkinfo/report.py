"""Human-readable rendering of a decoded :class:`~lnkinfo.parser.LnkFile`."""

from datetime import datetime

from ._constants import FILE_ATTRIBUTE_NAMES, HOTKEY_MOD, SHOW_CMD, VK_KEYS
from .parser import Header, LnkFile

_STRING_LABELS = {
    "name": "Name",
    "relative_path": "RelativePath",
    "working_dir": "WorkingDirectory",
    "arguments": "Arguments",
    "icon_location": "IconLocation",
}


def _time_str(value: datetime | None, ticks: int) -> str:
    if ticks == 0:
        return "(unset)"
    if value is None:
        return f"0x{ticks:016X}"
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


def hotkey_str(header: Header) -> str:
    """Render the HotKey field as e.g. ``CTRL+ALT+F5``; empty when unset."""
    mod_parts = [n for b, n in HOTKEY_MOD.items() if header.hotkey_mod & b]
    vk = header.hotkey_vk
    vk_name = VK_KEYS.get(vk, f"0x{vk:02X}") if vk else ""
    return "+".join(mod_parts + ([vk_name] if vk_name else []))


def attribute_names(attrs: int) -> list[str]:
    return [name for bit, name in FILE_ATTRIBUTE_NAMES.items() if attrs & bit]


def format_lnk(lnk: LnkFile) -> str:
    """Return a human-readable string representation of *lnk*."""
    hdr = lnk.header
    lines: list[str] = []

    lines.append("--- HEADER ---")
    lines.append(f"  LinkFlags:       0x{hdr.flags:08X}")
    for name in hdr.flag_names:
        lines.append(f"    - {name}")
    attrs = attribute_names(hdr.file_attributes)
    attrs_display = f" ({'|'.join(attrs)})" if attrs else ""
    lines.append(f"  FileAttributes:  0x{hdr.file_attributes:08X}{attrs_display}")
    ctime = _time_str(hdr.creation_time, hdr.creation_ticks)
    atime = _time_str(hdr.access_time, hdr.access_ticks)
    wtime = _time_str(hdr.write_time, hdr.write_ticks)
    lines.append(f"  CreationTime:    {ctime}")
    lines.append(f"  AccessTime:      {atime}")
    lines.append(f"  WriteTime:       {wtime}")
    lines.append(f"  FileSize:        {hdr.file_size} (0x{hdr.file_size:08X})")
    lines.append(f"  IconIndex:       {hdr.icon_index}")
    show_name = SHOW_CMD.get(hdr.show_command, "?")
    lines.append(f"  ShowCommand:     {hdr.show_command} ({show_name})")
    lines.append(
        f"  HotKey:          {hotkey_str(hdr) or 'None'} "
        f"(vk=0x{hdr.hotkey_vk:02X} mod=0x{hdr.hotkey_mod:02X})"
    )

    li = lnk.link_info
    if li is not None:
        lines.append("")
        lines.append("--- LINK INFO ---")
        lines.append(f"  Size:            {li.size}")
        lines.append(f"  Flags:           0x{li.flags:08X}")
        if li.local_base_path is not None:
            lines.append(f'  LocalBasePath:   "{li.local_base_path}"')
        if li.common_path_suffix is not None:
            lines.append(f'  CommonPathSuffix: "{li.common_path_suffix}"')
        if li.local_base_path_unicode is not None:
            lines.append(f'  LocalBasePathUnicode: "{li.local_base_path_unicode}"')
        if li.common_path_suffix_unicode is not None:
            lines.append(
                f'  CommonPathSuffixUnicode: "{li.common_path_suffix_unicode}"'
            )

    if not lnk.strings.is_empty:
        lines.append("")
        lines.append("--- STRING DATA ---")
        for attr, value in lnk.strings.items():
            label = f"{_STRING_LABELS[attr]}:"
            lines.append(f'  {label:<18} "{value}"')

    lines.append("")
    lines.append("--- RESOLVED ---")
    lines.append(f"  TargetPath:      {lnk.target_path or '(empty)'}")
    lines.append(f"  Arguments:       {lnk.strings.arguments or '(empty)'}")
    lines.append(f"  WorkingDirectory: {lnk.strings.working_dir or '(empty)'}")
    lines.append(f"  Description:     {lnk.strings.name or '(empty)'}")
    icon_display = lnk.strings.icon_location
    if icon_display:
        icon_display = f"{icon_display},{hdr.icon_index}"
    lines.append(f"  IconLocation:    {icon_display or '(empty)'}")

    return "\n".join(lines)
