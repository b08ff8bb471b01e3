"""Processor count, clock speeds and the tray tooltip text."""

from __future__ import annotations

import gettext
from pathlib import Path

_ = gettext.translation("pmcputemp", localedir="/usr/share/locale", fallback=True).gettext

PRG = "Pmcputemp"
VER = "1.00"
CPU_FILE = "/proc/cpuinfo"


def count_processors(path=CPU_FILE) -> int:
    """Count the 'processor' entries in a cpuinfo file; 0 if unreadable."""
    try:
        with open(path, errors="replace") as handle:
            return sum(1 for line in handle if line.startswith("processor"))
    except OSError:
        return 0


def _field_value(line: str) -> str | None:
    fields = [part for part in line.split(":") if part]
    if len(fields) < 2:
        return None
    pieces = [part for part in fields[1].split("\n") if part]
    return pieces[0] if pieces else None


def cpu_frequencies(path=CPU_FILE) -> list[str]:
    """Return the 'cpu MHz' values as written after the colon, newline removed."""
    with open(path, errors="replace") as handle:
        values = (_field_value(line) for line in handle if line.startswith("cpu MHz"))
        return [value for value in values if value is not None]


def build_tooltip(path=CPU_FILE, with_version=True) -> str:
    """Build the tooltip shown over the tray icon."""
    frequencies = "".join(
        f"CPU {index}: {value:>8} MHz\n"
        for index, value in enumerate(cpu_frequencies(path))
    )
    body = (
        f"CPU {_('temperature')}\n"
        f"{_('Processors')} = {count_processors(path)}\n"
        f"{frequencies}"
    )
    if with_version:
        return f"{PRG} {VER}\n{body}"
    return body