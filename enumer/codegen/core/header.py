"""Banner text placed at the top of generated files."""

import io
from typing import List, Optional

from rich import box as rich_box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

BOX_WIDTH = 60

DEFAULT_HEADER = [
    "DO NOT EDIT",
    "",
    "Manual changes will be overwritten.",
    "",
    "Generated by enumer",
]


def box(text: str, width: int = BOX_WIDTH) -> str:
    """Render text centred inside an ASCII box of a fixed width."""
    console = Console(
        file=io.StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )
    console.print(Panel(Text(text, justify="center"), box=rich_box.ASCII, width=width))
    lines = console.file.getvalue().splitlines()
    return "\n".join(line.rstrip() for line in lines)


def header_lines(header: Optional[str], header_from_lines: Optional[List[str]] = None) -> List[str]:
    """
    Pick the header lines for a document.

    Lines read from ``header-from`` (by the loader) win over an inline
    ``header``; with neither, the default banner is used.
    """
    if header_from_lines is not None:
        return list(header_from_lines)
    if header:
        return header.rstrip("\n").split("\n")
    return list(DEFAULT_HEADER)


def build_header(lines: List[str], width: int = BOX_WIDTH) -> str:
    return box("\n".join(lines), width)
