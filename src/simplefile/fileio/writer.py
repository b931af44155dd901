"""Text writing sessions: each call opens, writes and closes the file once."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def write_text(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    """Write text to a file, discarding any existing content."""
    path = Path(path)
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(text)


def append_text(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    """Append text after the existing content (creates the file if missing)."""
    path = Path(path)
    with path.open("a", encoding=encoding, newline="") as f:
        f.write(text)


def write_lines(path: str | Path, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """
    Replace the file content with the given lines, each followed by a newline.
    Lines are written in iteration order.
    """
    path = Path(path)
    with path.open("w", encoding=encoding, newline="") as f:
        for line in lines:
            f.write(line + "\n")
