"""File I/O helpers: scoped read and write sessions."""

from simplefile.fileio.reader import iter_lines, read_content
from simplefile.fileio.writer import append_text, write_lines, write_text

__all__ = ["append_text", "iter_lines", "read_content", "write_lines", "write_text"]
