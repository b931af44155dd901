"""Line-by-line text reading."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def iter_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield each line of the file in order, without its line terminator.

    The file stays open only while the generator is being consumed and is closed
    once it is exhausted (or garbage collected). Open errors are raised as OSError
    on the first next(). Bytes invalid in the encoding become U+FFFD.
    """
    path = Path(path)
    with path.open("r", encoding=encoding, errors="replace") as f:
        for line in f:
            yield line.removesuffix("\n")


def read_content(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read the whole file into one string, each line followed by a newline.

    The last line also gets a newline when the file lacks one, so the result is
    not byte-identical to files without a trailing newline.
    """
    content = ""
    count = 0
    for line in iter_lines(path, encoding=encoding):
        content += line + "\n"
        count += 1
    logger.debug("Read %d line(s) from %s", count, path)
    return content
