"""Writer: write, append, then overwrite simple.txt with a list of names."""

from __future__ import annotations

import logging
from argparse import Namespace
from collections.abc import Callable
from pathlib import Path

from simplefile.config import FIRST_SENTENCE, NAMES, SECOND_SENTENCE, load_config, target_path
from simplefile.fileio import append_text, write_lines, write_text

logger = logging.getLogger(__name__)


def _sessions(path: Path, encoding: str) -> list[tuple[str, str, Callable[[], None]]]:
    """(label, preview of what is written, action) for each session, in run order."""
    return [
        ("write", repr(FIRST_SENTENCE), lambda: write_text(path, FIRST_SENTENCE, encoding=encoding)),
        ("append", repr(SECOND_SENTENCE), lambda: append_text(path, SECOND_SENTENCE, encoding=encoding)),
        ("write names", ", ".join(NAMES), lambda: write_lines(path, NAMES, encoding=encoding)),
    ]


def run(args: Namespace) -> list[bool]:
    """
    Run the three write sessions against simple.txt in the current directory.

    A failing session is logged with traceback and the next one still runs.
    Returns one success flag per session (all True for --dry-run).
    """
    dry_run = getattr(args, "dry_run", False)
    config = load_config()
    encoding = config["encoding"]
    path = target_path()

    results: list[bool] = []
    for label, preview, action in _sessions(path, encoding):
        if dry_run:
            logger.info("Would %s %s: %s", label, path, preview)
            results.append(True)
            continue
        logger.debug("Session %s: %s", label, path)
        try:
            action()
        except OSError:
            logger.exception("Failed to %s %s", label, path)
            results.append(False)
        else:
            results.append(True)
    return results
