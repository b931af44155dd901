"""Reader: print the contents of simple.txt from the current directory."""

from __future__ import annotations

import logging
from argparse import Namespace

from simplefile.config import load_config, target_path
from simplefile.fileio import read_content

logger = logging.getLogger(__name__)


def run(args: Namespace) -> None:
    """
    Read simple.txt line by line and print the accumulated content once.
    On an I/O error, log it with traceback and print nothing.
    """
    config = load_config()
    encoding = config["encoding"]
    path = target_path()

    try:
        content = read_content(path, encoding=encoding)
    except OSError:
        logger.exception("Failed to read %s", path)
        return

    print(content)
