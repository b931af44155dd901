"""CLI entry points: argument parsing, logging setup and program dispatch."""

from __future__ import annotations

import argparse
import logging
import sys

from simplefile import __version__
from simplefile.config import load_config


# Package logger; commands log under its children
LOGGER_NAME = __name__.split(".")[0]
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _resolve_level(verbose: bool, quiet: bool, configured: object) -> int:
    """--verbose/--quiet win over the configured level; unknown levels fall back to INFO."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    level = getattr(logging, str(configured or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the simplefile logger once: stderr handler, plus a file handler
    when logging.file is set. A log file that cannot be opened is skipped.
    """
    log_cfg = load_config().get("logging")
    if not isinstance(log_cfg, dict):
        log_cfg = {}
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(verbose, quiet, log_cfg.get("level")))
    if logger.handlers:
        return

    fmt = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    logger.addHandler(console)
    log_file = log_cfg.get("file")
    if isinstance(log_file, str) and log_file:
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            return
        fh.setFormatter(fmt)
        logger.addHandler(fh)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simplefile",
        description="Read or write simple.txt in the current directory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be written without touching the file.",
    )
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "simplefile write --dry-run" works
    global_flags = argparse.ArgumentParser(add_help=False)
    global_flags.add_argument("--dry-run", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_read = subparsers.add_parser("read", help="Print the contents of simple.txt.", parents=[global_flags])
    p_read.set_defaults(run="read")

    p_write = subparsers.add_parser(
        "write",
        help="Write a sentence, append another, then overwrite with a list of names.",
        parents=[global_flags],
    )
    p_write.set_defaults(run="write")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )

    run = getattr(args, "run", None)
    if run == "read":
        from simplefile.commands.read_cmd import run as cmd_run
    elif run == "write":
        from simplefile.commands.write_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


def read_main() -> None:
    """simplefile-read: run the reader. No arguments are consumed."""
    from simplefile.commands.read_cmd import run as cmd_run

    setup_logging()
    cmd_run(argparse.Namespace(dry_run=False))


def write_main() -> None:
    """simplefile-write: run the writer. No arguments are consumed."""
    from simplefile.commands.write_cmd import run as cmd_run

    setup_logging()
    cmd_run(argparse.Namespace(dry_run=False))
