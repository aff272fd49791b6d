"""CLI entrypoint and logging setup."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable

from path_sanitizer import __version__
from path_sanitizer.config import (
    LOG_LEVELS,
    SHELLS,
    ConfigError,
    Options,
    load_config,
    validate_options,
)
from path_sanitizer.sanitizer import sanitize

DESCRIPTION = """\
Sanitizes $PATH, optionally adds the current (dot) directory, adds directories.
Emits a PATH environment setting that can be sourced, most useful in a shell
startup file. The DIRS arguments must point to directories just above bin/ or
sbin/ (e.g., /usr/local)."""

EPILOG = """\
examples:
  path-sanitizer -s bash /opt/local  # export PATH=... with /opt/local/{bin,sbin} when these exist
  path-sanitizer -s bash -c          # export PATH=... with the current (dot) directory present

usage in startup files:
  source <(path-sanitizer ...)       # bash
  eval "$(path-sanitizer ...)"       # zsh or fish

Long flags may be abbreviated (e.g. '--sh' for '--shell')."""


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="path-sanitizer",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-s",
        "--shell",
        choices=SHELLS,
        help="shell type: one of 'bash', 'zsh' or 'fish'",
    )
    parser.add_argument(
        "-c",
        "--current-dir",
        dest="current_dir",
        action="store_true",
        help="ensure the current directory (dot) is in $PATH (default)",
    )
    parser.add_argument(
        "-C",
        "--no-current-dir",
        dest="current_dir",
        action="store_false",
        help="do not add the current directory",
    )
    parser.add_argument(
        "-p",
        "--prepend",
        dest="prepend",
        action="store_true",
        help="prepend to $PATH (default)",
    )
    parser.add_argument(
        "-a",
        "--append",
        dest="prepend",
        action="store_false",
        help="append to $PATH instead of prepending",
    )
    parser.add_argument("--config", help="path to config.toml")
    parser.add_argument("--log-level", help="override log level")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "dirs",
        nargs="*",
        metavar="DIRS",
        help="directories to check for bin/ and sbin/ subdirectories",
    )
    parser.set_defaults(current_dir=None, prepend=None)

    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_intermixed_args(list(argv))


def setup_logging(level: str) -> None:
    """Send log records to stderr; stdout carries only the PATH statement."""
    logging.basicConfig(
        level=_parse_level(level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: Iterable[str] | None = None) -> int:
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)

    try:
        options = build_options(args)
    except ConfigError as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return 2

    setup_logging(options.log_level)
    logger = logging.getLogger(__name__)
    logger.debug(
        "event=command_start shell=%s prepend=%s current_dir=%s dirs=%s",
        options.shell,
        options.prepend,
        options.include_current_dir,
        ",".join(options.candidates),
    )
    print(sanitize(os.environ.get("PATH", ""), options))
    return 0


def build_options(args: argparse.Namespace) -> Options:
    """Merge an optional config file with command line flags."""
    if args.config:
        base = load_config(Path(args.config).expanduser())
    else:
        base = Options(shell="")
    options = Options(
        shell=args.shell or base.shell,
        include_current_dir=(
            args.current_dir
            if args.current_dir is not None
            else base.include_current_dir
        ),
        prepend=args.prepend if args.prepend is not None else base.prepend,
        candidates=tuple(args.dirs) if args.dirs else base.candidates,
        log_level=args.log_level or base.log_level,
    )
    validate_options(options)
    return options


def _parse_level(value: str) -> int:
    normalized = value.lower()
    if normalized not in LOG_LEVELS:
        raise ConfigError(f"invalid log level: {value}")
    return logging.getLevelName(normalized.upper())
