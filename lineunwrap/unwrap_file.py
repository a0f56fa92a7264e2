#!/usr/bin/env python3
"""
Unwrap continuation lines of a template into a temp file.

Lines ending in a backslash are joined with the following line(s) so long
template expressions can be written over several lines. Absorbed lines are
left empty, which keeps line numbers in template parser errors correct.

Usage: lineunwrap <file> [options]

Options:
  --marker M        Continuation marker (default: backslash)
  --keep            Keep the temp file and print its path instead of the text
  --temp-dir D      Directory for the temp file (default: system temp dir)
  --config FILE     YAML file overriding the defaults in config/unwrapconfig.py
  --log-dir D       Write a CSV log (a_unwrap.log) into this directory
  --log-level L     DEBUG, INFO, WARNING or ERROR
"""

import argparse
import contextlib
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from lineunwrap.common.config_loader import load_config
from lineunwrap.common.custom_logger import setup_global_logger
from lineunwrap.common.errors import TempFileWriteError, UnwrapError, no_cleanup
from lineunwrap.common.file_utils import PathLike, make_cleanup, read_file, temp_file
from lineunwrap.common.line_utils import unwrap_lines_in_string
from lineunwrap.config.unwrapconfig import LOG_HEADER, LOG_LEVELS, LOGGER_NAME, WRAP_MARKER

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class UnwrapResult:
    path: str
    cleanup: Callable[[], None] = no_cleanup


def unwrap(file_path: PathLike, marker: str = WRAP_MARKER, temp_dir: Optional[PathLike] = None) -> UnwrapResult:
    """
    Unwrap ``file_path`` into a new temp file.

    Returns the temp file path and a cleanup action that deletes it. The
    caller owns the file and must call ``cleanup`` (or use ``unwrapped``).

    Raises:
        SourceOpenError, SourceReadError, TempFileCreateError: nothing was
            created; ``err.path`` is "" and ``err.cleanup`` is a no-op.
        TempFileWriteError: the temp file exists; ``err.path`` names it and
            ``err.cleanup`` removes it.
    """
    text = read_file(file_path)
    tmp = temp_file(file_path, temp_dir)

    cleanup = make_cleanup(tmp.name)
    text = unwrap_lines_in_string(text, marker)
    try:
        with tmp:
            tmp.write(text)
    except OSError as e:
        message = f"Failed to write unwrapped text to: {tmp.name}"
        logger.warning(message, extra={"Path": tmp.name})
        raise TempFileWriteError(message, path=tmp.name, cleanup=cleanup) from e

    logger.info(f"Successfully unwrapped lines to temp file {tmp.name}", extra={"Path": tmp.name})
    return UnwrapResult(tmp.name, cleanup)


@contextlib.contextmanager
def unwrapped(file_path: PathLike, marker: str = WRAP_MARKER, temp_dir: Optional[PathLike] = None) -> Iterator[str]:
    """Context manager form of ``unwrap``: yields the temp path and always removes it."""
    try:
        result = unwrap(file_path, marker, temp_dir)
    except TempFileWriteError as e:
        e.cleanup()
        raise
    try:
        yield result.path
    finally:
        result.cleanup()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='lineunwrap',
        description='Join backslash-continued lines of a template, keeping line numbers'
    )
    parser.add_argument('file', type=Path, help='Template file to unwrap')
    parser.add_argument('--marker', default=None,
                        help='Continuation marker (default: backslash)')
    parser.add_argument('--keep', action='store_true',
                        help='Keep the temp file and print its path instead of the unwrapped text')
    parser.add_argument('--temp-dir', default=None,
                        help='Directory for the temp file (default: system temp dir)')
    parser.add_argument('--config', type=Path, default=None,
                        help='YAML file with marker/temp_dir/log_level/log_dir settings')
    parser.add_argument('--log-dir', default=None,
                        help='Write a CSV log file into this directory')
    parser.add_argument('--log-level', default=None,
                        choices=LOG_LEVELS,
                        help='Logging level')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(
            args.config,
            marker=args.marker,
            temp_dir=args.temp_dir,
            log_level=args.log_level,
            log_dir=args.log_dir,
        )
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    log_dir = Path(config.log_dir) if config.log_dir else None
    setup_global_logger(script_name='unwrap', cwd=log_dir, log_level=config.log_level,
                        headers=LOG_HEADER, logger_name=LOGGER_NAME)

    try:
        if args.keep:
            result = unwrap(args.file, config.marker, config.temp_dir)
            print(result.path)
        else:
            with unwrapped(args.file, config.marker, config.temp_dir) as path:
                # Raw bytes so text in any encoding reaches stdout unchanged
                with open(path, 'rb') as f:
                    sys.stdout.flush()
                    sys.stdout.buffer.write(f.read())
                    sys.stdout.buffer.flush()
    except UnwrapError as e:
        e.cleanup()
        logger.error(e.message, extra={"Path": str(args.file)})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
