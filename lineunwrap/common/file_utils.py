import logging
import os
import tempfile
from pathlib import Path
from typing import IO, Callable, Optional, Tuple, Union

from lineunwrap.common.errors import SourceOpenError, SourceReadError, TempFileCreateError
from lineunwrap.config.unwrapconfig import ENCODING, ENCODING_ERRORS, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

PathLike = Union[str, os.PathLike]


def read_file(file_path: PathLike) -> str:
    """Return the full text of ``file_path``; the handle is closed right after reading."""
    try:
        # newline='' keeps CR/LF as written; trailing CRs are trimmed when unwrapping
        f = open(file_path, 'r', encoding=ENCODING, errors=ENCODING_ERRORS, newline='')
    except OSError as e:
        message = f"Failed to open file: {file_path}"
        logger.warning(message, extra={"Path": str(file_path)})
        raise SourceOpenError(message) from e

    with f:
        try:
            return f.read()
        except OSError as e:
            message = f"Failed to read from file: {file_path}"
            logger.warning(message, extra={"Path": str(file_path)})
            raise SourceReadError(message) from e


def temp_file_pattern(file_path: PathLike) -> Tuple[str, str]:
    """Split the base name into the (prefix, suffix) a temp file name is built from.

    ``templates/report.tmpl`` gives ``("report", ".tmpl")``, so the temp file
    looks like ``report<random>.tmpl`` and keeps the extension. The extension
    starts at the last dot, so ``.gitignore`` gives ``("", ".gitignore")``.
    """
    base = Path(file_path).name
    dot = base.rfind(".")
    if dot < 0:
        return base, ""
    return base[:dot], base[dot:]


def temp_file(file_path: PathLike, temp_dir: Optional[PathLike] = None) -> IO[str]:
    """Create an empty temp file named after ``file_path`` and open it for writing."""
    prefix, suffix = temp_file_pattern(file_path)
    pattern = f"{prefix}*{suffix}"
    try:
        handle = tempfile.NamedTemporaryFile(
            mode='w', encoding=ENCODING, errors=ENCODING_ERRORS, newline='',
            prefix=prefix, suffix=suffix, dir=temp_dir, delete=False,
        )
    except OSError as e:
        message = f"Failed to create a temp file: {pattern}"
        logger.warning(message, extra={"Path": pattern})
        raise TempFileCreateError(message) from e

    logger.info(f"Successfully created temp file {handle.name}", extra={"Path": handle.name})
    return handle


def make_cleanup(path: PathLike) -> Callable[[], None]:
    """Return a no-argument action that deletes ``path``; calling it twice is harmless."""
    def cleanup() -> None:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        else:
            logger.debug(f"Removed temp file {path}", extra={"Path": str(path)})

    return cleanup
