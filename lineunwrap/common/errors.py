"""Errors raised while unwrapping a file.

Every error carries the path of the temp file it leaves behind (``""`` when
nothing was created) and a cleanup action that is always safe to call.
"""

from typing import Callable, Optional


def no_cleanup() -> None:
    """Cleanup action used when there is nothing to remove."""


class UnwrapError(Exception):
    def __init__(self, message: str, path: str = "", cleanup: Optional[Callable[[], None]] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cleanup = cleanup or no_cleanup


class SourceOpenError(UnwrapError):
    pass


class SourceReadError(UnwrapError):
    pass


class TempFileCreateError(UnwrapError):
    pass


class TempFileWriteError(UnwrapError):
    """The temp file exists; ``path`` and ``cleanup`` point at it."""
