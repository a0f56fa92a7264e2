"""Join backslash-continued template lines without shifting line numbers."""

from lineunwrap.common.errors import (
    SourceOpenError,
    SourceReadError,
    TempFileCreateError,
    TempFileWriteError,
    UnwrapError,
)
from lineunwrap.common.line_utils import unwrap_lines, unwrap_lines_in_string
from lineunwrap.unwrap_file import UnwrapResult, unwrap, unwrapped

__version__ = "0.1.0"
