import os
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union
import sys

############### LOGGING ###############

class CSVFormatter(logging.Formatter):
    """CSV-safe formatter that always emits columns in the declared order."""

    def __init__(self, columns, datefmt=None):
        super().__init__()
        self.columns = [str(c) for c in columns]
        self.datefmt = datefmt or '%m/%d'

    def _escape(self, v) -> str:
        if v is None:
            return ''
        s = str(v)
        # Double up quotes, wrap field in quotes to be safe
        s = s.replace('"', '""')
        return f'"{s}"'

    def format(self, record):
        message = record.getMessage()
        if record.exc_info:
            # Flatten tracebacks so one record stays one CSV row
            message = f"{message} | {self.formatException(record.exc_info)}".replace('\n', ' ')

        row = []
        for idx, col in enumerate(self.columns):
            if idx == 0:  # Date
                row.append(self._escape(self.formatTime(record, self.datefmt)))
            elif idx == 1:  # Level
                row.append(self._escape(record.levelname))
            elif idx == 2:  # Msg
                row.append(self._escape(message))
            else:
                # Extras are expected to be set on the record via logging.extra
                row.append(self._escape(record.__dict__.get(col, '')))
        return ','.join(row)


def validate_headers(headers: Union[List[str], Tuple[str, ...]]) -> None:
    """The first three columns must be Date, Level, Msg (case-insensitive)."""
    if headers is None:
        raise ValueError("setup_global_logger requires a 'headers' argument (first three must be Date,Level,Msg)")
    if not isinstance(headers, (list, tuple)):
        raise ValueError("headers must be a list or tuple of column names")
    if len(headers) < 3:
        raise ValueError("headers must include at least the first three columns: Date, Level, Msg")
    first_three = [h.strip().lower() for h in headers[:3]]
    if not (first_three[0] == 'date' and first_three[1] == 'level' and first_three[2] in ('msg', 'message')):
        raise ValueError("headers must start with ['Date','Level','Msg'|'Message'] in that order")


# --- Global Logging Setup ---
def setup_global_logger(
    script_name: str,
    cwd: Optional[Path] = None,
    log_level: Union[int, str] = 'INFO',
    headers: Union[List[str], Tuple[str, ...]] = None,
    logger_name: str = 'lineunwrap'
) -> logging.Logger:
    """
    Set up a named logger with a console handler (``LEVEL: message``) and, when
    ``cwd`` is given, a CSV file handler (all levels) at ``cwd/a_<script>.log``.
    Overwrites the log file each run and writes the header line first.
    Calling it again replaces the handlers installed by the previous call.
    """
    # Map string log_level to int
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)

    validate_headers(headers)

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(log_level)
    logger.propagate = False  # Avoid root logger interference

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if cwd is None:
        return logger

    log_path = Path(cwd) / f"a_{os.path.splitext(script_name)[0]}.log"
    os.makedirs(log_path.parent, exist_ok=True)
    header_line = ','.join(str(h) for h in headers) + '\n'
    try:
        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
    except OSError as e:
        logger.warning(f"Could not create file handler for {log_path}: {e}")
        return logger
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(CSVFormatter(headers, datefmt='%m-%d %H:%M'))
    # Write header to the handler's stream to avoid a second truncation
    file_handler.stream.write(header_line)
    file_handler.stream.flush()
    logger.addHandler(file_handler)

    logger.info(f"Logger initialized: {log_path}")
    return logger
