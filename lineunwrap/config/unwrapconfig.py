# Unwrap configuration parameters

# Trailing marker that joins a line with the next one
WRAP_MARKER = "\\"

# Characters trimmed from the end of every line before checking for the marker
TRAILING_TRIM_CHARS = " \r\n\t"

# Characters trimmed from the start of continuation lines (2nd line of a run onward)
LEADING_TRIM_CHARS = " \t"

# Temp file settings
TEMP_DIR = None  # None = system temp directory (tempfile.gettempdir())
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"  # undecodable bytes pass through unchanged

# Logging
LOG_LEVEL = "INFO"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_DIR = None  # None = no CSV log file, console only
LOG_HEADER = ["Date", "Level", "Message", "Path"]
LOGGER_NAME = "lineunwrap"
