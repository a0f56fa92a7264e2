import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lineunwrap.config.unwrapconfig import LOGGER_NAME


@pytest.fixture
def write_template(tmp_path):
    """Write ``text`` to ``tmp_path/name`` byte for byte and return the path."""
    def _write(text: str, name: str = "template.tmpl") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    out = tmp_path / "tmp_out"
    out.mkdir()
    return out


@pytest.fixture(autouse=True)
def _reset_logger():
    """Let caplog see records and drop handlers a test installed."""
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
