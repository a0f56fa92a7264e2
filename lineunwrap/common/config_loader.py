"""Load unwrap settings from the config module, an optional YAML file and CLI flags."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from lineunwrap.config.unwrapconfig import LOG_DIR, LOG_LEVEL, LOG_LEVELS, TEMP_DIR, WRAP_MARKER


@dataclass(frozen=True)
class UnwrapConfig:
    marker: str = WRAP_MARKER
    temp_dir: Optional[str] = TEMP_DIR
    log_level: str = LOG_LEVEL
    log_dir: Optional[str] = LOG_DIR


def load_config(config_path: Optional[Path] = None, **overrides) -> UnwrapConfig:
    """
    Build an UnwrapConfig.

    Precedence (lowest to highest): unwrapconfig.py defaults, keys from the
    YAML file at ``config_path``, then ``overrides`` whose value is not None.
    Unknown YAML keys raise ValueError so typos do not pass silently.

    Example YAML:
        marker: "\\\\"
        temp_dir: /tmp/templates
        log_level: DEBUG
    """
    config = UnwrapConfig()
    known = {f.name for f in fields(UnwrapConfig)}

    if config_path is not None:
        text = Path(config_path).read_text(encoding='utf-8')
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")
        config = replace(config, **data)

    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    if not isinstance(config.marker, str) or not config.marker:
        raise ValueError("marker must be a non-empty string")
    for name in ("temp_dir", "log_dir"):
        value = getattr(config, name)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"{name} must be a path string, got {value!r}")
    if config.log_level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {config.log_level!r}")
    return config
