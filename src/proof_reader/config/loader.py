"""Configuration loader for proof-reader.

Loads a JSON configuration file and returns a validated ReaderConfig
instance.  Uses module-level caching so each file is only parsed once
per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from proof_reader.config.models import ReaderConfig
from proof_reader.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, ReaderConfig] = {}


def load_config(path: Optional[Path] = None) -> ReaderConfig:
    """Load and validate configuration from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file.  If ``None``, the defaults are used.

    Returns
    -------
    ReaderConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not valid JSON, or does not match
        the expected schema.
    """
    if path is None:
        return ReaderConfig()

    config_path = Path(path)
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = ReaderConfig.model_validate(raw)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Could not read config file {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config file {config_path}:\n{exc}") from exc

    _config_cache[cache_key] = config
    return config


def clear_cache() -> None:
    """Clear the config cache: useful for testing."""
    _config_cache.clear()
