"""proof-reader configuration package."""

from proof_reader.config.loader import clear_cache, load_config
from proof_reader.config.models import DEFAULT_ROOT, ReaderConfig

__all__ = ["DEFAULT_ROOT", "ReaderConfig", "clear_cache", "load_config"]
