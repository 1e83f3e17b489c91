"""Settings read from environment variables.

    GLYPH_LOG_LEVEL      Log level (DEBUG, INFO, WARNING, ERROR). Default WARNING.
    GLYPH_LOG_FORMAT     "console" or "json". Default console.
    GLYPH_MAX_WORKERS    Files parsed concurrently. Default min(8, cpu count).
    GLYPH_MAX_FILE_SIZE  Files larger than this many bytes are skipped. Default 1 MiB.
    GLYPH_DEDUPE         Drop symbols repeated by overlapping queries. Default false.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_MAX_FILE_SIZE = 1024 * 1024


def _default_max_workers() -> int:
    return min(8, os.cpu_count() or 1)


def _int_setting(value: Optional[str], default: int) -> int:
    try:
        parsed = int(value) if value is not None else default
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _bool_setting(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for extraction and logging."""
    log_level: str = "WARNING"
    log_format: str = "console"
    max_workers: int = field(default_factory=_default_max_workers)
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    dedupe: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment (os.environ by default)."""
        env = os.environ if environ is None else environ
        log_format = env.get("GLYPH_LOG_FORMAT", "console").strip().lower()
        return cls(
            log_level=env.get("GLYPH_LOG_LEVEL", "WARNING").strip().upper(),
            log_format=log_format if log_format in ("console", "json") else "console",
            max_workers=_int_setting(env.get("GLYPH_MAX_WORKERS"), _default_max_workers()),
            max_file_size=_int_setting(env.get("GLYPH_MAX_FILE_SIZE"), DEFAULT_MAX_FILE_SIZE),
            dedupe=_bool_setting(env.get("GLYPH_DEDUPE")),
        )
