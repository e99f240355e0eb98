"""
config.py — Runtime Settings
=============================
All knobs the server and the input layer need, read once from
environment variables (prefix ALGOTRACE_).

    ALGOTRACE_DEFAULT_SPEED      slow | medium | fast | turbo
    ALGOTRACE_MAX_ARRAY_LENGTH   longest accepted array / word list
    ALGOTRACE_MAX_WORD_LENGTH    longest accepted string
    ALGOTRACE_MAX_GRAPH_NODES    largest accepted graph
    ALGOTRACE_MAX_DP_DIMENSION   largest DP table side (n, capacity, amount)
    ALGOTRACE_MAX_VALUE          absolute bound on numeric inputs
    ALGOTRACE_LOG_LEVEL          DEBUG | INFO | …
    ALGOTRACE_LOG_FILE           optional rotating log file path
    ALGOTRACE_SECRET_KEY         Flask secret (random when unset)
    ALGOTRACE_MAX_SESSIONS       live browser sessions kept server-side
    ALGOTRACE_SESSION_TTL        idle seconds before a session is dropped
    ALGOTRACE_HOST / _PORT / _DEBUG

Bad values are logged and replaced by the default; they never stop the
server from starting.
"""

import logging
import os
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "ALGOTRACE_"
SPEED_NAMES = ("slow", "medium", "fast", "turbo")


@dataclass(frozen=True)
class Settings:
    default_speed:    str           = "medium"
    max_array_length: int           = 64
    max_word_length:  int           = 24
    max_graph_nodes:  int           = 26
    max_dp_dimension: int           = 40
    max_value:        int           = 10_000
    log_level:        str           = "INFO"
    log_file:         Optional[str] = None
    secret_key:       Optional[str] = None
    max_sessions:     int           = 256
    session_ttl:      int           = 1800
    host:             str           = "127.0.0.1"
    port:             int           = 5000
    debug:            bool          = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    values = {}
    for f in fields(Settings):
        raw = env.get(ENV_PREFIX + f.name.upper())
        if raw is None or raw == "":
            continue
        try:
            values[f.name] = _coerce(f.name, raw, f.default)
        except ValueError as exc:
            logger.warning("Ignoring %s%s=%r: %s", ENV_PREFIX, f.name.upper(), raw, exc)
    return Settings(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    return load_settings()


def _coerce(name: str, raw: str, default):
    if name == "default_speed":
        if raw not in SPEED_NAMES:
            raise ValueError(f"expected one of {', '.join(SPEED_NAMES)}")
        return raw
    if name == "log_level":
        level = raw.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("unknown log level")
        return level
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError("expected a boolean")
    if isinstance(default, int):
        value = int(raw)
        if value <= 0:
            raise ValueError("must be positive")
        return value
    return raw
