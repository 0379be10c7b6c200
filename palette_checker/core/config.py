"""Settings read from the environment (after core.env.load_env has run).

  PALETTE_HISTORY_CAP    snapshots kept by the committed history (default 20, 0 = unlimited)
  PALETTE_STORE          JSON file for saved palettes (default ~/.palette-checker/palettes.json)
  PALETTE_LOG_LEVEL      logging level name (default WARNING)
  PALETTE_DEFAULT_MODE   analysis mode when none is given (default core)

Bad values fall back to the default with a warning rather than failing.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from palette_checker.core.history import DEFAULT_CAP

logger = logging.getLogger(__name__)

DEFAULT_STORE = Path.home() / '.palette-checker' / 'palettes.json'
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_MODE = 'core'


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning('%s=%r is not an integer, using %d', name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    history_cap: int | None = DEFAULT_CAP
    store_path: Path = DEFAULT_STORE
    log_level: str = DEFAULT_LOG_LEVEL
    default_mode: str = DEFAULT_MODE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        """Build settings from a mapping of PALETTE_* values (os.environ by default)."""
        env = os.environ if environ is None else environ
        cap = _int_env(env, 'PALETTE_HISTORY_CAP', DEFAULT_CAP)
        if cap < 0:
            logger.warning('PALETTE_HISTORY_CAP=%d is negative, using %d', cap, DEFAULT_CAP)
            cap = DEFAULT_CAP

        store = env.get('PALETTE_STORE')
        level = env.get('PALETTE_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning('PALETTE_LOG_LEVEL=%r is not a logging level, using %s', level, DEFAULT_LOG_LEVEL)
            level = DEFAULT_LOG_LEVEL

        return cls(
            history_cap=cap or None,
            store_path=Path(store).expanduser() if store else DEFAULT_STORE,
            log_level=level,
            default_mode=env.get('PALETTE_DEFAULT_MODE', DEFAULT_MODE).strip() or DEFAULT_MODE,
        )
