"""Where palette-check settings come from.

Settings are plain PALETTE_* environment variables. A .env file can supply
the ones the shell did not set:

  1. OS environment variables always win and are never overwritten.
  2. --env-file PATH, when given, is the only file read.
  3. Otherwise the nearest .env from cwd upwards, stopping at the repo root
     (the first directory holding .git, file or dir).

Only PALETTE_* keys are taken from the file; anything else in a shared
.env belongs to other tools and is left alone. load_env() reports which
keys were applied so the CLI can say where a setting came from.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

PREFIX = 'PALETTE_'

_LINE_RE = re.compile(r'^(?:export\s+)?(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*=\s*(?P<value>.*)$')


@dataclass(frozen=True)
class EnvFile:
    """Result of a load: the file used, its PALETTE_* pairs, the keys applied."""

    path: Path | None = None
    values: dict[str, str] = field(default_factory=dict)
    applied: tuple[str, ...] = ()

    @property
    def shadowed(self) -> tuple[str, ...]:
        """Keys present in the file but already set in the environment."""
        return tuple(k for k in self.values if k not in self.applied)


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above start, not looking past the repo root."""
    for directory in (start.resolve(), *start.resolve().parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        if (directory / '.git').exists():
            break
    return None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
        return value[1:-1]
    return value


def read_env_file(path: Path) -> dict[str, str]:
    """PALETTE_* pairs from a .env file; comments, blanks and other keys skipped."""
    values: dict[str, str] = {}
    for number, line in enumerate(path.read_text(encoding='utf-8').splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        m = _LINE_RE.match(line)
        if not m:
            logger.debug('%s:%d: not KEY=value, skipped', path, number)
            continue
        key = m.group('key')
        if key.startswith(PREFIX):
            values[key] = _unquote(m.group('value').strip())
    return values


def load_env(env_file: str | None = None) -> EnvFile:
    """Copy PALETTE_* keys from a .env file into os.environ where unset."""
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            logger.warning('env file not found: %s', env_file)
            return EnvFile()
    else:
        path = find_env_file(Path.cwd())
        if path is None:
            return EnvFile()

    values = read_env_file(path)
    applied = []
    for key, value in values.items():
        if key in os.environ:
            logger.debug('%s already set, ignoring %s', key, path)
            continue
        os.environ[key] = value
        applied.append(key)
    return EnvFile(path=path, values=values, applied=tuple(applied))
