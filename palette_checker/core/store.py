"""Persistence port for named palettes, plus a JSON-file implementation.

The analysis engine never touches storage. Hosts that want to keep named
palettes inject something with load_palettes()/save_palettes(); the CLI
uses JsonPaletteStore.

File format: a JSON list of {"id", "name", "colours", "created_at"}.
"""

import json
import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from palette_checker.core.colour import normalise_hex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedPalette:
    id: str
    name: str
    colours: tuple[str, ...]
    created_at: str

    @classmethod
    def create(cls, name: str, colours: Sequence[str]) -> 'SavedPalette':
        return cls(
            id=uuid.uuid4().hex[:12],
            name=name,
            colours=tuple(normalise_hex(c) for c in colours),
            created_at=datetime.now(timezone.utc).isoformat(timespec='seconds'),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'SavedPalette':
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            colours=tuple(data['colours']),
            created_at=str(data.get('created_at', '')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'colours': list(self.colours),
            'created_at': self.created_at,
        }


class PaletteStore(Protocol):
    def load_palettes(self) -> list[SavedPalette]: ...

    def save_palettes(self, palettes: Sequence[SavedPalette]) -> None: ...


class StoreError(Exception):
    """The palette file exists but cannot be read."""


class JsonPaletteStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load_palettes(self) -> list[SavedPalette]:
        if not self.path.is_file():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise StoreError(f'{self.path}: invalid JSON ({e})') from e
        if not isinstance(raw, list):
            raise StoreError(f'{self.path}: expected a list of palettes')
        try:
            return [SavedPalette.from_dict(item) for item in raw]
        except (KeyError, TypeError) as e:
            raise StoreError(f'{self.path}: malformed palette entry ({e})') from e

    def save_palettes(self, palettes: Sequence[SavedPalette]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [p.to_dict() for p in palettes]
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + '\n', encoding='utf-8')
        logger.debug('saved %d palettes to %s', len(data), self.path)


def add_palette(store: PaletteStore, name: str, colours: Sequence[str]) -> SavedPalette:
    """Save colours under name, replacing any palette with the same name."""
    saved = SavedPalette.create(name, colours)
    palettes = [p for p in store.load_palettes() if p.name != name]
    palettes.append(saved)
    store.save_palettes(palettes)
    return saved


def find_palette(store: PaletteStore, name_or_id: str) -> SavedPalette | None:
    for palette in store.load_palettes():
        if name_or_id in (palette.name, palette.id):
            return palette
    return None


def delete_palette(store: PaletteStore, name_or_id: str) -> bool:
    palettes = store.load_palettes()
    kept = [p for p in palettes if name_or_id not in (p.name, p.id)]
    if len(kept) == len(palettes):
        return False
    store.save_palettes(kept)
    return True
