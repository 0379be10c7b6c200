"""Draft (staging) state machine layered over the committed history.

States:
  Clean  temp_colours is None, no draft in progress.
  Draft  temp_colours holds the working copy that analysis should run on.

Each applied solution pushes a DraftEntry (palette + fix label) onto an
uncapped SnapshotStack, so applied_fixes always matches the draft cursor.
undo_last_fix removes the newest fix and restores the snapshot that
preceded it; removing the only fix returns to Clean.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from palette_checker.core.history import SnapshotStack
from palette_checker.core.types import Solution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppliedFix:
    label: str
    description: str


@dataclass(frozen=True)
class DraftEntry:
    colours: tuple[str, ...]
    fix: AppliedFix


class DraftManager:
    def __init__(self) -> None:
        self.stack: SnapshotStack[DraftEntry] = SnapshotStack(cap=None)

    @property
    def active(self) -> bool:
        return self.stack.current is not None

    @property
    def temp_colours(self) -> list[str] | None:
        entry = self.stack.current
        return list(entry.colours) if entry is not None else None

    @property
    def applied_fixes(self) -> list[AppliedFix]:
        return [e.fix for e in self.stack.snapshots[: self.stack.index + 1]]

    @property
    def temp_history(self) -> list[list[str]]:
        return [list(e.colours) for e in self.stack.snapshots]

    @property
    def temp_history_index(self) -> int:
        return self.stack.index

    def apply_solution(self, solution: Solution) -> list[str]:
        """Stage solution.apply(). Clean -> Draft, or Draft -> deeper Draft."""
        colours = tuple(solution.apply())
        self.stack.commit(DraftEntry(colours, AppliedFix(solution.label, solution.description)))
        logger.debug('draft: applied %r (%d fixes)', solution.label, len(self.applied_fixes))
        return list(colours)

    def undo_last_fix(self) -> list[str] | None:
        """Forget the newest fix. Returns the restored draft, or None when Clean."""
        if not self.active:
            return None
        restored = self.stack.drop_last()
        if restored is None:
            self.discard()
            return None
        return list(restored.colours)

    def undo(self) -> list[str] | None:
        """Step the draft back; stepping past the first fix returns to Clean."""
        if not self.active:
            return None
        entry = self.stack.undo()
        if entry is None:
            self.discard()
            return None
        return list(entry.colours)

    def redo(self) -> list[str] | None:
        entry = self.stack.redo()
        return list(entry.colours) if entry is not None else None

    def implement(self, history: SnapshotStack[tuple[str, ...]]) -> list[str] | None:
        """Commit the draft to history as one snapshot and return to Clean."""
        colours = self.temp_colours
        if colours is None:
            return None
        history.commit(tuple(colours))
        logger.debug('draft: implemented %d fixes', len(self.applied_fixes))
        self.discard()
        return colours

    def discard(self) -> None:
        self.stack.reset()
