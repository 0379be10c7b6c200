"""Linear undo/redo history.

One generic SnapshotStack serves both the committed palette history and
the draft history. Invariant while non-empty: 0 <= index < len(snapshots).
A commit after an undo discards the abandoned redo branch.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar('T')

DEFAULT_CAP = 20


class SnapshotStack(Generic[T]):
    """Snapshots with a cursor. cap=None keeps every snapshot."""

    def __init__(self, initial: T | None = None, cap: int | None = DEFAULT_CAP):
        if cap is not None and cap < 1:
            raise ValueError(f'history cap must be >= 1, got {cap}')
        self.cap = cap
        self.snapshots: list[T] = []
        self.index = -1
        if initial is not None:
            self.commit(initial)

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def current(self) -> T | None:
        if self.index < 0:
            return None
        return self.snapshots[self.index]

    @property
    def can_undo(self) -> bool:
        return self.index > 0

    @property
    def can_redo(self) -> bool:
        return self.index < len(self.snapshots) - 1

    def commit(self, snapshot: T) -> T:
        """Drop redo entries, append snapshot, trim oldest entries beyond cap."""
        del self.snapshots[self.index + 1 :]
        self.snapshots.append(snapshot)
        if self.cap is not None and len(self.snapshots) > self.cap:
            del self.snapshots[: len(self.snapshots) - self.cap]
        self.index = len(self.snapshots) - 1
        return snapshot

    def undo(self) -> T | None:
        """Step back one snapshot. Returns None (and does nothing) at the start."""
        if not self.can_undo:
            return None
        self.index -= 1
        return self.snapshots[self.index]

    def redo(self) -> T | None:
        """Step forward one snapshot. Returns None (and does nothing) at the end."""
        if not self.can_redo:
            return None
        self.index += 1
        return self.snapshots[self.index]

    def drop_last(self) -> T | None:
        """Remove the current snapshot and everything after it; return the new current."""
        if self.index < 0:
            return None
        del self.snapshots[self.index :]
        self.index = len(self.snapshots) - 1
        return self.current

    def reset(self, initial: T | None = None) -> None:
        self.snapshots = []
        self.index = -1
        if initial is not None:
            self.commit(initial)
