"""A palette editing session: committed history, draft, and host callbacks.

PaletteSession owns one committed SnapshotStack and one DraftManager.
Analysis always runs on the draft when one is in progress, otherwise on
the committed palette, so previews reflect compounding fixes.

Callbacks receive full replacement lists with the same length as the
palette:
  on_apply_fix(colours)       after implement_changes()
  on_update_colours(colours)  after save()

Manual edits (update, move, lighten, darken, restore) commit straight to
the main history and leave any draft in progress untouched. Indices outside
the palette are silent no-ops.
"""

import logging
from collections.abc import Callable, Sequence

from palette_checker.analysis import palette_analyze
from palette_checker.core.colour import is_hex, normalise_hex, shift_rgb
from palette_checker.core.draft import AppliedFix, DraftManager
from palette_checker.core.history import DEFAULT_CAP, SnapshotStack
from palette_checker.core.scoring import Comparison, compare, palette_metrics, score
from palette_checker.core.types import MAX_COLOURS, MIN_COLOURS, Issue, PaletteError, Solution

logger = logging.getLogger(__name__)

ColoursCallback = Callable[[list[str]], None]

MANUAL_STEP = 30


def check_palette(colours: Sequence[str]) -> tuple[str, ...]:
    """Normalise a palette, raising PaletteError for a bad length or colour."""
    if not MIN_COLOURS <= len(colours) <= MAX_COLOURS:
        raise PaletteError(f'palette must have {MIN_COLOURS}-{MAX_COLOURS} colours, got {len(colours)}')
    bad = [c for c in colours if not is_hex(c)]
    if bad:
        raise PaletteError(f'not a 6-digit hex colour: {", ".join(repr(c) for c in bad)}')
    return tuple(normalise_hex(c) for c in colours)


class PaletteSession:
    def __init__(
        self,
        colours: Sequence[str],
        on_apply_fix: ColoursCallback | None = None,
        on_update_colours: ColoursCallback | None = None,
        history_cap: int | None = DEFAULT_CAP,
    ):
        palette = check_palette(colours)
        self.original = palette
        self.history: SnapshotStack[tuple[str, ...]] = SnapshotStack(palette, cap=history_cap)
        self.draft = DraftManager()
        self.on_apply_fix = on_apply_fix
        self.on_update_colours = on_update_colours

    # -- state -----------------------------------------------------------------

    @property
    def colours(self) -> list[str]:
        """The committed palette."""
        return list(self.history.current)

    @property
    def has_changes(self) -> bool:
        return self.draft.active

    @property
    def analysis_colours(self) -> list[str]:
        """The palette analysis runs on: the draft when active, else the committed palette."""
        temp = self.draft.temp_colours
        return temp if temp is not None else self.colours

    @property
    def applied_fixes(self) -> list[AppliedFix]:
        return self.draft.applied_fixes

    # -- analysis --------------------------------------------------------------

    def analyze(self, mode: str = 'core') -> list[Issue]:
        return palette_analyze(self.analysis_colours, mode)

    def score(self) -> int:
        return score(self.analyze('core'))

    def comparison(self) -> Comparison:
        return compare(self.colours, self.analyze('core'), self.has_changes)

    def metrics(self):
        return palette_metrics(self.analysis_colours)

    # -- draft -----------------------------------------------------------------

    def apply_solution(self, solution: Solution) -> list[str]:
        return self.draft.apply_solution(solution)

    def undo_last_fix(self) -> list[str] | None:
        return self.draft.undo_last_fix()

    def undo_draft(self) -> list[str] | None:
        return self.draft.undo()

    def redo_draft(self) -> list[str] | None:
        return self.draft.redo()

    def implement_changes(self) -> list[str] | None:
        """Commit the draft as one history entry, back to Clean, notify the host."""
        committed = self.draft.implement(self.history)
        if committed is None:
            return None
        logger.info('implemented draft: %s', ' '.join(committed))
        if self.on_apply_fix is not None:
            self.on_apply_fix(list(committed))
        return committed

    def discard_changes(self) -> None:
        self.draft.discard()

    # -- committed edits -------------------------------------------------------

    def _commit(self, colours: Sequence[str]) -> list[str]:
        palette = check_palette(colours)
        if palette != self.history.current:
            self.history.commit(palette)
        return list(palette)

    def update_colour(self, index: int, colour: str) -> list[str]:
        """Replace one colour. Out-of-range indices and malformed hex are ignored."""
        colours = self.colours
        if not 0 <= index < len(colours):
            return colours
        if not is_hex(colour):
            logger.debug('ignoring malformed colour %r for position %d', colour, index + 1)
            return colours
        colours[index] = colour
        return self._commit(colours)

    def move_colour(self, source: int, target: int) -> list[str]:
        colours = self.colours
        n = len(colours)
        if not (0 <= source < n and 0 <= target < n) or source == target:
            return colours
        colours.insert(target, colours.pop(source))
        return self._commit(colours)

    def lighten(self, index: int, step: int = MANUAL_STEP) -> list[str]:
        colours = self.colours
        if not 0 <= index < len(colours):
            return colours
        return self.update_colour(index, shift_rgb(colours[index], step))

    def darken(self, index: int, step: int = MANUAL_STEP) -> list[str]:
        return self.lighten(index, -step)

    def restore_original(self) -> list[str]:
        return self._commit(self.original)

    def undo(self) -> list[str] | None:
        snapshot = self.history.undo()
        return list(snapshot) if snapshot is not None else None

    def redo(self) -> list[str] | None:
        snapshot = self.history.redo()
        return list(snapshot) if snapshot is not None else None

    def save(self) -> list[str]:
        """Hand the committed palette to the host."""
        colours = self.colours
        if self.on_update_colours is not None:
            self.on_update_colours(list(colours))
        return colours
