"""Palette quality scores and summary metrics.

Two scoring modes are kept side by side and never merged:

  FULL           100 minus a penalty per core issue (error 25, warning 15,
                 suggestion 5). Verdict-tagged issues from the extended
                 sections carry no penalty.
  CONTRAST_ONLY  100 minus 15 per adjacent pair under 1.5:1 and minus 25
                 when the darkest/lightest pair misses 4.5:1. Used only for
                 the "original" side of an original-vs-corrected comparison.

Both are clamped to 0..100.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import combinations

from palette_checker.core.colour import contrast_ratio, hex_to_hsl
from palette_checker.core.types import Issue, Severity


class ScoreMode(str, Enum):
    FULL = 'full'
    CONTRAST_ONLY = 'contrast_only'


PENALTIES = {
    Severity.ERROR: 25,
    Severity.WARNING: 15,
    Severity.SUGGESTION: 5,
}

ADJACENT_MIN_RATIO = 1.5
TEXT_MIN_RATIO = 4.5


def clamp_score(value: float) -> int:
    return int(max(0, min(100, value)))


def score(issues: Iterable[Issue]) -> int:
    """FULL mode score over a list of issues."""
    total = 100
    for issue in issues:
        if isinstance(issue.severity, Severity):
            total -= PENALTIES[issue.severity]
    return clamp_score(total)


def contrast_only_score(colours: Sequence[str]) -> int:
    """CONTRAST_ONLY mode score, computed straight from the colours."""
    if len(colours) < 2:
        return 100
    total = 100
    for a, b in zip(colours, colours[1:]):
        if contrast_ratio(a, b) < ADJACENT_MIN_RATIO:
            total -= 15

    lightness = [hex_to_hsl(c).l for c in colours]
    darkest = min(range(len(colours)), key=lambda i: lightness[i])
    lightest = max(range(len(colours)), key=lambda i: lightness[i])
    if contrast_ratio(colours[darkest], colours[lightest]) < TEXT_MIN_RATIO:
        total -= 25
    return clamp_score(total)


def score_for(mode: ScoreMode, colours: Sequence[str], issues: Iterable[Issue]) -> int:
    """Score in the given mode. FULL reads the issues, CONTRAST_ONLY the colours."""
    if mode == ScoreMode.CONTRAST_ONLY:
        return contrast_only_score(colours)
    return score(issues)


@dataclass(frozen=True)
class Comparison:
    original: int
    corrected: int

    @property
    def delta(self) -> int:
        return self.corrected - self.original

    def to_dict(self) -> dict[str, int]:
        return {'original': self.original, 'corrected': self.corrected, 'delta': self.delta}


def compare(original: Sequence[str], corrected_issues: Iterable[Issue], has_changes: bool) -> Comparison:
    """Score the analysed palette against the committed one.

    Without a draft both sides are the FULL score of the same palette; with
    a draft the original side uses CONTRAST_ONLY.
    """
    corrected = score_for(ScoreMode.FULL, (), corrected_issues)
    if not has_changes:
        return Comparison(corrected, corrected)
    return Comparison(score_for(ScoreMode.CONTRAST_ONLY, original, ()), corrected)


@dataclass(frozen=True)
class PaletteMetrics:
    avg_saturation: int
    avg_lightness: int
    hue_range: int
    min_contrast: float
    max_contrast: float
    avg_contrast: float
    accessibility: str
    count: int

    def to_dict(self) -> dict:
        return {
            'avg_saturation': self.avg_saturation,
            'avg_lightness': self.avg_lightness,
            'hue_range': self.hue_range,
            'min_contrast': self.min_contrast,
            'max_contrast': self.max_contrast,
            'avg_contrast': self.avg_contrast,
            'accessibility': self.accessibility,
            'count': self.count,
        }


def accessibility_grade(max_contrast: float) -> str:
    if max_contrast >= 4.5:
        return 'AA'
    if max_contrast >= 3:
        return 'AA Large'
    return 'Bajo'


def palette_metrics(colours: Sequence[str]) -> PaletteMetrics | None:
    """Summary numbers for a palette, or None for fewer than two colours."""
    if len(colours) < 2:
        return None
    hsl = [hex_to_hsl(c) for c in colours]
    hues = [c.h for c in hsl]
    ratios = [contrast_ratio(a, b) for a, b in combinations(colours, 2)]
    max_contrast = max(ratios)
    return PaletteMetrics(
        avg_saturation=round(sum(c.s for c in hsl) / len(hsl)),
        avg_lightness=round(sum(c.l for c in hsl) / len(hsl)),
        hue_range=round(max(hues) - min(hues)),
        min_contrast=round(min(ratios), 2),
        max_contrast=round(max_contrast, 2),
        avg_contrast=round(sum(ratios) / len(ratios), 2),
        accessibility=accessibility_grade(max_contrast),
        count=len(colours),
    )
