"""Shared types for palette-checker: Rule, Issue, Solution, Fix, ApplicationCase."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MIN_COLOURS = 2
MAX_COLOURS = 8


class PaletteError(ValueError):
    """A palette that cannot be committed: wrong length or a malformed colour."""


class Severity(str, Enum):
    """Severity vocabulary of the core rule set."""

    ERROR = 'error'
    WARNING = 'warning'
    SUGGESTION = 'suggestion'


class Verdict(str, Enum):
    """Classification vocabulary of the extended analysis sections.

    Kept separate from Severity. Both are str enums, so the two 'warning'
    members compare equal as strings; tell them apart with isinstance.
    """

    CRITICAL = 'critical'
    WARNING = 'warning'
    GLARE = 'glare'
    OPTIMAL = 'optimal'
    INFO = 'info'


class Role(str, Enum):
    PRINCIPAL = 'Principal'
    SECUNDARIO = 'Secundario'
    ACENTO = 'Acento'
    DETALLE = 'Detalle'


def role_for_index(index: int) -> Role:
    """Positional role: 0 Principal, 1 Secundario, 2-3 Acento, 4+ Detalle."""
    if index == 0:
        return Role.PRINCIPAL
    if index == 1:
        return Role.SECUNDARIO
    if index in (2, 3):
        return Role.ACENTO
    return Role.DETALLE


class FixKind(str, Enum):
    ADJUST_HSL = 'adjust_hsl'
    SET_HSL = 'set_hsl'
    SET_SATURATION = 'set_saturation'
    BLEND_SATURATION = 'blend_saturation'
    SHIFT_SATURATION = 'shift_saturation'
    BLEND_HUE = 'blend_hue'
    SHIFT_RGB = 'shift_rgb'
    CONTRAST_TARGET = 'contrast_target'
    IDENTITY = 'identity'


@dataclass(frozen=True)
class Fix:
    """A serialisable palette transform, interpreted by core.fixes.apply_fix."""

    kind: FixKind
    params: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def make(cls, kind: FixKind, **params: Any) -> Fix:
        return cls(kind=kind, params=tuple(sorted(params.items())))

    def param(self, name: str, default: Any = None) -> Any:
        return dict(self.params).get(name, default)

    def to_dict(self) -> dict[str, Any]:
        return {'kind': self.kind.value, 'params': dict(self.params)}


@dataclass(frozen=True)
class Solution:
    """A proposed fix bound to the palette it was computed against.

    preview is apply() evaluated once at construction; both have the
    same length as base.
    """

    label: str
    description: str
    fix: Fix
    base: tuple[str, ...]
    preview: tuple[str, ...] = ()

    @classmethod
    def build(cls, label: str, description: str, fix: Fix, base: Sequence[str]) -> Solution:
        from palette_checker.core.fixes import apply_fix

        frozen = tuple(base)
        return cls(label, description, fix, frozen, tuple(apply_fix(frozen, fix)))

    def apply(self) -> list[str]:
        from palette_checker.core.fixes import apply_fix

        return apply_fix(self.base, self.fix)

    def to_dict(self) -> dict[str, Any]:
        return {
            'label': self.label,
            'description': self.description,
            'fix': self.fix.to_dict(),
            'preview': list(self.preview),
        }


@dataclass(frozen=True)
class Issue:
    """A detected problem (or, for the extended sections, an observation)."""

    id: str
    kind: str  # contrast, accessibility, similarity, balance, harmony, readability, ...
    severity: Severity | Verdict
    title: str
    message: str
    affected: tuple[int, ...] = ()
    solutions: tuple[Solution, ...] = ()
    section: str = 'core'
    case_id: str | None = None
    case_name: str | None = None
    element: str | None = None
    ratio: float | None = None
    fg: str | None = None
    bg: str | None = None
    importance: str = ''
    technical: str = ''
    citation: str = ''

    @property
    def vocabulary(self) -> str:
        return 'severity' if isinstance(self.severity, Severity) else 'verdict'

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'id': self.id,
            'kind': self.kind,
            'section': self.section,
            'severity': self.severity.value,
            'vocabulary': self.vocabulary,
            'title': self.title,
            'message': self.message,
            'affected': list(self.affected),
            'solutions': [s.to_dict() for s in self.solutions],
        }
        for key in ('case_id', 'case_name', 'element', 'fg', 'bg'):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.ratio is not None:
            data['ratio'] = round(self.ratio, 2)
        for key in ('importance', 'technical', 'citation'):
            value = getattr(self, key)
            if value:
                data[key] = value
        return data


@dataclass(frozen=True)
class CaseColour:
    """A colour placed in an application case; index is None for fixed black/white."""

    hex: str
    index: int | None = None


@dataclass(frozen=True)
class ApplicationCase:
    """Read-only projection of palette colours onto UI element roles."""

    id: str
    name: str
    roles: dict[str, CaseColour] = field(default_factory=dict)

    def __getitem__(self, role: str) -> CaseColour:
        return self.roles[role]


CheckFn = Callable[[tuple[str, ...], list[ApplicationCase]], list[Issue]]


class Rule:
    """A self-registering palette rule.

    Usage in a rule module:

        rule = Rule(name='adjacent-contrast', section='core', help='...')

        @rule.check
        def check(colours, cases):
            return [...]
    """

    def __init__(self, name: str, section: str, help: str = ''):
        self.name = name
        self.section = section
        self.help = help
        self._check_fn: CheckFn | None = None

    def check(self, fn: CheckFn) -> CheckFn:
        """Decorator to register the check function."""
        self._check_fn = fn
        return fn

    def evaluate(self, colours: Sequence[str], cases: list[ApplicationCase]) -> list[Issue]:
        """Run the check. Palettes with fewer than two colours yield nothing."""
        if self._check_fn is None:
            raise RuntimeError(f'Rule {self.name} has no check function')
        palette = tuple(colours)
        if len(palette) < MIN_COLOURS:
            return []
        return self._check_fn(palette, cases)


@dataclass
class Report:
    """Everything a formatter needs to print one analysis run."""

    colours: list[str]
    mode: str
    issues: list[Issue] = field(default_factory=list)
    score: int | None = None
    comparison: dict[str, int] | None = None
    metrics: dict[str, Any] | None = None
    before: list[str] | None = None
    applied: list[str] = field(default_factory=list)
    sections: dict[str, dict] | None = None

    @property
    def problem_count(self) -> int:
        return sum(1 for i in self.issues if i.severity not in (Verdict.OPTIMAL, Verdict.INFO))
