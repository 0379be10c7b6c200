"""Application cases: four synthetic UI layouts built from a palette.

Each case assigns palette colours (or fixed near-black / white) to the
roles of a small UI mock: a background, two accent circles, a thick and
a thin line, main and secondary text, and two buttons ("Boubba" and
"Kiki") with their label colours. Rules use them to evaluate contrast in
realistic pairings. Cases are read-only projections, rebuilt per palette.

Positions missing from short palettes fall back to the previous
position, then to the first colour.
"""

from collections.abc import Sequence

from palette_checker.core.colour import BLACK, WHITE
from palette_checker.core.types import ApplicationCase, CaseColour

ROLES = (
    'background',
    'circle_l',
    'circle_s',
    'line_thick',
    'line_thin',
    'text_main',
    'text_sub',
    'text_boubba',
    'text_kiki',
    'btn_boubba',
    'btn_kiki',
)

# (text role, background role, element label)
TEXT_PAIRS = (
    ('text_main', 'background', 'Texto principal'),
    ('text_sub', 'background', 'Texto secundario'),
    ('text_boubba', 'btn_boubba', 'Botón Boubba'),
    ('text_kiki', 'btn_kiki', 'Botón Kiki'),
)

_B = 'black'
_W = 'white'

# Role -> palette position (int) or fixed colour. Mirrors the four layouts
# shown to the user: dark background, primary base, high contrast, secondary base.
_LAYOUTS: tuple[tuple[str, str, dict[str, int | str]], ...] = (
    (
        'case1',
        'Fondo Oscuro',
        {
            'background': _B,
            'circle_l': 0,
            'circle_s': 1,
            'line_thick': 0,
            'line_thin': 1,
            'text_main': 0,
            'text_sub': 3,
            'text_boubba': 1,
            'text_kiki': _B,
            'btn_boubba': _W,
            'btn_kiki': 0,
        },
    ),
    (
        'case2',
        'Primario Base',
        {
            'background': 0,
            'circle_l': 1,
            'circle_s': _B,
            'line_thick': 3,
            'line_thin': _B,
            'text_main': 1,
            'text_sub': _B,
            'text_boubba': _W,
            'text_kiki': 2,
            'btn_boubba': 1,
            'btn_kiki': _B,
        },
    ),
    (
        'case3',
        'Contraste Alto',
        {
            'background': 0,
            'circle_l': _B,
            'circle_s': 3,
            'line_thick': _W,
            'line_thin': 2,
            'text_main': _B,
            'text_sub': _B,
            'text_boubba': 0,
            'text_kiki': _W,
            'btn_boubba': _B,
            'btn_kiki': 1,
        },
    ),
    (
        'case4',
        'Secundario Base',
        {
            'background': 1,
            'circle_l': _B,
            'circle_s': 0,
            'line_thick': 0,
            'line_thin': 3,
            'text_main': _W,
            'text_sub': 0,
            'text_boubba': 2,
            'text_kiki': _B,
            'btn_boubba': _W,
            'btn_kiki': 0,
        },
    ),
)


def resolve_index(position: int, length: int) -> int:
    """Position if present, else the one before it, else 0."""
    if position < length:
        return position
    if 0 <= position - 1 < length:
        return position - 1
    return 0


def _case_colour(colours: Sequence[str], source: int | str) -> CaseColour:
    if source == _B:
        return CaseColour(BLACK)
    if source == _W:
        return CaseColour(WHITE)
    index = resolve_index(int(source), len(colours))
    return CaseColour(colours[index], index)


def build_cases(colours: Sequence[str]) -> list[ApplicationCase]:
    """Project a palette onto the four application cases. Empty input gives []."""
    if not colours:
        return []
    return [
        ApplicationCase(
            id=case_id,
            name=name,
            roles={role: _case_colour(colours, layout[role]) for role in ROLES},
        )
        for case_id, name, layout in _LAYOUTS
    ]
