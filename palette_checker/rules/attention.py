"""Visual hierarchy: which colour draws the eye first.

Each colour gets a visual weight of 0.6 * saturation + 0.4 * closeness of
its lightness to 50%, both scaled to 0..1. The heaviest colour is the
focal point.

  - weight range < 0.2: no focal point (warning, fix "Crear punto focal")
  - focal point at position 3 or 4 (an Acento): optimal
  - focal point elsewhere: warning, fix "Hacer el Acento más llamativo"

Both fixes act on the accent index, which is 2 when the palette has at
least three colours and 0 otherwise.

Example:
    palette-check attention 1e293b 64748b f43f5e cbd5e1
"""

import numpy as np

from palette_checker.core.colour import hex_to_hsl
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Solution, Verdict, role_for_index

rule = Rule(
    name='attention',
    section='attention',
    help='Visual weight hierarchy; the accent (position 3 or 4) should be the focal point.',
)

MIN_WEIGHT_RANGE = 0.2
ACCENT_POSITIONS = (2, 3)

CITATION = 'Ware, C. (2012). Information Visualization: Perception for Design. Morgan Kaufmann.'


def visual_weights(colours) -> np.ndarray:
    hsl = np.array([hex_to_hsl(c)[1:] for c in colours], dtype=float)
    return hsl[:, 0] / 100 * 0.6 + (1 - np.abs(hsl[:, 1] - 50) / 50) * 0.4


def accent_index(colours) -> int:
    return 2 if len(colours) >= 3 else 0


@rule.check
def check(colours, cases) -> list[Issue]:
    weights = visual_weights(colours)
    focal = int(np.argmax(weights))
    accent = accent_index(colours)

    if float(weights.max() - weights.min()) < MIN_WEIGHT_RANGE:
        return [
            Issue(
                id='attention-uniform',
                kind='attention',
                severity=Verdict.WARNING,
                title='Peso visual uniforme',
                message='Todos los colores tienen peso visual similar. Falta un punto focal claro.',
                affected=tuple(range(len(colours))),
                solutions=(
                    Solution.build(
                        'Crear punto focal',
                        f'Saturar el color {accent + 1} para que destaque',
                        Fix.make(FixKind.SET_HSL, index=accent, s=85, l=50),
                        colours,
                    ),
                ),
                section='attention',
                element='Peso visual uniforme',
                importance='Sin jerarquía visual clara, el usuario no sabe dónde mirar primero.',
                technical='La atención visual se guía por diferencias de saturación y contraste de luminosidad.',
                citation=CITATION,
            )
        ]

    if focal in ACCENT_POSITIONS:
        return [
            Issue(
                id='attention-focal',
                kind='attention',
                severity=Verdict.OPTIMAL,
                title='Jerarquía visual correcta',
                message=f'El color de Acento (posición {focal + 1}) guía la mirada. Jerarquía óptima.',
                affected=(focal,),
                section='attention',
                element='Jerarquía visual correcta',
                importance=(
                    'El color de acento debe ser el punto focal para guiar la atención hacia acciones importantes.'
                ),
                technical='La diferencia de peso visual permite un escaneo eficiente de la información.',
                citation=CITATION,
            )
        ]

    return [
        Issue(
            id='attention-focal',
            kind='attention',
            severity=Verdict.WARNING,
            title='Punto focal en posición incorrecta',
            message=(
                f'El color {role_for_index(focal).value} (posición {focal + 1}) es el más llamativo, '
                'pero debería serlo el Acento.'
            ),
            affected=tuple(dict.fromkeys((focal, accent))),
            solutions=(
                Solution.build(
                    'Hacer el Acento más llamativo',
                    f'Aumentar saturación del color {accent + 1}',
                    Fix.make(FixKind.SET_HSL, index=accent, s=90, l=55),
                    colours,
                ),
            ),
            section='attention',
            element='Punto focal en posición incorrecta',
            importance='El color de acento (posición 3 o 4) debería ser el punto focal para guiar acciones.',
            technical='Reubicar el peso visual hacia el acento mejora la jerarquía de la interfaz.',
            citation=CITATION,
        )
    ]
