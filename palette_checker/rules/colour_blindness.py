"""Confusable colours under simulated colour vision deficiencies.

Runs every colour through the deuteranopia, protanopia and tritanopia
channel-mixing matrices, then compares the simulated colours pairwise.
A pair whose simulated RGB values differ by less than 60 in total
(Manhattan distance) would be hard to tell apart for that group, and the
deficiency is reported as a warning naming the confusable colours. The
fix lifts every even-indexed colour by 40 per channel to add a lightness
cue that survives the simulation.

The matrices are simplified approximations, not LMS cone-space models.

Example:
    palette-check colour-blindness d62728 2ca02c 1f77b4
"""

from itertools import combinations

from palette_checker.core.colour import rgb_manhattan, simulate_colour_blindness
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Solution, Verdict

rule = Rule(
    name='colour-blindness',
    section='accessibility',
    help='Pairwise confusability under deuteranopia, protanopia and tritanopia.',
)

MIN_DIFFERENCE = 60

DEFICIENCIES = (
    ('deuteranopia', 'Deuteranopía (verde)', '6% hombres'),
    ('protanopia', 'Protanopía (rojo)', '2% hombres'),
    ('tritanopia', 'Tritanopía (azul)', '0.01% población'),
)

CITATION = (
    'Birch, J. (2012). Worldwide prevalence of red-green color deficiency. '
    'Journal of the Optical Society of America A, 29(3), 313-320.'
)


def confusable_pairs(colours, kind: str) -> list[tuple[int, int]]:
    simulated = [simulate_colour_blindness(c, kind) for c in colours]
    return [
        (i, j)
        for i, j in combinations(range(len(simulated)), 2)
        if rgb_manhattan(simulated[i], simulated[j]) < MIN_DIFFERENCE
    ]


@rule.check
def check(colours, cases) -> list[Issue]:
    issues = []
    for kind, name, prevalence in DEFICIENCIES:
        pairs = confusable_pairs(colours, kind)
        if pairs:
            affected = tuple(sorted({i for pair in pairs for i in pair}))
            listed = ', '.join(f'{i + 1}-{j + 1}' for i, j in pairs)
            issues.append(
                Issue(
                    id=f'accessibility-{kind}',
                    kind='colour-blindness',
                    severity=Verdict.WARNING,
                    title=name,
                    message=f'Algunos colores pueden confundirse ({prevalence}): {listed}.',
                    affected=affected,
                    solutions=(
                        Solution.build(
                            'Aumentar diferencia de luminosidad',
                            'Aclarar los colores en posiciones impares para separarlos por luminosidad',
                            Fix.make(FixKind.SHIFT_RGB, indices=tuple(range(0, len(colours), 2)), delta=40),
                            colours,
                        ),
                    ),
                    section='accessibility',
                    element=name,
                    importance=(
                        f'Las personas con {name.lower()} pueden tener dificultad para distinguir ciertos colores '
                        'de tu paleta.'
                    ),
                    technical=(
                        'La diferencia cromática percibida es insuficiente cuando se simula esta forma de daltonismo.'
                    ),
                    citation=CITATION,
                )
            )
        else:
            issues.append(
                Issue(
                    id=f'accessibility-{kind}',
                    kind='colour-blindness',
                    severity=Verdict.OPTIMAL,
                    title=name,
                    message=f'Paleta distinguible para personas con {name.lower()}.',
                    section='accessibility',
                    element=name,
                    importance='Una buena distinción de colores beneficia a todos los usuarios.',
                    technical='Los colores mantienen suficiente diferencia perceptual bajo esta simulación.',
                    citation=CITATION,
                )
            )
    return issues
