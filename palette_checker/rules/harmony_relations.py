"""Recognised hue relationships: complementary, analogous, triadic.

Folds the hue distance of every pair of colours into 0..180 and looks for
the classic colour-wheel relations:

  complementary  150 < d <= 180
  analogous      d < 40
  triadic        110 < d < 130

Each relation found is reported once as an optimal record naming the
colours involved. When none is found and the mean pairwise distance is
over 60 degrees, the palette has no clear harmony and a warning is raised
(no automatic fix: choosing a harmony is a design decision).

Example:
    palette-check harmony-relations 3366cc cc9933 33cc66
"""

from itertools import combinations

from palette_checker.core.colour import hex_to_hsl, hue_delta
from palette_checker.core.types import Issue, Rule, Verdict

rule = Rule(
    name='harmony-relations',
    section='harmony',
    help='Detect complementary/analogous/triadic hue relations.',
)

MAX_MEAN_DISTANCE = 60.0

ITTEN = 'Itten, J. (1961). The Art of Color: The subjective experience and objective rationale of color. Wiley.'

RELATIONS = (
    (
        'complementary',
        lambda d: 150 < d <= 180,
        'Armonía complementaria',
        'Colores complementarios detectados. Alto contraste y dinamismo.',
        'Los colores complementarios crean máximo contraste cromático, ideal para destacar elementos.',
        'Los colores opuestos en el círculo cromático activan diferentes tipos de conos, maximizando la '
        'distinción perceptual.',
    ),
    (
        'analogous',
        lambda d: d < 40,
        'Armonía análoga',
        'Colores análogos detectados. Cohesión y suavidad.',
        'Los colores análogos generan sensación de continuidad y son naturalmente armónicos.',
        'Los tonos cercanos en el espectro estimulan conos similares, reduciendo el esfuerzo de procesamiento visual.',
    ),
    (
        'triadic',
        lambda d: 110 < d < 130,
        'Armonía triádica',
        'Relación triádica detectada. Equilibrio con variedad.',
        'Las tríadas ofrecen variedad manteniendo el equilibrio, ideal para interfaces ricas.',
        'La distribución equidistante en el círculo cromático proporciona balance perceptual.',
    ),
)


def pair_distances(colours) -> list[tuple[int, int, float]]:
    hues = [hex_to_hsl(c).h for c in colours]
    return [(i, j, hue_delta(hues[i], hues[j])) for i, j in combinations(range(len(hues)), 2)]


@rule.check
def check(colours, cases) -> list[Issue]:
    distances = pair_distances(colours)
    issues = []
    for name, matches, element, message, importance, technical in RELATIONS:
        members = sorted({k for i, j, d in distances if matches(d) for k in (i, j)})
        if members:
            issues.append(
                Issue(
                    id=f'harmony-{name}',
                    kind='harmony',
                    severity=Verdict.OPTIMAL,
                    title=element,
                    message=message,
                    affected=tuple(members),
                    section='harmony',
                    element=element,
                    importance=importance,
                    technical=technical,
                    citation=ITTEN,
                )
            )

    mean = sum(d for _, _, d in distances) / len(distances)
    if not issues and mean > MAX_MEAN_DISTANCE:
        issues.append(
            Issue(
                id='harmony-none',
                kind='harmony',
                severity=Verdict.WARNING,
                title='Sin armonía clara',
                message='Los colores no siguen una relación armónica reconocible.',
                affected=tuple(range(len(colours))),
                section='harmony',
                element='Sin armonía clara',
                importance='Las paletas con relaciones armónicas claras son percibidas como más profesionales.',
                technical='La falta de relación cromática estructurada puede aumentar la disonancia visual.',
                citation=(
                    'Ou, L. C., & Luo, M. R. (2006). A colour harmony model for two-colour combinations. '
                    'Color Research & Application, 31(3), 191-204.'
                ),
            )
        )
    return issues
