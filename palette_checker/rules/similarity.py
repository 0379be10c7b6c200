"""Flag non-adjacent colours that are nearly identical.

For every pair (i, j) with |i - j| > 1, computes the HSL colour distance
(circular hue delta, saturation delta, lightness delta). Pairs closer
than 15 are reported as a `similarity` suggestion. Adjacent pairs are left
to adjacent-contrast.

Fixes act on the later colour j:
  - rotate its hue by 40 degrees
  - move its lightness 25 away from the middle (down if l > 50, else up)

Example:
    palette-check similarity 336699 336699 336699
"""

from palette_checker.core.colour import SIMILARITY_THRESHOLD, colour_distance, hex_to_hsl
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Severity, Solution

rule = Rule(
    name='similarity',
    section='core',
    help='Flag non-adjacent colours that are nearly identical (distance < 15).',
)


@rule.check
def check(colours, cases) -> list[Issue]:
    issues = []
    n = len(colours)
    for i in range(n):
        for j in range(i + 2, n):
            distance = colour_distance(colours[i], colours[j])
            if distance >= SIMILARITY_THRESHOLD:
                continue
            dl = -25 if hex_to_hsl(colours[j]).l > 50 else 25
            solutions = (
                Solution.build(
                    'Diferenciar tonos',
                    'Rotar el tono del segundo color',
                    Fix.make(FixKind.ADJUST_HSL, index=j, dh=40),
                    colours,
                ),
                Solution.build(
                    'Variar luminosidad',
                    'Crear más contraste entre ambos',
                    Fix.make(FixKind.ADJUST_HSL, index=j, dl=dl),
                    colours,
                ),
            )
            issues.append(
                Issue(
                    id=f'similarity-{i}-{j}',
                    kind='similarity',
                    severity=Severity.SUGGESTION,
                    title='Colores muy similares',
                    message=(
                        f'Los colores {i + 1} y {j + 1} son muy parecidos (diferencia {distance:.0f}). '
                        'Considera diferenciarlos o eliminar uno.'
                    ),
                    affected=(i, j),
                    solutions=solutions,
                )
            )
    return issues
