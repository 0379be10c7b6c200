"""Find one colour whose hue breaks an otherwise tight hue family.

Takes the arithmetic mean of the hues and the colour with the largest
circular distance from it. When that distance exceeds 60 degrees while
the overall hue spread (max - min) stays under 180 degrees, the palette
looks like a family with a stray member and a `harmony` suggestion is
raised.

Fixes act on the outlier:
  - "Integrar a la armonía": move its hue to the mean
  - "Hacerlo complementario": move it to mean + 180 (an intentional accent)

Example:
    palette-check harmony-outlier 3366cc 3355dd 4477bb cc9933
"""

from palette_checker.core.colour import hex_to_hsl, hue_delta
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Severity, Solution

rule = Rule(
    name='harmony-outlier',
    section='core',
    help='Flag a single hue far (> 60°) from an otherwise tight hue family.',
)

MAX_OUTLIER_DISTANCE = 60.0
MAX_SPREAD = 180.0


@rule.check
def check(colours, cases) -> list[Issue]:
    hues = [hex_to_hsl(c).h for c in colours]
    spread = max(hues) - min(hues)
    mean = sum(hues) / len(hues)
    outlier = max(range(len(hues)), key=lambda i: hue_delta(hues[i], mean))
    distance = hue_delta(hues[outlier], mean)
    if distance <= MAX_OUTLIER_DISTANCE or spread >= MAX_SPREAD:
        return []

    solutions = (
        Solution.build(
            'Integrar a la armonía',
            'Mover el tono hacia el promedio del grupo',
            Fix.make(FixKind.SET_HSL, index=outlier, h=mean),
            colours,
        ),
        Solution.build(
            'Hacerlo complementario',
            'Convertirlo en un acento complementario intencionado',
            Fix.make(FixKind.SET_HSL, index=outlier, h=(mean + 180) % 360),
            colours,
        ),
    )
    return [
        Issue(
            id='harmony-outlier',
            kind='harmony',
            severity=Severity.SUGGESTION,
            title='Color fuera de la armonía',
            message=(
                f'El color {outlier + 1} tiene un tono muy diferente al resto ({distance:.0f}° del promedio). '
                'Podrías ajustarlo para mejor armonía.'
            ),
            affected=(outlier,),
            solutions=solutions,
        )
    ]
