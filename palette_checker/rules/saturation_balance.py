"""Flag palettes whose saturation is spread too widely.

Computes the mean and the population variance of HSL saturation. A
variance above 800 (roughly a standard deviation of 28 points) reads as
visual disorder and is reported as a `balance` suggestion naming the
least and most saturated colours.

Fixes:
  - "Equilibrar saturación": set every saturation to the mean
  - "Suavizar extremos": move every saturation halfway to the mean

Example:
    palette-check saturation-balance 1a8fcc 7a8a91 2596d0 7b8c93
"""

import numpy as np

from palette_checker.core.colour import hex_to_hsl
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Severity, Solution

rule = Rule(
    name='saturation-balance',
    section='core',
    help='Flag saturation variance above 800 across the palette.',
)

MAX_VARIANCE = 800.0


@rule.check
def check(colours, cases) -> list[Issue]:
    saturation = np.array([hex_to_hsl(c).s for c in colours])
    mean = float(saturation.mean())
    variance = float(saturation.var())
    if variance <= MAX_VARIANCE:
        return []

    low = int(np.argmin(saturation))
    high = int(np.argmax(saturation))
    solutions = (
        Solution.build(
            'Equilibrar saturación',
            'Ajustar todos los colores a una saturación similar',
            Fix.make(FixKind.SET_SATURATION, value=mean),
            colours,
        ),
        Solution.build(
            'Suavizar extremos',
            'Acercar los valores extremos al promedio',
            Fix.make(FixKind.BLEND_SATURATION, target=mean, weight=0.5),
            colours,
        ),
    )
    return [
        Issue(
            id='balance-saturation',
            kind='balance',
            severity=Severity.SUGGESTION,
            title='Saturación desbalanceada',
            message=(
                f'Hay mucha diferencia de saturación entre los colores (color {low + 1}: {saturation[low]:.0f}%, '
                f'color {high + 1}: {saturation[high]:.0f}%). Esto puede crear una sensación de desorden visual.'
            ),
            affected=tuple(dict.fromkeys((low, high))),
            solutions=solutions,
        )
    ]
