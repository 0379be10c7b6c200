"""Check that the lightest and darkest colours reach WCAG AA (4.5:1).

Picks the darkest and lightest colours by HSL lightness (first wins on
ties) and treats them as the best available text/background pair. If even
that pair is below 4.5:1, no pair in the palette can carry body text, and
an `accessibility` error is raised with two fixes:
  - darken the darkest colour (lightness -15, floor 5)
  - lighten and desaturate the lightest (saturation -10, lightness +10, ceiling 95)

Example:
    palette-check global-accessibility 6366f1 8b5cf6 ec4899
"""

from palette_checker.core.colour import contrast_ratio, hex_to_hsl
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Severity, Solution

rule = Rule(
    name='global-accessibility',
    section='core',
    help='Lightest vs darkest colour must reach WCAG AA 4.5:1.',
)

AA_NORMAL_TEXT = 4.5


def extremes(colours) -> tuple[int, int]:
    """(darkest index, lightest index) by HSL lightness; first wins on ties."""
    lightness = [hex_to_hsl(c).l for c in colours]
    darkest = min(range(len(colours)), key=lambda i: lightness[i])
    lightest = max(range(len(colours)), key=lambda i: lightness[i])
    return darkest, lightest


@rule.check
def check(colours, cases) -> list[Issue]:
    darkest, lightest = extremes(colours)
    ratio = contrast_ratio(colours[darkest], colours[lightest])
    if ratio >= AA_NORMAL_TEXT:
        return []

    solutions = (
        Solution.build(
            'Oscurecer texto',
            'Hacer el color oscuro más oscuro aún',
            Fix.make(FixKind.ADJUST_HSL, index=darkest, dl=-15, l_min=5),
            colours,
        ),
        Solution.build(
            'Aclarar fondo',
            'Hacer el color claro más claro',
            Fix.make(FixKind.ADJUST_HSL, index=lightest, ds=-10, dl=10, l_max=95),
            colours,
        ),
    )
    return [
        Issue(
            id='accessibility-text',
            kind='accessibility',
            severity=Severity.ERROR,
            title='Problemas de accesibilidad WCAG',
            message=(
                f'El contraste entre el color más oscuro y más claro es {ratio:.2f}:1. '
                'WCAG AA requiere al menos 4.5:1 para texto normal.'
            ),
            affected=tuple(dict.fromkeys((darkest, lightest))),
            solutions=solutions,
            ratio=ratio,
            fg=colours[darkest],
            bg=colours[lightest],
        )
    ]
