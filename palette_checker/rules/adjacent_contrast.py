"""Flag neighbouring colours whose WCAG contrast is below 1.5:1.

Walks each consecutive pair (i, i+1). A pair below MIN_RATIO is hard to
tell apart when the colours sit side by side, so it is reported as a
`contrast` warning with three candidate fixes:
  - darken the second colour (lightness -20, floor 10)
  - lighten the first colour (lightness +20, ceiling 90)
  - rotate the second colour's hue by 30 degrees

Example:
    palette-check adjacent-contrast 000000 010101 ffffff
"""

from palette_checker.core.colour import contrast_ratio
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Severity, Solution

rule = Rule(
    name='adjacent-contrast',
    section='core',
    help='Flag neighbouring colours with contrast below 1.5:1.',
)

MIN_RATIO = 1.5


@rule.check
def check(colours, cases) -> list[Issue]:
    issues = []
    for i in range(len(colours) - 1):
        ratio = contrast_ratio(colours[i], colours[i + 1])
        if ratio >= MIN_RATIO:
            continue
        solutions = (
            Solution.build(
                'Oscurecer segundo color',
                'Reduce la luminosidad del segundo color para mayor contraste',
                Fix.make(FixKind.ADJUST_HSL, index=i + 1, dl=-20, l_min=10),
                colours,
            ),
            Solution.build(
                'Aclarar primer color',
                'Aumenta la luminosidad del primer color',
                Fix.make(FixKind.ADJUST_HSL, index=i, dl=20, l_max=90),
                colours,
            ),
            Solution.build(
                'Cambiar tono del segundo',
                'Rota el tono 30° para diferenciarlo',
                Fix.make(FixKind.ADJUST_HSL, index=i + 1, dh=30),
                colours,
            ),
        )
        issues.append(
            Issue(
                id=f'contrast-{i}',
                kind='contrast',
                severity=Severity.WARNING,
                title='Bajo contraste entre colores adyacentes',
                message=(
                    f'Los colores {i + 1} y {i + 2} tienen un contraste muy bajo ({ratio:.2f}:1). '
                    'Esto puede hacer difícil distinguirlos.'
                ),
                affected=(i, i + 1),
                solutions=solutions,
                ratio=ratio,
                fg=colours[i],
                bg=colours[i + 1],
            )
        )
    return issues
