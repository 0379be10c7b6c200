"""Memorability: saturation and hue variety.

Average saturation over 50 together with a hue range over 60 degrees is
distinctive. Average saturation under 30 is forgettable and gets a fix
that adds 25 points of saturation to every colour. Anything else is a
balanced, memorable palette.

Example:
    palette-check memory 9ca3af d1d5db 6b7280
"""

from palette_checker.core.colour import hex_to_hsl
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Solution, Verdict

rule = Rule(
    name='memory',
    section='memory',
    help='Distinctiveness from average saturation and hue range.',
)

CITATION = (
    'Spence, I., & Wong, P. (1997). The effect of color on apparent size. Memory & Cognition, 25(3), 292-301.'
)


@rule.check
def check(colours, cases) -> list[Issue]:
    hsl = [hex_to_hsl(c) for c in colours]
    avg_saturation = sum(c.s for c in hsl) / len(hsl)
    hue_range = max(c.h for c in hsl) - min(c.h for c in hsl)
    everyone = tuple(range(len(colours)))

    if avg_saturation > 50 and hue_range > 60:
        return [
            Issue(
                id='memory-distinctive',
                kind='memory',
                severity=Verdict.OPTIMAL,
                title='Distintividad',
                message='Paleta distintiva y memorable. Los colores son únicos y diferenciados.',
                affected=everyone,
                section='memory',
                element='Distintividad',
                importance='Las paletas distintivas se recuerdan mejor y ayudan al reconocimiento de marca.',
                technical='La combinación de alta saturación y variedad de tono aumenta la codificación en memoria.',
                citation=CITATION,
            )
        ]
    if avg_saturation < 30:
        return [
            Issue(
                id='memory-low',
                kind='memory',
                severity=Verdict.WARNING,
                title='Baja distintividad',
                message='Paleta poco distintiva. Los colores desaturados son menos memorables.',
                affected=everyone,
                solutions=(
                    Solution.build(
                        'Aumentar distintividad',
                        'Subir 25 puntos la saturación de todos los colores',
                        Fix.make(FixKind.SHIFT_SATURATION, delta=25),
                        colours,
                    ),
                ),
                section='memory',
                element='Baja distintividad',
                importance='Los colores poco saturados pueden pasar desapercibidos y ser olvidados.',
                technical='La baja saturación reduce la activación de la memoria visual a largo plazo.',
                citation=CITATION,
            )
        ]
    return [
        Issue(
            id='memory-balanced',
            kind='memory',
            severity=Verdict.OPTIMAL,
            title='Memorabilidad',
            message='Paleta con buena memorabilidad. Balance entre distinción y cohesión.',
            affected=everyone,
            section='memory',
            element='Memorabilidad',
            importance='Una paleta equilibrada facilita el reconocimiento sin resultar agresiva.',
            technical='El equilibrio entre variedad y coherencia optimiza la codificación en memoria.',
            citation=CITATION,
        )
    ]
