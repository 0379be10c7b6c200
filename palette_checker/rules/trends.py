"""Alignment with current colour trends.

A palette aligns with the trend when any of its colours is within a
Manhattan RGB distance of 100 from one of the reference trend colours
(earth tones and soft pastels). A palette where every colour has
saturation under 60 and lightness over 60 is pastel. Both are reported as
optimal; a palette that is neither gets an informational "timeless" note.

Example:
    palette-check trends ffbe98 6f7e6c 2e4a67
"""

from palette_checker.core.colour import hex_to_hsl, rgb_manhattan
from palette_checker.core.types import Issue, Rule, Verdict

rule = Rule(
    name='trends',
    section='trends',
    help='Proximity to the 2024-2025 trend colours and pastel detection.',
)

TREND_COLOURS = ('#FFBE98', '#E0B589', '#6F7E6C', '#D6C5C9', '#2E4A67')
MAX_TREND_DISTANCE = 100


def trend_matches(colours) -> list[int]:
    """Indices of colours close to any trend colour."""
    return [
        i
        for i, colour in enumerate(colours)
        if any(rgb_manhattan(colour, trend) < MAX_TREND_DISTANCE for trend in TREND_COLOURS)
    ]


def is_pastel(colours) -> bool:
    hsl = [hex_to_hsl(c) for c in colours]
    return all(c.s < 60 for c in hsl) and all(c.l > 60 for c in hsl)


@rule.check
def check(colours, cases) -> list[Issue]:
    issues = []
    matches = trend_matches(colours)
    pastel = is_pastel(colours)

    if matches:
        issues.append(
            Issue(
                id='trends-alignment',
                kind='trends',
                severity=Verdict.OPTIMAL,
                title='Alineación 2024-2025',
                message='La paleta incluye tonos en tendencia actual (earth tones, soft pastels).',
                affected=tuple(matches),
                section='trends',
                element='Alineación 2024-2025',
                importance='Estar alineado con tendencias mejora la percepción de modernidad.',
                technical='Los tonos terrosos y pasteles suaves dominan las tendencias actuales.',
                citation='Pantone Color Institute (2024). Color Trend Forecast.',
            )
        )
    if pastel:
        issues.append(
            Issue(
                id='trends-pastel',
                kind='trends',
                severity=Verdict.OPTIMAL,
                title='Estética pastel',
                message='Paleta pastel: muy actual y versátil para marcas contemporáneas.',
                affected=tuple(range(len(colours))),
                section='trends',
                element='Estética pastel',
                importance='Los pasteles transmiten suavidad y modernidad, muy populares en 2024.',
                technical='La combinación de baja saturación y alta luminosidad crea la estética pastel.',
                citation='WGSN Color Forecast (2024). Future Consumer.',
            )
        )
    if not issues:
        issues.append(
            Issue(
                id='trends-timeless',
                kind='trends',
                severity=Verdict.INFO,
                title='Estilo atemporal',
                message='Paleta con estilo propio, independiente de tendencias actuales.',
                affected=(),
                section='trends',
                element='Estilo atemporal',
                importance='No seguir tendencias puede ser una fortaleza si buscas atemporalidad.',
                technical='Los estilos atemporales priorizan principios clásicos sobre modas pasajeras.',
                citation='Heller, E. (2004). Psicología del color. Gustavo Gili.',
            )
        )
    return issues
