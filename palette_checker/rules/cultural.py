"""Cultural associations of the dominant (first) colour's hue.

Example:
    palette-check cultural 2563eb f8fafc
"""

from palette_checker.core.colour import hex_to_hsl
from palette_checker.core.types import Issue, Rule, Verdict

rule = Rule(
    name='cultural',
    section='cultural',
    help='Cultural meaning of the Principal colour, by hue band.',
)

# (upper hue bound, message, importance); hues >= 330 fall through to magenta.
BANDS = (
    (
        30,
        'Dominante rojo: energía, pasión, urgencia. En China simboliza suerte.',
        'El rojo acelera el ritmo cardíaco y crea sensación de urgencia.',
    ),
    (
        60,
        'Dominante naranja: creatividad, entusiasmo, juventud.',
        'El naranja combina la energía del rojo con la alegría del amarillo.',
    ),
    (
        90,
        'Dominante amarillo: optimismo, claridad, advertencia.',
        'El amarillo es el color más visible y capta rápidamente la atención.',
    ),
    (
        150,
        'Dominante verde: naturaleza, crecimiento, salud.',
        'El verde se asocia universalmente con la naturaleza y lo ecológico.',
    ),
    (
        210,
        'Dominante cian: frescura, tecnología, innovación.',
        'Los tonos cian transmiten modernidad y profesionalismo.',
    ),
    (
        270,
        'Dominante azul: confianza, calma, profesionalismo.',
        'El azul es el color más utilizado en branding corporativo.',
    ),
    (
        330,
        'Dominante púrpura: lujo, creatividad, espiritualidad.',
        'El púrpura se asocia históricamente con la realeza y el lujo.',
    ),
)
MAGENTA = (
    'Dominante magenta: innovación, originalidad, feminidad.',
    'El magenta transmite modernidad y ruptura con lo convencional.',
)


def meaning(hue: float) -> tuple[str, str]:
    for upper, message, importance in BANDS:
        if hue < upper:
            return message, importance
    return MAGENTA


@rule.check
def check(colours, cases) -> list[Issue]:
    message, importance = meaning(hex_to_hsl(colours[0]).h)
    return [
        Issue(
            id='cultural-meaning',
            kind='cultural',
            severity=Verdict.INFO,
            title='Significado cultural',
            message=message,
            affected=(0,),
            section='cultural',
            element='Significado cultural',
            importance=importance,
            technical='Las asociaciones culturales del color varían según la región geográfica y el contexto.',
            citation=(
                'Adams, F. M., & Osgood, C. E. (1973). A cross-cultural study of the affective meanings of color. '
                'Journal of Cross-Cultural Psychology, 4(2), 135-156.'
            ),
        )
    ]
