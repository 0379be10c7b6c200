"""Colour psychology: temperature coherence and saturation level.

Temperature of each colour is (r - b) / 255, from -1 (cold) to +1 (warm).
A variance above 0.3 means very warm and very cold tones are mixed; that
is a warning with a fix that pulls every hue halfway towards the
palette's circular mean hue. Otherwise the palette is classified warm
(mean > 0.1), cold (mean < -0.1) or neutral.

Average HSL saturation above 80 is a warning (fix: saturation -20);
below 20 is informational; anything between is optimal.

Example:
    palette-check emotions ff3300 0033ff ffcc00 00ccff
"""

import numpy as np

from palette_checker.core.colour import circular_mean_hue, hex_to_hsl, hex_to_rgb
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Solution, Verdict

rule = Rule(
    name='emotions',
    section='emotions',
    help='Colour temperature variance and saturation banding.',
)

MAX_TEMPERATURE_VARIANCE = 0.3
HIGH_SATURATION = 80.0
LOW_SATURATION = 20.0

VALDEZ = (
    'Valdez, P., & Mehrabian, A. (1994). Effects of color on emotions. '
    'Journal of Experimental Psychology: General, 123(4), 394-409.'
)
ELLIOT = (
    'Elliot, A. J., & Maier, M. A. (2014). Color psychology: Effects of perceiving color on psychological '
    'functioning. Annual Review of Psychology, 65, 95-120.'
)


def temperatures(colours) -> np.ndarray:
    rgb = np.array([hex_to_rgb(c) for c in colours], dtype=float)
    return (rgb[:, 0] - rgb[:, 2]) / 255


def _temperature_issue(colours) -> Issue:
    temps = temperatures(colours)
    mean = float(temps.mean())
    variance = float(temps.var())
    everyone = tuple(range(len(colours)))

    if variance > MAX_TEMPERATURE_VARIANCE:
        target = circular_mean_hue([hex_to_hsl(c).h for c in colours])
        return Issue(
            id='emotions-temperature',
            kind='emotions',
            severity=Verdict.WARNING,
            title='Temperatura de color',
            message='Mezcla de tonos muy cálidos y muy fríos. Puede crear tensión visual.',
            affected=everyone,
            solutions=(
                Solution.build(
                    'Armonizar temperaturas',
                    'Acercar todos los tonos a la mitad del tono medio de la paleta',
                    Fix.make(FixKind.BLEND_HUE, target=target, weight=0.5),
                    colours,
                ),
            ),
            section='emotions',
            element='Temperatura de color',
            importance=(
                'Los colores cálidos y fríos activan respuestas emocionales diferentes. '
                'Una mezcla sin armonía puede confundir el mensaje.'
            ),
            technical=(
                'La temperatura de color afecta la activación del sistema nervioso autónomo: tonos cálidos '
                'incrementan el arousal, tonos fríos lo reducen.'
            ),
            citation=VALDEZ,
        )

    if mean > 0.1:
        message = 'Paleta cálida: transmite energía, cercanía y optimismo.'
    elif mean < -0.1:
        message = 'Paleta fría: transmite calma, profesionalismo y confianza.'
    else:
        message = 'Paleta neutra: equilibrada y versátil.'
    return Issue(
        id='emotions-temperature',
        kind='emotions',
        severity=Verdict.OPTIMAL,
        title='Temperatura de color',
        message=message,
        affected=everyone,
        section='emotions',
        element='Temperatura de color',
        importance='Una temperatura de color coherente ayuda a transmitir un mensaje emocional claro.',
        technical='La coherencia térmica facilita el procesamiento visual y reduce la disonancia perceptual.',
        citation=VALDEZ,
    )


def _saturation_issue(colours) -> Issue:
    avg = float(np.mean([hex_to_hsl(c).s for c in colours]))
    everyone = tuple(range(len(colours)))

    if avg > HIGH_SATURATION:
        return Issue(
            id='emotions-saturation',
            kind='emotions',
            severity=Verdict.WARNING,
            title='Saturación alta',
            message='Colores muy saturados. Pueden resultar agresivos o fatigantes.',
            affected=everyone,
            solutions=(
                Solution.build(
                    'Reducir saturación',
                    'Bajar 20 puntos la saturación de todos los colores',
                    Fix.make(FixKind.SHIFT_SATURATION, delta=-20),
                    colours,
                ),
            ),
            section='emotions',
            element='Saturación alta',
            importance=(
                'Los colores muy saturados captan atención pero en exceso pueden causar fatiga visual y estrés.'
            ),
            technical=(
                'La alta saturación estimula intensamente los conos de la retina, aumentando la carga cognitiva '
                'del procesamiento visual.'
            ),
            citation=ELLIOT,
        )
    if avg < LOW_SATURATION:
        return Issue(
            id='emotions-saturation',
            kind='emotions',
            severity=Verdict.INFO,
            title='Saturación baja',
            message='Paleta muy desaturada. Transmite calma pero puede parecer apagada.',
            affected=everyone,
            section='emotions',
            element='Saturación baja',
            importance='Los colores desaturados transmiten sofisticación y calma, pero pueden carecer de energía.',
            technical=(
                'La baja saturación reduce la activación emocional, apropiado para contextos que requieren '
                'concentración.'
            ),
            citation=ELLIOT,
        )
    return Issue(
        id='emotions-saturation',
        kind='emotions',
        severity=Verdict.OPTIMAL,
        title='Equilibrio de saturación',
        message='La saturación está equilibrada. Transmite energía sin fatiga.',
        affected=everyone,
        section='emotions',
        element='Equilibrio de saturación',
        importance='Una saturación equilibrada permite transmitir energía sin fatiga visual.',
        technical='La saturación moderada optimiza la respuesta emocional sin sobreestimular el sistema visual.',
        citation=VALDEZ,
    )


@rule.check
def check(colours, cases) -> list[Issue]:
    return [_temperature_issue(colours), _saturation_issue(colours)]
