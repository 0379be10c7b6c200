"""Text and button contrast in the four application cases.

For each case, checks four text/background pairings: main text, secondary
text, the Boubba button label and the Kiki button label. Each pairing is
classified:

  critical  ratio < 4.5   (below WCAG AA)
  warning   ratio < 7     (AA but not AAA)
  glare     ratio > 18 on a light background (luminance > 0.5)
  optimal   otherwise

Every pairing is reported, optimal ones included, so a host can show the
full matrix. Critical/warning pairings whose text colour comes from the
palette offer a fix that steps the text colour towards 7:1. Glare
pairings offer to soften the palette colour involved by 30 per channel.

Example:
    palette-check readability 6366f1 8b5cf6 ec4899 f59e0b 10b981
"""

from palette_checker.core.cases import TEXT_PAIRS
from palette_checker.core.colour import contrast_ratio, relative_luminance
from palette_checker.core.types import Fix, FixKind, Issue, Rule, Solution, Verdict

rule = Rule(
    name='readability',
    section='readability',
    help='Text/button contrast in four application cases (critical/warning/glare/optimal).',
)

AA = 4.5
AAA = 7.0
GLARE = 18.0

CITATION = 'Peli, E. (1990). Contrast in complex images. Journal of the Optical Society of America A, 7(10), 2032-2040.'

_TEXTS = {
    Verdict.CRITICAL: (
        'Contraste insuficiente ({ratio:.1f}:1). El texto será difícil de leer.',
        'El cerebro procesa la luminancia (forma y posición) antes que el color. Sin contraste suficiente, '
        'aumenta la carga cognitiva y el usuario se cansará rápidamente.',
        'La diferencia de luminancia relativa es insuficiente para activar eficientemente las células '
        'ganglionares en el canal magnocelular de la retina.',
    ),
    Verdict.WARNING: (
        'Contraste mínimo ({ratio:.1f}:1). Funcional pero mejorable.',
        'Un contraste mejorado facilita la lectura prolongada y reduce la fatiga visual, especialmente en '
        'dispositivos móviles.',
        'El ratio cumple el mínimo WCAG AA pero está por debajo del nivel AAA.',
    ),
    Verdict.GLARE: (
        'Alto contraste ({ratio:.1f}:1). Puede causar fatiga visual.',
        'Un contraste excesivo sobre fondos muy claros puede sobreestimular los fotorreceptores, causando fatiga.',
        'El alto contraste de luminancia puede saturar temporalmente los fotorreceptores.',
    ),
    Verdict.OPTIMAL: (
        'Contraste óptimo ({ratio:.1f}:1). Lectura fluida y cómoda.',
        'Este nivel de contraste permite una lectura fluida sin esfuerzo visual.',
        'El ratio de 7:1 a 12:1 optimiza la activación del sistema visual sin sobreestimulación.',
    ),
}


def classify(ratio: float, bg_is_light: bool) -> Verdict:
    if ratio < AA:
        return Verdict.CRITICAL
    if ratio < AAA:
        return Verdict.WARNING
    if ratio > GLARE and bg_is_light:
        return Verdict.GLARE
    return Verdict.OPTIMAL


def _solutions(verdict, fg, bg, bg_is_light, colours) -> tuple[Solution, ...]:
    if verdict in (Verdict.CRITICAL, Verdict.WARNING) and fg.index is not None:
        return (
            Solution.build(
                'Oscurecer texto' if bg_is_light else 'Aclarar texto',
                f'Ajustar el color {fg.index + 1} hasta alcanzar 7:1',
                Fix.make(
                    FixKind.CONTRAST_TARGET,
                    index=fg.index,
                    background=bg.hex,
                    target=AAA,
                    lighten=not bg_is_light,
                ),
                colours,
            ),
        )
    if verdict == Verdict.GLARE:
        # On a light background the (dark) text is lifted; otherwise the background is dimmed.
        target = fg if bg_is_light else bg
        if target.index is not None:
            return (
                Solution.build(
                    'Suavizar contraste',
                    f'Reducir la diferencia de luminosidad del color {target.index + 1}',
                    Fix.make(FixKind.SHIFT_RGB, indices=(target.index,), delta=30 if bg_is_light else -30),
                    colours,
                ),
            )
    return ()


@rule.check
def check(colours, cases) -> list[Issue]:
    issues = []
    for case in cases:
        for text_role, bg_role, element in TEXT_PAIRS:
            fg = case[text_role]
            bg = case[bg_role]
            ratio = contrast_ratio(fg.hex, bg.hex)
            bg_is_light = relative_luminance(bg.hex) > 0.5
            verdict = classify(ratio, bg_is_light)
            message, importance, technical = _TEXTS[verdict]
            affected = tuple(dict.fromkeys(i for i in (fg.index, bg.index) if i is not None))
            issues.append(
                Issue(
                    id=f'readability-{case.id}-{text_role}',
                    kind='readability',
                    severity=verdict,
                    title=f'{case.name}: {element}',
                    message=message.format(ratio=ratio),
                    affected=affected,
                    solutions=_solutions(verdict, fg, bg, bg_is_light, colours),
                    section='readability',
                    case_id=case.id,
                    case_name=case.name,
                    element=element,
                    ratio=ratio,
                    fg=fg.hex,
                    bg=bg.hex,
                    importance=importance,
                    technical=technical,
                    citation=CITATION,
                )
            )
    return issues
