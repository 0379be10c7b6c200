"""Palette analysis entry point.

palette_analyze(colours, mode) runs the registered rules over a palette
and returns the issues they raise. It performs no I/O and never raises for
a palette of any length; malformed colours degrade inside the colour math.

Modes:
  core       the five core rules (Severity vocabulary)
  extended   every analysis section (Verdict vocabulary)
  all        core followed by extended
  <section>  one section: readability, emotions, accessibility, harmony,
             attention, cultural, memory, trends

Results are memoised on the normalised palette, so repeated calls with the
same colours do not re-run the rules.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from functools import lru_cache

from palette_checker import registry
from palette_checker.core.cases import build_cases
from palette_checker.core.colour import normalise_hex
from palette_checker.core.types import Issue, Rule, Verdict

logger = logging.getLogger(__name__)

CORE_RULES = (
    'adjacent-contrast',
    'global-accessibility',
    'similarity',
    'saturation-balance',
    'harmony-outlier',
)

SECTIONS = (
    'readability',
    'emotions',
    'accessibility',
    'harmony',
    'attention',
    'cultural',
    'memory',
    'trends',
)

MODES = ('core', 'extended', 'all', *SECTIONS)


def _order(rule: Rule) -> tuple[int, int, str]:
    if rule.name in CORE_RULES:
        return (0, CORE_RULES.index(rule.name), rule.name)
    position = SECTIONS.index(rule.section) if rule.section in SECTIONS else len(SECTIONS)
    return (1, position, rule.name)


def rules_for(mode: str) -> list[Rule]:
    """Rules run by a mode, in report order. Raises KeyError for unknown modes."""
    rules = sorted(registry.all_rules().values(), key=_order)
    if mode == 'all':
        return rules
    if mode == 'core':
        return [r for r in rules if r.section == 'core']
    if mode == 'extended':
        return [r for r in rules if r.section != 'core']
    if mode in SECTIONS:
        return [r for r in rules if r.section == mode]
    raise KeyError(f'Unknown mode: {mode}. Available: {", ".join(MODES)}')


@lru_cache(maxsize=128)
def _analyze(colours: tuple[str, ...], mode: str) -> tuple[Issue, ...]:
    rules = rules_for(mode)
    cases = build_cases(colours)
    issues: list[Issue] = []
    for rule in rules:
        found = rule.evaluate(colours, cases)
        logger.debug('%s: %d issue(s)', rule.name, len(found))
        issues.extend(found)
    return tuple(issues)


def palette_analyze(colours: Sequence[str], mode: str = 'core') -> list[Issue]:
    """Analyse a palette. Colours are normalised ('336699' -> '#336699') first."""
    palette = tuple(normalise_hex(c) for c in colours)
    return list(_analyze(palette, mode))


def clear_cache() -> None:
    _analyze.cache_clear()


def section_summary(issues: Sequence[Issue]) -> dict:
    """Counts of each Verdict plus an overall status: critical, warning or ok."""
    counts = Counter(i.severity.value for i in issues if isinstance(i.severity, Verdict))
    if counts[Verdict.CRITICAL.value]:
        status = 'critical'
    elif counts[Verdict.WARNING.value] or counts[Verdict.GLARE.value]:
        status = 'warning'
    else:
        status = 'ok'
    return {
        'status': status,
        'counts': {v.value: counts[v.value] for v in Verdict},
        'total': len(issues),
    }


def section_summaries(issues: Sequence[Issue]) -> dict[str, dict]:
    """section_summary for each extended section present, in report order."""
    grouped: dict[str, list[Issue]] = {}
    for issue in issues:
        if issue.section != 'core':
            grouped.setdefault(issue.section, []).append(issue)
    return {section: section_summary(found) for section, found in grouped.items()}
