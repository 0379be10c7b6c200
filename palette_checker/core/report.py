"""Report builder: text and JSON output for palette-check results."""

import json
from typing import Any

from palette_checker.core.colour import colour_name, text_colour_for
from palette_checker.core.types import Report, Severity, Verdict, role_for_index

MARKS = {
    Severity.ERROR: '✗',
    Severity.WARNING: '!',
    Severity.SUGGESTION: '~',
    Verdict.CRITICAL: '✗',
    Verdict.WARNING: '!',
    Verdict.GLARE: '*',
    Verdict.OPTIMAL: '✓',
    Verdict.INFO: 'i',
}


def _palette_line(colours: list[str]) -> str:
    return '  '.join(f'{i + 1}:{c}' for i, c in enumerate(colours))


def palette_entries(colours: list[str]) -> list[dict[str, Any]]:
    """Position, role, descriptive name and readable text colour of each swatch."""
    return [
        {
            'position': i + 1,
            'hex': c,
            'role': role_for_index(i).value,
            'name': colour_name(c),
            'text': text_colour_for(c),
        }
        for i, c in enumerate(colours)
    ]


def _section_header(section: str, summary: dict | None) -> str:
    if not summary:
        return f'── {section}'
    counts = ', '.join(f'{n} {verdict}' for verdict, n in summary['counts'].items() if n)
    return f'── {section}: {summary["status"]} ({counts})'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'palette-check: {len(report.colours)} colours — mode {report.mode}']
    if report.before is not None:
        lines.append(f'  before: {_palette_line(report.before)}')
        lines.append(f'  after:  {_palette_line(report.colours)}')
    for entry in palette_entries(report.colours):
        lines.append(
            f'    {entry["position"]}. {entry["hex"]}  {entry["role"]:<10} {entry["name"]:<26} text {entry["text"]}'
        )
    for label in report.applied:
        lines.append(f'  applied: {label}')
    lines.append('')

    section = None
    for issue in report.issues:
        if issue.section != section:
            section = issue.section
            lines.append(_section_header(section, (report.sections or {}).get(section)))
        mark = MARKS.get(issue.severity, '?')
        lines.append(f'  {mark} [{issue.severity.value}] {issue.id}: {issue.title}')
        lines.append(f'      {issue.message}')
        if issue.affected:
            lines.append('      colours: ' + ', '.join(str(i + 1) for i in issue.affected))
        for n, solution in enumerate(issue.solutions, 1):
            lines.append(f'      fix {n}: {solution.label} → {" ".join(solution.preview)}')
    if report.issues:
        lines.append('')

    if report.metrics:
        m = report.metrics
        lines.append(
            f'metrics: sat {m["avg_saturation"]}%  light {m["avg_lightness"]}%  hue range {m["hue_range"]}°  '
            f'contrast {m["min_contrast"]}-{m["max_contrast"]} (avg {m["avg_contrast"]})  {m["accessibility"]}'
        )
    if report.comparison:
        c = report.comparison
        sign = '+' if c['delta'] > 0 else ''
        lines.append(f'score: {c["original"]} → {c["corrected"]} ({sign}{c["delta"]})')
    elif report.score is not None:
        lines.append(f'score: {report.score}/100')
    lines.append(f'{report.problem_count} problem(s), {len(report.issues)} record(s)')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'colours': report.colours,
        'mode': report.mode,
    }
    if report.before is not None:
        obj['before'] = report.before
    if report.applied:
        obj['applied'] = report.applied
    obj['palette'] = palette_entries(report.colours)
    if report.sections is not None:
        obj['sections'] = report.sections
    obj['issues'] = [issue.to_dict() for issue in report.issues]
    if report.score is not None:
        obj['score'] = report.score
    if report.comparison is not None:
        obj['comparison'] = report.comparison
    if report.metrics is not None:
        obj['metrics'] = report.metrics
    obj['summary'] = {
        'total': len(report.issues),
        'problems': report.problem_count,
    }
    return json.dumps(obj, indent=2, ensure_ascii=False)
