"""palette-check — Diagnose and correct colour palettes.

Usage: palette-check <rule|command> COLOUR... [options]

Colours are 6-digit hex values, case-insensitive, with or without '#'.
A palette has 2 to 8 colours; position gives the role
(1 Principal, 2 Secundario, 3-4 Acento, 5+ Detalle).

Rules are auto-discovered from palette_checker/rules/.
Each rule module's docstring is its documentation.
Run `palette-check help <rule>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-check looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  PALETTE_HISTORY_CAP, PALETTE_STORE, PALETTE_LOG_LEVEL, PALETTE_DEFAULT_MODE
"""

import argparse
import logging
import sys

from palette_checker import registry
from palette_checker.analysis import MODES, palette_analyze, section_summaries
from palette_checker.core.cases import build_cases
from palette_checker.core.config import Settings
from palette_checker.core.env import load_env
from palette_checker.core.report import format_json, format_text
from palette_checker.core.scoring import palette_metrics, score
from palette_checker.core.store import JsonPaletteStore, StoreError, add_palette, delete_palette, find_palette
from palette_checker.core.types import PaletteError, Report
from palette_checker.session import PaletteSession, check_palette

logger = logging.getLogger('palette_checker')

COMMANDS = ('analyze', 'score', 'metrics', 'fix', 'save', 'list', 'show', 'delete', 'help')


def _short_doc(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _add_output_options(p: argparse.ArgumentParser) -> None:
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument(
        '-f',
        '--fail-under',
        type=int,
        default=None,
        metavar='N',
        help='Exit 1 if the palette score is below N (CI gating)',
    )


def _build_parser() -> argparse.ArgumentParser:
    rules = registry.all_rules()

    epilog = (
        'Examples:\n'
        '  palette-check adjacent-contrast 000000 010101 ffffff\n'
        '  palette-check analyze 6366f1 8b5cf6 ec4899 -m all\n'
        '  palette-check analyze 6366f1 8b5cf6 ec4899 --json --fail-under 70\n'
        '  palette-check fix 000000 010101 ffffff contrast-0 -s 2\n'
        '  palette-check save brand 1e293b 64748b f43f5e\n'
        '  palette-check show brand\n'
        '  palette-check help readability\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-check',
        description='Diagnose and correct colour palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Rule or command to run')

    # One subcommand per rule, help text from the module docstring
    for name in sorted(rules):
        p = sub.add_parser(name, help=_short_doc(name))
        p.add_argument('colours', nargs='+', metavar='COLOUR', help='Palette colours in order')
        _add_output_options(p)

    p = sub.add_parser('analyze', help='Run every rule of an analysis mode')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help='Palette colours in order')
    p.add_argument('-m', '--mode', default=None, help=f'One of: {", ".join(MODES)}')
    _add_output_options(p)

    p = sub.add_parser('score', help='Print the 0-100 palette score')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help='Palette colours in order')
    _add_output_options(p)

    p = sub.add_parser('metrics', help='Average saturation/lightness, hue range, contrast range')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help='Palette colours in order')
    _add_output_options(p)

    p = sub.add_parser('fix', help='Apply one proposed solution and show before/after')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help='Palette colours in order')
    p.add_argument('issue_id', metavar='ISSUE_ID', help='Issue id as printed by analyze')
    p.add_argument('-s', '--solution', type=int, default=1, metavar='N', help='Solution number (default: 1)')
    p.add_argument('-m', '--mode', default='all', help='Mode the issue comes from (default: all)')
    _add_output_options(p)

    p = sub.add_parser('save', help='Save a named palette to the store')
    p.add_argument('name', help='Palette name')
    p.add_argument('colours', nargs='+', metavar='COLOUR', help='Palette colours in order')

    sub.add_parser('list', help='List saved palettes')

    p = sub.add_parser('show', help='Analyse a saved palette')
    p.add_argument('name', help='Palette name or id')
    p.add_argument('-m', '--mode', default=None, help=f'One of: {", ".join(MODES)}')
    _add_output_options(p)

    p = sub.add_parser('delete', help='Delete a saved palette')
    p.add_argument('name', help='Palette name or id')

    help_parser = sub.add_parser('help', help='Print full docs for a rule')
    help_parser.add_argument('rule', nargs='?', help='Rule name')

    return parser


def _configure_logging(verbose: bool, settings: Settings) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format='%(name)s: %(message)s', stream=sys.stderr)


def _fail(message: str) -> None:
    print(f'Error: {message}', file=sys.stderr)
    sys.exit(1)


def _print_help(rule: str | None) -> None:
    """Print full module docstring for a rule."""
    rules = registry.all_rules()

    if rule is None:
        print('Available rules:\n')
        for name in sorted(rules):
            print(f'  {name:<22} [{rules[name].section}] {_short_doc(name)}')
        print(f'\nAnalysis modes: {", ".join(MODES)}')
        print('\nRun: palette-check help <rule> for full docs.')
        return

    if rule not in rules:
        print(f'Unknown rule: {rule}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(rules))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(rule).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {rule!r})')
        return
    print(doc)


def _emit(report: Report, as_json: bool, fail_under: int | None) -> None:
    print(format_json(report) if as_json else format_text(report))
    # CI gate after output, so the report is visible even on failure
    if fail_under is not None and report.score is not None and report.score < fail_under:
        print(f'\nFAIL: score {report.score} is below {fail_under}', file=sys.stderr)
        sys.exit(1)


def _run_rule(args: argparse.Namespace, colours: list[str]) -> Report:
    rule = registry.get(args.command)
    issues = rule.evaluate(colours, build_cases(colours))
    return Report(
        colours=colours,
        mode=rule.name,
        issues=issues,
        score=score(palette_analyze(colours)),
        sections=section_summaries(issues) or None,
    )


def _run_analyze(colours: list[str], mode: str) -> Report:
    try:
        issues = palette_analyze(colours, mode)
    except KeyError as e:
        _fail(e.args[0])
    return Report(
        colours=colours,
        mode=mode,
        issues=issues,
        score=score(palette_analyze(colours)),
        sections=section_summaries(issues) or None,
    )


def _run_fix(args: argparse.Namespace, colours: list[str], settings: Settings) -> Report:
    session = PaletteSession(colours, history_cap=settings.history_cap)
    try:
        issues = session.analyze(args.mode)
    except KeyError as e:
        _fail(e.args[0])
    issue = next((i for i in issues if i.id == args.issue_id), None)
    if issue is None:
        _fail(f'no issue {args.issue_id!r} for this palette. Found: {", ".join(i.id for i in issues) or "none"}')
    if not 1 <= args.solution <= len(issue.solutions):
        _fail(f'issue {issue.id} has {len(issue.solutions)} solution(s), got -s {args.solution}')

    solution = issue.solutions[args.solution - 1]
    session.apply_solution(solution)
    comparison = session.comparison()
    after = session.implement_changes()
    logger.info('applied %r to %s', solution.label, issue.id)
    return Report(
        colours=after,
        mode='core',
        issues=palette_analyze(after),
        score=comparison.corrected,
        comparison=comparison.to_dict(),
        before=list(session.original),
        applied=[solution.label],
    )


def _palette_from_args(args: argparse.Namespace) -> list[str]:
    try:
        return list(check_palette(args.colours))
    except PaletteError as e:
        _fail(str(e))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env = load_env(env_file=args.env_file)
    settings = Settings.from_env()
    _configure_logging(args.verbose, settings)
    if env.path:
        print(f'palette-check: loaded {env.path} ({", ".join(env.applied) or "no new settings"})', file=sys.stderr)
    for key in env.shadowed:
        logger.debug('%s from the environment overrides %s', key, env.path)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.rule)
        return

    store = JsonPaletteStore(settings.store_path)
    try:
        if args.command == 'save':
            saved = add_palette(store, args.name, _palette_from_args(args))
            print(f'saved {saved.name} ({saved.id}): {" ".join(saved.colours)}')
            return
        if args.command == 'list':
            palettes = store.load_palettes()
            if not palettes:
                print(f'No saved palettes in {store.path}')
            for p in palettes:
                print(f'  {p.name:<20} {p.id}  {p.created_at}  {" ".join(p.colours)}')
            return
        if args.command == 'delete':
            if not delete_palette(store, args.name):
                _fail(f'no saved palette named {args.name!r}')
            print(f'deleted {args.name}')
            return
        if args.command == 'show':
            saved = find_palette(store, args.name)
            if saved is None:
                _fail(f'no saved palette named {args.name!r}')
            args.colours = list(saved.colours)
    except StoreError as e:
        _fail(str(e))

    colours = _palette_from_args(args)

    if args.command in ('analyze', 'show'):
        report = _run_analyze(colours, args.mode or settings.default_mode)
    elif args.command == 'score':
        report = Report(colours=colours, mode='core', score=score(palette_analyze(colours)))
    elif args.command == 'metrics':
        metrics = palette_metrics(colours)
        report = Report(colours=colours, mode='metrics', metrics=metrics.to_dict() if metrics else None)
    elif args.command == 'fix':
        report = _run_fix(args, colours, settings)
    else:
        report = _run_rule(args, colours)

    _emit(report, args.json, args.fail_under)


if __name__ == '__main__':
    main()
