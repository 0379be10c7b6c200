"""CLI tests: run palette_checker.__main__.main() with patched argv."""

import json
import sys
from pathlib import Path

import pytest
from palette_checker.__main__ import main


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty repo-like dir with a private store."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('PALETTE_STORE', str(tmp_path / 'palettes.json'))
    monkeypatch.delenv('PALETTE_DEFAULT_MODE', raising=False)
    return tmp_path


def run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['palette-check', *argv])
    try:
        main()
    except SystemExit as e:
        return int(e.code or 0)
    return 0


class TestRuleCommands:
    def test_rule_text(self, monkeypatch, capsys):
        assert run(monkeypatch, 'adjacent-contrast', '000000', '010101', 'ffffff') == 0
        out = capsys.readouterr().out
        assert 'contrast-0' in out
        assert 'score: 85/100' in out

    def test_rule_json(self, monkeypatch, capsys):
        assert run(monkeypatch, 'similarity', '336699', '336699', '336699', '--json') == 0
        data = json.loads(capsys.readouterr().out)
        assert [i['id'] for i in data['issues']] == ['similarity-0-2']
        assert data['issues'][0]['vocabulary'] == 'severity'

    def test_bad_colour(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '000000', 'blue') == 1
        assert 'Error:' in capsys.readouterr().err

    def test_too_few_colours(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '000000') == 1


class TestAnalyze:
    def test_mode(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '6366f1', '8b5cf6', 'ec4899', '-m', 'readability', '-j') == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data['issues']) == 16
        assert {i['section'] for i in data['issues']} == {'readability'}

    def test_section_status_line(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '336699', '336699', '-m', 'accessibility') == 0
        out = capsys.readouterr().out
        assert '── accessibility: warning (3 warning)' in out
        assert 'Azul' in out

    def test_section_summary_json(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '336699', '336699', '-m', 'accessibility', '-j') == 0
        data = json.loads(capsys.readouterr().out)
        assert data['sections']['accessibility']['counts']['warning'] == 3
        assert data['palette'][0]['text'] == '#FFFFFF'

    def test_unknown_mode(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '000000', 'ffffff', '-m', 'vibes') == 1
        assert 'Unknown mode' in capsys.readouterr().err

    def test_fail_under(self, monkeypatch, capsys):
        assert run(monkeypatch, 'analyze', '336699', '336699', '336699', '--fail-under', '90') == 1
        captured = capsys.readouterr()
        assert 'score:' in captured.out
        assert 'FAIL' in captured.err

    def test_fail_under_passes(self, monkeypatch):
        assert run(monkeypatch, 'analyze', '000000', 'ffffff', '--fail-under', '50') == 0

    def test_default_mode_from_env(self, monkeypatch, capsys):
        monkeypatch.setenv('PALETTE_DEFAULT_MODE', 'trends')
        assert run(monkeypatch, 'analyze', 'ffbe98', '000000', '-j') == 0
        data = json.loads(capsys.readouterr().out)
        assert data['mode'] == 'trends'

    def test_default_mode_from_env_file(self, monkeypatch, capsys, _isolated):
        monkeypatch.setenv('PALETTE_DEFAULT_MODE', '')
        monkeypatch.delenv('PALETTE_DEFAULT_MODE')
        (_isolated / '.env').write_text('PALETTE_DEFAULT_MODE=memory\nPALETTE_STORE=/elsewhere.json\n')
        assert run(monkeypatch, 'analyze', 'ffbe98', '000000', '-j') == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)['mode'] == 'memory'
        assert '(PALETTE_DEFAULT_MODE)' in captured.err


class TestScoreAndMetrics:
    def test_score(self, monkeypatch, capsys):
        assert run(monkeypatch, 'score', '000000', '010101', 'ffffff', '-j') == 0
        assert json.loads(capsys.readouterr().out)['score'] == 85

    def test_metrics(self, monkeypatch, capsys):
        assert run(monkeypatch, 'metrics', '000000', 'ffffff', '-j') == 0
        metrics = json.loads(capsys.readouterr().out)['metrics']
        assert metrics['accessibility'] == 'AA'
        assert metrics['max_contrast'] == 21.0


class TestFix:
    def test_fix_json(self, monkeypatch, capsys):
        assert run(monkeypatch, 'fix', '000000', '010101', 'ffffff', 'contrast-0', '-s', '2', '-j') == 0
        data = json.loads(capsys.readouterr().out)
        assert data['before'] == ['#000000', '#010101', '#FFFFFF']
        assert data['applied'] == ['Aclarar primer color']
        assert len(data['colours']) == 3
        assert data['colours'] != data['before']
        assert data['comparison']['original'] == 85

    def test_unknown_issue(self, monkeypatch, capsys):
        assert run(monkeypatch, 'fix', '000000', 'ffffff', 'contrast-0') == 1
        assert 'no issue' in capsys.readouterr().err

    def test_bad_solution_number(self, monkeypatch, capsys):
        assert run(monkeypatch, 'fix', '000000', '010101', 'ffffff', 'contrast-0', '-s', '9') == 1


class TestStoreCommands:
    def test_save_list_show_delete(self, monkeypatch, capsys):
        assert run(monkeypatch, 'save', 'brand', '1e293b', '64748b', 'f43f5e') == 0
        assert 'saved brand' in capsys.readouterr().out

        assert run(monkeypatch, 'list') == 0
        assert '#1E293B #64748B #F43F5E' in capsys.readouterr().out

        assert run(monkeypatch, 'show', 'brand', '-j') == 0
        assert json.loads(capsys.readouterr().out)['colours'] == ['#1E293B', '#64748B', '#F43F5E']

        assert run(monkeypatch, 'delete', 'brand') == 0
        assert run(monkeypatch, 'show', 'brand') == 1

    def test_list_empty(self, monkeypatch, capsys):
        assert run(monkeypatch, 'list') == 0
        assert 'No saved palettes' in capsys.readouterr().out


class TestHelp:
    def test_help_lists_rules(self, monkeypatch, capsys):
        assert run(monkeypatch, 'help') == 0
        out = capsys.readouterr().out
        assert 'adjacent-contrast' in out
        assert 'readability' in out

    def test_help_rule(self, monkeypatch, capsys):
        assert run(monkeypatch, 'help', 'similarity') == 0
        assert 'Flag non-adjacent colours' in capsys.readouterr().out

    def test_help_unknown_rule(self, monkeypatch):
        assert run(monkeypatch, 'help', 'nope') == 1

    def test_no_command(self, monkeypatch):
        assert run(monkeypatch) == 1
