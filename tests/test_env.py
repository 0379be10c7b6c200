"""Tests for palette_checker.core.env and core.config: where settings come from."""

import os
from pathlib import Path

import pytest
from palette_checker.core.config import DEFAULT_STORE, Settings
from palette_checker.core.env import EnvFile, find_env_file, load_env, read_env_file

SETTINGS_VARS = ('PALETTE_HISTORY_CAP', 'PALETTE_STORE', 'PALETTE_LOG_LEVEL', 'PALETTE_DEFAULT_MODE')


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # set-then-delete so monkeypatch also undoes whatever load_env writes
    for name in SETTINGS_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestReadEnvFile:
    def test_keeps_only_palette_keys(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('OPENAI_API_KEY=sk-x\nPALETTE_DEFAULT_MODE=all\nDEBUG=1\n')
        assert read_env_file(f) == {'PALETTE_DEFAULT_MODE': 'all'}

    def test_export_quotes_and_comments(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text(
            '# palette-check settings\n'
            '\n'
            'export PALETTE_STORE="/tmp/my palettes.json"\n'
            "PALETTE_LOG_LEVEL='info'\n"
            'PALETTE_HISTORY_CAP = 5\n'
        )
        assert read_env_file(f) == {
            'PALETTE_STORE': '/tmp/my palettes.json',
            'PALETTE_LOG_LEVEL': 'info',
            'PALETTE_HISTORY_CAP': '5',
        }

    def test_lines_without_assignment_skipped(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('PALETTE_STORE\n=oops\nPALETTE_DEFAULT_MODE=harmony\n')
        assert read_env_file(f) == {'PALETTE_DEFAULT_MODE': 'harmony'}

    def test_unbalanced_quote_kept(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('PALETTE_DEFAULT_MODE="core\n')
        assert read_env_file(f) == {'PALETTE_DEFAULT_MODE': '"core'}


class TestFindEnvFile:
    def test_nearest_wins(self, tmp_path: Path) -> None:
        inner = tmp_path / 'brand' / 'web'
        inner.mkdir(parents=True)
        (tmp_path / '.env').write_text('PALETTE_DEFAULT_MODE=all\n')
        (tmp_path / 'brand' / '.env').write_text('PALETTE_DEFAULT_MODE=trends\n')
        assert find_env_file(inner) == (tmp_path / 'brand' / '.env').resolve()

    def test_repo_root_is_searched_but_not_passed(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_text('PALETTE_DEFAULT_MODE=all\n')
        project = tmp_path / 'project'
        (project / '.git').mkdir(parents=True)
        (project / 'src').mkdir()
        assert find_env_file(project / 'src') is None

        (project / '.env').write_text('PALETTE_DEFAULT_MODE=core\n')
        assert find_env_file(project / 'src') == (project / '.env').resolve()

    def test_git_worktree_file_is_a_boundary(self, tmp_path: Path) -> None:
        worktree = tmp_path / 'wt'
        worktree.mkdir()
        (worktree / '.git').write_text('gitdir: ../main/.git/worktrees/wt\n')
        (tmp_path / '.env').write_text('PALETTE_DEFAULT_MODE=all\n')
        assert find_env_file(worktree) is None


class TestLoadEnv:
    def test_reports_applied_keys(self, repo: Path, clean_env: None) -> None:
        (repo / '.env').write_text('PALETTE_DEFAULT_MODE=trends\nPALETTE_HISTORY_CAP=3\n')
        env = load_env()
        assert env.path == (repo / '.env').resolve()
        assert env.applied == ('PALETTE_DEFAULT_MODE', 'PALETTE_HISTORY_CAP')
        assert env.shadowed == ()
        assert os.environ['PALETTE_DEFAULT_MODE'] == 'trends'

    def test_shell_value_shadows_file(self, repo: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_DEFAULT_MODE', 'all')
        (repo / '.env').write_text('PALETTE_DEFAULT_MODE=trends\nPALETTE_LOG_LEVEL=INFO\n')
        env = load_env()
        assert env.applied == ('PALETTE_LOG_LEVEL',)
        assert env.shadowed == ('PALETTE_DEFAULT_MODE',)
        assert os.environ['PALETTE_DEFAULT_MODE'] == 'all'

    def test_other_tools_keys_untouched(self, repo: Path, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('UNRELATED_TOKEN', raising=False)
        (repo / '.env').write_text('UNRELATED_TOKEN=secret\n')
        assert load_env().applied == ()
        assert 'UNRELATED_TOKEN' not in os.environ

    def test_explicit_file_skips_discovery(self, repo: Path, tmp_path: Path, clean_env: None) -> None:
        (repo / '.env').write_text('PALETTE_DEFAULT_MODE=core\n')
        custom = tmp_path / 'ci.env'
        custom.write_text('PALETTE_DEFAULT_MODE=all\n')
        env = load_env(env_file=str(custom))
        assert env.path == custom
        assert os.environ['PALETTE_DEFAULT_MODE'] == 'all'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'missing.env')) == EnvFile()

    def test_nothing_found(self, repo: Path) -> None:
        env = load_env()
        assert env.path is None
        assert env.applied == ()


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.history_cap == 20
        assert settings.store_path == DEFAULT_STORE
        assert settings.log_level == 'WARNING'
        assert settings.default_mode == 'core'

    def test_from_mapping(self, tmp_path: Path) -> None:
        settings = Settings.from_env(
            {
                'PALETTE_HISTORY_CAP': '5',
                'PALETTE_STORE': str(tmp_path / 'p.json'),
                'PALETTE_LOG_LEVEL': 'debug',
                'PALETTE_DEFAULT_MODE': 'all',
            }
        )
        assert settings.history_cap == 5
        assert settings.store_path == tmp_path / 'p.json'
        assert settings.log_level == 'DEBUG'
        assert settings.default_mode == 'all'

    def test_reads_os_environ_by_default(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PALETTE_DEFAULT_MODE', 'harmony')
        assert Settings.from_env().default_mode == 'harmony'

    def test_values_from_env_file(self, repo: Path, clean_env: None) -> None:
        (repo / '.env').write_text('PALETTE_HISTORY_CAP=0\nPALETTE_DEFAULT_MODE=extended\n')
        load_env()
        settings = Settings.from_env()
        assert settings.history_cap is None
        assert settings.default_mode == 'extended'

    @pytest.mark.parametrize('raw', ['lots', '-4', ''])
    def test_bad_cap_falls_back(self, raw: str) -> None:
        assert Settings.from_env({'PALETTE_HISTORY_CAP': raw}).history_cap == 20

    def test_bad_log_level_falls_back(self) -> None:
        assert Settings.from_env({'PALETTE_LOG_LEVEL': 'LOUD'}).log_level == 'WARNING'
