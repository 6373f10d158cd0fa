"""Integration test: run the uikit-css CLI end to end against a temp output dir."""

import json
from pathlib import Path

import pytest
from uikit_css import registry
from uikit_css.__main__ import main
from uikit_css.registry import all_generators, get, module_for

SETTINGS_VARS = ('UIKIT_CSS_OUT_DIR', 'UIKIT_CSS_FORMATTER', 'UIKIT_CSS_PREFIX', 'UIKIT_CSS_PLATFORMS')


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated cwd: no .env above it, no UIKIT_CSS_* settings in the environment."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for name in SETTINGS_VARS:
        # registered via setenv so teardown also drops values loaded from .env
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return tmp_path


class TestRegistry:
    def test_discovers_all_generators(self) -> None:
        assert set(all_generators()) == {'all', 'css', 'config', 'v4', 'swatches'}

    def test_rediscovers_from_package_listing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, '_registry', {})
        assert set(registry.discover()) == {'all', 'css', 'config', 'v4', 'swatches'}

    def test_unknown_generator(self) -> None:
        with pytest.raises(KeyError):
            get('scss')

    def test_module_docs(self) -> None:
        assert 'Tailwind v4' in (module_for('v4').__doc__ or '')
        assert module_for('css').__name__ == 'uikit_css.generators.legacy_css'


class TestBuildAll:
    def test_writes_every_output(self, workdir: Path) -> None:
        main(['all', '--out-dir', 'out'])
        out = workdir / 'out'
        written = sorted(str(p.relative_to(out)) for p in out.rglob('*') if p.is_file())
        assert written == [
            'css/ios.css',
            'css/macos.css',
            'tailwind/ios.js',
            'tailwind/macos.js',
            'v4/ios.css',
            'v4/macos.css',
        ]

    def test_default_out_dir(self, workdir: Path) -> None:
        main(['all', '--platform', 'ios'])
        assert (workdir / 'src' / 'v4' / 'ios.css').is_file()
        assert not (workdir / 'src' / 'v4' / 'macos.css').exists()

    def test_byte_identical_reruns(self, workdir: Path) -> None:
        main(['all', '--out-dir', 'out'])
        first = {p: p.read_bytes() for p in (workdir / 'out').rglob('*.css')}
        main(['all', '--out-dir', 'out'])
        assert {p: p.read_bytes() for p in (workdir / 'out').rglob('*.css')} == first

    def test_ios_v4_content(self, workdir: Path) -> None:
        main(['v4', '--out-dir', 'out', '--platform', 'ios'])
        lines = (workdir / 'out' / 'v4' / 'ios.css').read_text(encoding='utf-8').splitlines()
        assert '  --color-red: rgb(var(--color-red));' in lines
        assert '  --color-separator: rgba(var(--color-separator));' in lines
        assert '  --color-placeholder-text-dark: rgb(var(--color-placeholderText-dark));' in lines
        assert '    --color-red: 255 59 48;' in lines
        assert '    --color-red: 255 69 58;' in lines
        assert lines.count('      --color-red: var(--color-red-dark);') == 1
        assert lines.count('    --color-red: var(--color-red-dark);') == 1

    def test_json_report(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['all', '--out-dir', 'out', '--json'])
        report = json.loads(capsys.readouterr().out)
        assert report['summary'] == {'files': 6}
        assert [p['name'] for p in report['platforms']] == ['ios', 'macos']
        assert list(report['platforms'][0]['outputs']) == ['css', 'config', 'v4']

    def test_text_report_and_progress(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['css', '--out-dir', 'out'])
        captured = capsys.readouterr()
        assert '2 file(s) written' in captured.out
        assert 'uikit-css: generated css ios' in captured.err

    def test_prefix_from_env_file(self, workdir: Path) -> None:
        (workdir / '.env').write_text('UIKIT_CSS_PREFIX=ui-\nUIKIT_CSS_PLATFORMS=macos\n')
        main(['css', '--out-dir', 'out'])
        assert '--ui-label:' in (workdir / 'out' / 'css' / 'macos.css').read_text(encoding='utf-8')
        assert not (workdir / 'out' / 'css' / 'ios.css').exists()

    def test_swatches_only_when_asked(self, workdir: Path) -> None:
        main(['all', '--out-dir', 'out'])
        assert not (workdir / 'out' / 'swatches').exists()
        main(['swatches', '--out-dir', 'out', '--platform', 'ios'])
        assert (workdir / 'out' / 'swatches' / 'ios.png').is_file()


class TestFailures:
    def test_unknown_formatter_exits_1(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['all', '--out-dir', 'out', '--formatter', 'nope'])
        assert exc.value.code == 1
        assert 'uikit-css: error: Unknown formatter' in capsys.readouterr().err
        assert not (workdir / 'out').exists()

    def test_failure_aborts_remaining_passes(self, workdir: Path) -> None:
        # A file where the config directory should be makes the config pass fail
        (workdir / 'out').mkdir()
        (workdir / 'out' / 'tailwind').write_text('not a directory')
        with pytest.raises(SystemExit) as exc:
            main(['all', '--out-dir', 'out'])
        assert exc.value.code == 1
        assert (workdir / 'out' / 'css' / 'ios.css').is_file()
        assert not (workdir / 'out' / 'v4').exists()

    def test_no_generator_exits_1(self, workdir: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


class TestHelp:
    def test_lists_generators(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('all', 'config', 'css', 'swatches', 'v4'):
            assert f'  {name}' in out

    def test_full_docs(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'v4'])
        assert '@custom-variant' in capsys.readouterr().out

    def test_unknown(self, workdir: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['help', 'scss'])
        assert exc.value.code == 1
