import logging

import pytest

from gh_release_asset import __version__, cli
from gh_release_asset.release.exceptions import AssetNotFoundError
from gh_release_asset.release.extractor import ExtractionSummary


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for env_var in cli.ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def detach_file_handlers():
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.name == 'file_handler']:
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_download_release_asset(settings):
        recorded.append(settings)
        return ExtractionSummary(files=1)

    monkeypatch.setattr(cli, 'download_release_asset', fake_download_release_asset)
    return recorded


def _argv(target_dir, *extra):
    return ['--owner', 'octo', '--repo', 'widgets', '--asset-name', 'bundle.zip', '--target-dir', str(target_dir), *extra]


def _console_handler():
    return next(h for h in logging.getLogger().handlers if h.name == 'rich_console_handler')


def test_main_runs_pipeline_with_parsed_settings(calls, target_dir):
    assert cli.main(_argv(target_dir, '--timeout', '30', '--api-url', 'https://ghe.example.com/api/v3')) == cli.EXIT_SUCCESS

    [settings] = calls
    assert (settings.owner, settings.repo, settings.asset_name) == ('octo', 'widgets', 'bundle.zip')
    assert settings.target_dir == target_dir
    assert settings.timeout == 30.0
    assert settings.api_url == 'https://ghe.example.com/api/v3'


def test_main_reads_defaults_from_environment(monkeypatch, calls, target_dir):
    monkeypatch.setenv('GH_RELEASE_ASSET_OWNER', 'env-owner')
    monkeypatch.setenv('GH_RELEASE_ASSET_REPO', 'env-repo')
    monkeypatch.setenv('GH_RELEASE_ASSET_NAME', 'env.zip')
    monkeypatch.setenv('GH_RELEASE_ASSET_TARGET_DIR', str(target_dir))
    monkeypatch.setenv('GH_RELEASE_ASSET_TIMEOUT', '7')

    assert cli.main([]) == cli.EXIT_SUCCESS

    [settings] = calls
    assert (settings.owner, settings.repo, settings.asset_name, settings.timeout) == ('env-owner', 'env-repo', 'env.zip', 7.0)


def test_command_line_overrides_environment(monkeypatch, calls, target_dir):
    monkeypatch.setenv('GH_RELEASE_ASSET_OWNER', 'env-owner')

    cli.main(_argv(target_dir))

    assert calls[0].owner == 'octo'


def test_main_missing_required_option_is_usage_error(calls, target_dir):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(['--owner', 'octo', '--repo', 'widgets', '--target-dir', str(target_dir)])

    assert exc_info.value.code == 2
    assert calls == []


def test_main_invalid_target_dir_fails_without_running(calls, tmp_path, capsys):
    assert cli.main(_argv(tmp_path / 'missing')) == cli.EXIT_FAILURE

    assert calls == []
    assert 'ConfigurationError' in capsys.readouterr().err


def test_main_blank_target_dir_fails_without_running(monkeypatch, calls, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    keep = tmp_path / 'keep.txt'
    keep.write_text('keep')

    assert cli.main(_argv('')) == cli.EXIT_FAILURE

    assert calls == []
    assert keep.exists()
    assert 'ConfigurationError' in capsys.readouterr().err


def test_main_pipeline_failure_returns_failure_and_reports(monkeypatch, target_dir, capsys, caplog):
    def fail(settings):
        raise AssetNotFoundError(settings.asset_name, ['other.zip'])

    monkeypatch.setattr(cli, 'download_release_asset', fail)

    assert cli.main(_argv(target_dir)) == cli.EXIT_FAILURE

    err = capsys.readouterr().err
    assert 'Exception: AssetNotFoundError' in err
    assert err.count('other.zip') == 1
    assert any(record.levelno == logging.ERROR and 'bundle.zip' in record.getMessage() for record in caplog.records)


def test_main_interrupted_returns_interrupted_code(monkeypatch, target_dir):
    def interrupt(settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, 'download_release_asset', interrupt)

    assert cli.main(_argv(target_dir)) == cli.EXIT_INTERRUPTED


@pytest.mark.parametrize(('flag', 'level'), [('-v', logging.DEBUG), ('-q', logging.WARNING), (None, logging.INFO)])
def test_main_verbosity_sets_console_level(calls, target_dir, flag, level):
    cli.main(_argv(target_dir, *([flag] if flag else [])))

    assert _console_handler().level == level


def test_main_log_file_records_errors(monkeypatch, tmp_path, target_dir):
    log_file = tmp_path / 'run.log'

    def fail(settings):
        raise AssetNotFoundError(settings.asset_name, [])

    monkeypatch.setattr(cli, 'download_release_asset', fail)

    cli.main(_argv(target_dir, '--log-file', str(log_file)))

    for handler in logging.getLogger().handlers:
        handler.flush()
    assert 'Asset `bundle.zip` not found in GitHub release' in log_file.read_text(encoding='utf-8')


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(['--version'])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
