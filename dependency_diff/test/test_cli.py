import json
import logging

import pytest

from dependency_diff.cli.run_diff import EXIT_CHANGES, EXIT_ERROR, EXIT_OK, run
from dependency_diff.config import DiffConfig
from dependency_diff.models.modes import Environment


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def snapshots(tmp_path):
    source = tmp_path / "before.json"
    target = tmp_path / "after.json"
    source.write_text(
        json.dumps(
            {
                "production": [
                    {"name": "acme/foo", "version": "1.0.0", "source_url": "https://github.com/acme/foo"},
                    {"name": "acme/bar", "version": "2.0.0"},
                ],
                "development": [{"name": "acme/kit", "version": "0.1.0"}],
            }
        ),
        encoding="utf-8",
    )
    target.write_text(
        json.dumps(
            {
                "production": [
                    {"name": "acme/foo", "version": "1.1.0", "source_url": "https://github.com/acme/foo"},
                    {"name": "acme/bar", "version": "2.0.0"},
                ],
                "development": [{"name": "acme/kit", "version": "0.1.0"}],
            }
        ),
        encoding="utf-8",
    )
    return str(source), str(target)


def test_markdown_output(snapshots, capsys):
    source, target = snapshots
    code = run(["--source", source, "--target", target, "--output", "markdown"], DiffConfig())

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "## Required by Production (production)" in out
    assert "[acme/foo](https://github.com/acme/foo)" in out
    assert "[Details](https://github.com/acme/foo/compare/1.0.0...1.1.0)" in out
    assert "acme/bar" not in out
    assert "## Required by Development (development)" in out
    assert "There is no difference" not in out


def test_with_same_lists_unchanged_packages(snapshots, capsys):
    source, target = snapshots
    run(["--source", source, "--target", target, "--with-same", "--env", "dev"], DiffConfig())

    out = capsys.readouterr().out
    assert "acme/kit" in out
    assert "Same" in out
    assert "Production" not in out


def test_strict_exit_code(snapshots, capsys):
    source, target = snapshots
    assert run(["--source", source, "--target", target, "--strict"], DiffConfig()) == EXIT_CHANGES
    assert run(["--source", source, "--target", source, "--strict"], DiffConfig()) == EXIT_OK

    out = capsys.readouterr().out
    assert out.rstrip().endswith("There is no difference (both)")


def test_json_output(snapshots, capsys):
    source, target = snapshots
    run(["--source", source, "--target", target, "--output", "json", "--env", "production"], DiffConfig())

    document = json.loads(capsys.readouterr().out)
    assert list(document) == ["production"]
    assert document["production"]["acme/foo"]["mode"] == "Upgraded"


@pytest.mark.parametrize(
    "extra",
    [
        ["--output", "html"],
        ["--env", "staging"],
    ],
)
def test_invalid_options(snapshots, capsys, extra):
    source, target = snapshots
    assert run(["--source", source, "--target", target] + extra, DiffConfig()) == EXIT_ERROR
    assert "Error:" in capsys.readouterr().err


def test_missing_snapshot(tmp_path, capsys):
    missing = str(tmp_path / "nope.json")
    assert run(["--source", missing, "--target", missing], DiffConfig()) == EXIT_ERROR
    assert "Error:" in capsys.readouterr().err


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("DEPENDENCY_DIFF_OUTPUT", "markdown")
    monkeypatch.setenv("DEPENDENCY_DIFF_ENV", "dev")
    monkeypatch.setenv("DEPENDENCY_DIFF_LOG_LEVEL", "debug")

    config = DiffConfig.from_env()

    assert config.output_format == "markdown"
    assert Environment.parse(config.environment) is Environment.DEVELOPMENT
    assert config.set_logging().name == "dependency_diff"
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.parametrize(
    "value, expected",
    [
        ("production", Environment.PRODUCTION),
        ("PROD", Environment.PRODUCTION),
        ("require-dev", Environment.DEVELOPMENT),
        (" both ", Environment.BOTH),
        (Environment.DEVELOPMENT, Environment.DEVELOPMENT),
    ],
)
def test_environment_parse(value, expected):
    assert Environment.parse(value) is expected
