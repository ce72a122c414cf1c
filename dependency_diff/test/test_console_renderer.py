import json

import pytest

from dependency_diff.comparison.package_diff import PackageDiff
from dependency_diff.exceptions import UnsupportedFormatError
from dependency_diff.models.modes import Environment
from dependency_diff.models.package import Package
from dependency_diff.render import (
    ConsoleRenderer,
    JsonRenderer,
    MarkdownRenderer,
    TableRenderer,
    available_formats,
    create_renderer,
)


def _upgrade(source_url=None, environment=Environment.PRODUCTION):
    diff = PackageDiff(Package("acme/foo", "1.0.0", source_url), environment)
    return diff.compare_with_package(Package("acme/foo", "2.0.0", source_url))


def test_console_table():
    result = ConsoleRenderer().render([_upgrade()], Environment.PRODUCTION)

    assert result.has_changes
    assert result.text == (
        "Required by Production (production)\n"
        "+----------+----------+-------------+-------------+---------+\n"
        "| Package  | Action   | Old Version | New Version | Details |\n"
        "+----------+----------+-------------+-------------+---------+\n"
        "| acme/foo | Upgraded |       1.0.0 |       2.0.0 |         |\n"
        "+----------+----------+-------------+-------------+---------+\n"
        "\n"
    )


def test_console_shows_raw_compare_url():
    text = ConsoleRenderer().render([_upgrade("https://github.com/acme/foo")], "production").text

    assert "| https://github.com/acme/foo/compare/1.0.0...2.0.0 |" in text
    assert "[Details]" not in text
    lines = [line for line in text.splitlines() if line.startswith(("+", "|"))]
    assert len({len(line) for line in lines}) == 1


def test_console_empty_environment_still_gets_a_table():
    text = ConsoleRenderer().render([_upgrade()], Environment.BOTH).text

    assert "There is no difference" not in text
    assert text.endswith(
        "Required by Development (development)\n"
        "+---------+--------+-------------+-------------+---------+\n"
        "| Package | Action | Old Version | New Version | Details |\n"
        "+---------+--------+-------------+-------------+---------+\n"
        "+---------+--------+-------------+-------------+---------+\n"
        "\n"
    )


def test_console_empty_change_log():
    result = ConsoleRenderer().render([], Environment.DEVELOPMENT)
    assert result == ("There is no difference (development)\n", False)


def test_json_output():
    result = JsonRenderer().render(
        [_upgrade("https://github.com/acme/foo", Environment.DEVELOPMENT)],
        Environment.BOTH,
    )

    assert result.has_changes
    assert json.loads(result.text) == {
        "production": {},
        "development": {
            "acme/foo": {
                "name": "acme/foo",
                "url": "https://github.com/acme/foo",
                "version_from": "1.0.0",
                "version_to": "2.0.0",
                "mode": "Upgraded",
                "compare": "https://github.com/acme/foo/compare/1.0.0...2.0.0",
            }
        },
    }


def test_json_sections_come_from_each_environment():
    renderer = JsonRenderer()
    diff = _upgrade()

    assert not isinstance(renderer, TableRenderer)
    assert renderer.render_one_environment([diff], Environment.PRODUCTION) == {"acme/foo": diff.to_dict()}
    assert renderer.join_sections({Environment.DEVELOPMENT: {}}) == '{\n    "development": {}\n}\n'


def test_json_output_without_changes_is_still_json():
    result = JsonRenderer().render([], Environment.PRODUCTION)
    assert result.has_changes is False
    assert json.loads(result.text) == {"production": {}}


def test_create_renderer():
    assert isinstance(create_renderer("console"), ConsoleRenderer)
    assert isinstance(create_renderer(" Markdown "), MarkdownRenderer)
    assert isinstance(create_renderer("JSON"), JsonRenderer)
    assert available_formats() == ["console", "markdown", "json"]


def test_create_renderer_unknown_format():
    with pytest.raises(UnsupportedFormatError):
        create_renderer("html")
