import pytest

from dependency_diff.comparison.version_classifier import (
    HASH_LENGTH,
    classify,
    compare_versions,
    is_hash_version,
    parse_version,
)
from dependency_diff.models.modes import DiffMode


def test_hash_version_detection():
    assert HASH_LENGTH == 7
    assert is_hash_version("abc1234")
    assert is_hash_version("1234567")
    assert not is_hash_version("1.2.3")
    assert not is_hash_version("abc123")
    assert not is_hash_version("abc12345")
    assert not is_hash_version("1.2.3.4")


@pytest.mark.parametrize("version", ["1.0.0", "abc1234", "dev-master", "1.0"])
def test_identical_strings_are_same(version):
    assert classify(version, version) is DiffMode.SAME


@pytest.mark.parametrize(
    "source, target",
    [
        ("abc1234", "1.0.0"),
        ("1.0.0", "abc1234"),
        ("abc1234", "def5678"),
        ("fff0000", "0000fff"),
    ],
)
def test_hash_versions_are_only_changed(source, target):
    assert classify(source, target) is DiffMode.CHANGED


@pytest.mark.parametrize(
    "older, newer",
    [
        ("1.0.0", "2.0.0"),
        ("1.9.0", "1.10.0"),
        ("1.0.0-beta.1", "1.0.0"),
        ("1.0.0-alpha", "1.0.0-alpha.1"),
        ("1.0.0-alpha.1", "1.0.0-alpha.beta"),
        ("1.0.0-alpha.beta", "1.0.0-beta"),
        ("1.0.0-beta", "1.0.0-beta.2"),
        ("1.0.0-beta.2", "1.0.0-beta.11"),
        ("1.0.0-beta.11", "1.0.0-rc.1"),
        ("1.0.0-rc.1", "1.0.0"),
        ("1.0.0-1", "1.0.0"),
        ("1.0.0-rc.1", "1.0.0-rc.2"),
        ("v1.2.0", "1.3.0"),
        ("0.9", "1.0.0"),
    ],
)
def test_semantic_ordering_is_symmetric(older, newer):
    assert classify(older, newer) is DiffMode.UPGRADED
    assert classify(newer, older) is DiffMode.DOWNGRADED


def test_equal_but_differently_written_versions_are_changed():
    assert compare_versions("1.0", "1.0.0") == 0
    assert classify("1.0", "1.0.0") is DiffMode.CHANGED
    assert classify("v2.1.0", "2.1.0") is DiffMode.CHANGED


def test_build_metadata_does_not_order_versions():
    assert compare_versions("1.0.0", "1.0.0+build.1") == 0
    assert classify("1.0.0", "1.0.0+build.1") is DiffMode.CHANGED
    assert classify("1.0.0+build.2", "1.0.0+build.1") is DiffMode.CHANGED


def test_unparsable_versions_are_changed():
    assert parse_version("dev-master") is None
    assert compare_versions("dev-master", "1.0.0") is None
    assert classify("dev-master", "1.0.0") is DiffMode.CHANGED


def test_missing_sides():
    assert classify(None, "1.0.0") is DiffMode.NEW
    assert classify("1.0.0", None) is DiffMode.REMOVED


def test_compare_versions():
    assert compare_versions("1.0.0", "1.0.1") == -1
    assert compare_versions("2.0.0", "1.99.99") == 1
    assert compare_versions("V3.0.0", "3.0.0") == 0
