"""Tests for YAML loading, include: directives and --include."""

import sys
from pathlib import Path

import pytest

from pkgprobe.core.config import State
from pkgprobe.core.yaml_settings import (
    YamlWithIncludesSettingsSource,
    cli_includes,
)


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


def load(path) -> dict:
    return YamlWithIncludesSettingsSource(State, yaml_file=str(path))()


def test_defaults_always_loaded(fixtures_dir, mock_argv):
    data = load(fixtures_dir / "minimal.yaml")

    profiles = data["config"]["profiles"]
    assert {"apt", "zypper", "dnf"} <= set(profiles)
    assert profiles["zypper"]["required"] == [
        "fcitx-openbangla",
        "ibus-openbangla",
    ]
    assert data["config"]["profile"] == "zypper"


def test_include_directive_merges_under_including_file(
    fixtures_dir, mock_argv
):
    data = load(fixtures_dir / "with_include.yaml")

    pacman = data["config"]["profiles"]["pacman"]
    assert pacman["query"] == "bangla"
    assert pacman["refresh"] == "pacman -Sy"
    assert data["config"]["profile"] == "pacman"
    assert "include" not in data


def test_single_cli_include(fixtures_dir, mock_argv):
    sys.argv = [
        "prog",
        "--include",
        str(fixtures_dir / "override_strict.yaml"),
    ]

    data = load(fixtures_dir / "minimal.yaml")

    assert data["config"]["strict"] is True
    assert data["config"]["timeout"] == 42


def test_multiple_cli_includes(fixtures_dir, mock_argv):
    sys.argv = [
        "prog",
        "--include", str(fixtures_dir / "extra_profiles.yaml"),
        "--include", str(fixtures_dir / "override_strict.yaml"),
    ]

    data = load(fixtures_dir / "minimal.yaml")

    assert "pacman" in data["config"]["profiles"]
    assert data["config"]["strict"] is True


def test_circular_include_rejected(fixtures_dir, mock_argv):
    with pytest.raises(ValueError, match="Circular include"):
        load(fixtures_dir / "circular_a.yaml")


def test_cli_includes_parsing():
    argv = ["prog", "--include", "a.yaml", "check", "--include=b.yaml"]

    assert cli_includes(argv) == ["a.yaml", "b.yaml"]
