"""Tests for configuration models and template substitution."""

import pytest

from pkgprobe.core.config import ProfileConfig
from pkgprobe.core.errors import ConfigError


def test_profile_renders_search_command():
    profile = ProfileConfig(
        manager="zypper",
        query="openbangla",
        refresh="zypper --gpg-auto-import-keys refresh",
        required=["fcitx-openbangla", "ibus-openbangla"],
    )

    spec = profile.to_check_spec()

    assert spec.search_command == "zypper search openbangla"
    assert spec.required_substrings == ("fcitx-openbangla", "ibus-openbangla")
    assert spec.refresh_command == "zypper --gpg-auto-import-keys refresh"


def test_shell_braces_in_search_template_preserved():
    profile = ProfileConfig(
        manager="zypper",
        query="openbangla",
        search="{manager} se {query} | awk '{print $3}'",
    )

    spec = profile.to_check_spec()

    assert spec.search_command == (
        "zypper se openbangla | awk '{print $3}'"
    )


def test_default_profiles_loaded(make_state):
    state = make_state({"search": "true"})

    profiles = state.config.profiles
    assert profiles["apt"].to_check_spec().search_command == (
        "apt search openbangla"
    )
    assert profiles["apt"].prepare == ["apt update", "apt install sudo -y"]
    assert profiles["zypper"].refresh == (
        "zypper --gpg-auto-import-keys refresh"
    )
    assert state.config.bootstrap.enabled is False


def test_runtime_templates_preserved(make_state):
    """{query} and {url} belong to the runners, not to State."""
    state = make_state({"search": "{manager} search {query}"})

    assert state.config.profiles["test"].search == "{manager} search {query}"
    assert "{url}" in state.config.bootstrap.command


def test_config_templates_substituted(make_state, tmp_path):
    state = make_state(
        {"search": "true"},
        log_root=str(tmp_path / "{config.profile}"),
    )

    assert state.config.log_root == tmp_path / "test"


def test_unknown_profile(make_state):
    state = make_state({"search": "true"})

    with pytest.raises(ConfigError, match="Available: apt, dnf, test, zypper"):
        state.config.selected_profile("pacman")
