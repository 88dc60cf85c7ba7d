"""Tests for pre-check hooks."""

import pytest

from pkgprobe.core.config import BootstrapConfig
from pkgprobe.core.errors import BootstrapFailure, ConfigError
from pkgprobe.hooks import NoopHook, RemoteScriptHook, create_hook


def test_noop_hook_runs_nothing():
    assert NoopHook().run() is None


def test_disabled_bootstrap_uses_noop():
    hook = create_hook(BootstrapConfig(), "http://localhost:3000/sh/x")

    assert isinstance(hook, NoopHook)


def test_enabled_without_url_uses_noop():
    hook = create_hook(BootstrapConfig(enabled=True), None)

    assert isinstance(hook, NoopHook)


def test_config_url_overrides_profile_url():
    hook = create_hook(
        BootstrapConfig(enabled=True, url="http://mirror/setup.sh"),
        "http://localhost:3000/sh/x",
    )

    assert isinstance(hook, RemoteScriptHook)
    assert hook.url == "http://mirror/setup.sh"
    assert "wget -qO- http://mirror/setup.sh" in hook.command


def test_url_is_shell_quoted():
    hook = RemoteScriptHook("http://host/sh?a=1&b=2")

    assert "wget -qO- 'http://host/sh?a=1&b=2'" in hook.command


def test_command_must_reference_url():
    with pytest.raises(ConfigError):
        RemoteScriptHook("http://host/sh", command="curl http://other | sh")


def test_script_is_executed(tmp_path):
    marker = tmp_path / "ran"
    script = tmp_path / "setup.sh"
    script.write_text(f"echo bootstrapped > {marker}\n")

    result = RemoteScriptHook(str(script), command="cat {url} | sh").run()

    assert result.success
    assert marker.read_text() == "bootstrapped\n"


def test_failure_after_retries(tmp_path):
    script = tmp_path / "setup.sh"
    script.write_text("exit 9\n")
    hook = RemoteScriptHook(
        str(script), command="sh {url}", retries=1, retry_delay=0
    )

    with pytest.raises(BootstrapFailure) as excinfo:
        hook.run()

    assert excinfo.value.attempts == 2
    assert excinfo.value.result.exit_status == 9
    assert excinfo.value.phase == "bootstrap"


def test_unreachable_url_fails_with_default_command():
    """A download that fails must not look like an empty, successful
    script."""
    hook = RemoteScriptHook(
        "http://127.0.0.1:1/sh/missing", timeout=30, retries=1
    )

    with pytest.raises(BootstrapFailure) as excinfo:
        hook.run()

    assert excinfo.value.attempts == 2
    assert excinfo.value.result.exit_status != 0
