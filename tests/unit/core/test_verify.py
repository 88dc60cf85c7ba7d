"""Tests for substring verification."""

import pytest

from pkgprobe.core.checkspec import CheckSpec
from pkgprobe.core.result import CommandResult, FailureReason
from pkgprobe.core.verify import command_failed, verify


def make_spec(*required: str) -> CheckSpec:
    return CheckSpec(
        manager="zypper",
        search_command="zypper search openbangla",
        required_substrings=required,
    )


def make_result(output: str, status: int = 0) -> CommandResult:
    return CommandResult(
        command="zypper search openbangla",
        combined_output=output,
        exit_status=status,
    )


def test_all_present():
    outcome = verify(
        make_spec("fcitx-openbangla", "ibus-openbangla"),
        make_result("i | fcitx-openbangla\ni | ibus-openbangla\n"),
    )

    assert outcome.success is True
    assert outcome.failure_reason is FailureReason.NONE
    assert outcome.found_substrings == ("fcitx-openbangla", "ibus-openbangla")
    assert outcome.exit_code == 0


def test_empty_requirements_vacuously_pass():
    outcome = verify(make_spec(), make_result(""))

    assert outcome.success is True
    assert outcome.missing_substrings == ()


def test_every_miss_is_reported():
    """Verification does not stop at the first missing substring."""
    outcome = verify(
        make_spec("alpha", "beta", "gamma", "delta"),
        make_result("beta delta"),
    )

    assert outcome.success is False
    assert outcome.missing_substrings == ("alpha", "gamma")
    assert outcome.found_substrings == ("beta", "delta")
    assert outcome.failure_reason is FailureReason.SUBSTRING_MISSING
    assert outcome.exit_code == 1


@pytest.mark.parametrize("output", ["", "openbangla-keyboard", "anything"])
def test_nonzero_exit_always_fails(output):
    outcome = verify(make_spec("openbangla-keyboard"), make_result(output, 5))

    assert outcome.success is False
    assert outcome.failure_reason is FailureReason.COMMAND_FAILED
    assert outcome.missing_substrings == ()
    assert outcome.exit_code == 5


def test_match_is_case_sensitive():
    outcome = verify(
        make_spec("openbangla-keyboard"),
        make_result("OpenBangla-Keyboard 2.0.0"),
    )

    assert outcome.missing_substrings == ("openbangla-keyboard",)


def test_match_is_literal_not_regex():
    outcome = verify(make_spec("ibus.openbangla"), make_result("ibus-openbangla"))

    assert outcome.success is False


def test_verify_is_deterministic():
    spec = make_spec("fcitx-openbangla", "ibus-openbangla")
    result = make_result("fcitx-openbangla")

    assert verify(spec, result) == verify(spec, result)


def test_command_failed_names_phase():
    outcome = command_failed(make_result("", 100), phase="refresh")

    assert outcome.phase == "refresh"
    assert outcome.exit_code == 100
