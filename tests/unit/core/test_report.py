"""Tests for Reporter output and exit codes."""

import io

from pkgprobe.core.checkspec import CheckSpec
from pkgprobe.core.report import Reporter
from pkgprobe.core.result import FailureReason, VerificationOutcome


def make_spec(manager: str, *required: str) -> CheckSpec:
    return CheckSpec(
        manager=manager,
        search_command=f"{manager} search openbangla",
        required_substrings=required,
    )


def report(spec, outcome):
    out, err = io.StringIO(), io.StringIO()
    code = Reporter(out=out, err=err).report(spec, outcome)
    return code, out.getvalue(), err.getvalue()


def test_single_package_success():
    code, out, err = report(
        make_spec("apt", "openbangla-keyboard"),
        VerificationOutcome(
            success=True, found_substrings=("openbangla-keyboard",)
        ),
    )

    assert code == 0
    assert out.splitlines() == [
        "Package openbangla-keyboard found.",
        "",
        "Package found successfully.",
    ]
    assert err == ""


def test_multiple_packages_success():
    code, out, _ = report(
        make_spec("zypper", "fcitx-openbangla", "ibus-openbangla"),
        VerificationOutcome(
            success=True,
            found_substrings=("fcitx-openbangla", "ibus-openbangla"),
        ),
    )

    assert code == 0
    assert out.splitlines()[:2] == [
        "Package fcitx-openbangla found.",
        "Package ibus-openbangla found.",
    ]
    assert "All packages found successfully." in out


def test_single_missing_uses_generic_message():
    code, out, err = report(
        make_spec("apt", "openbangla-keyboard"),
        VerificationOutcome(
            success=False,
            missing_substrings=("openbangla-keyboard",),
            failure_reason=FailureReason.SUBSTRING_MISSING,
        ),
    )

    assert code == 1
    assert "Package openbangla-keyboard not found." in out
    assert err == "Error: package not found.\n"


def test_each_missing_package_named():
    code, out, err = report(
        make_spec("zypper", "fcitx-openbangla", "ibus-openbangla", "kbd"),
        VerificationOutcome(
            success=False,
            found_substrings=("ibus-openbangla",),
            missing_substrings=("fcitx-openbangla", "kbd"),
            failure_reason=FailureReason.SUBSTRING_MISSING,
        ),
    )

    assert code == 1
    assert out.splitlines() == [
        "Package fcitx-openbangla not found.",
        "Package ibus-openbangla found.",
        "Package kbd not found.",
    ]
    assert err.splitlines() == [
        "Error: fcitx-openbangla not found.",
        "Error: kbd not found.",
    ]


def test_command_failure():
    code, out, err = report(
        make_spec("zypper", "fcitx-openbangla"),
        VerificationOutcome(
            success=False,
            failure_reason=FailureReason.COMMAND_FAILED,
            exit_status=104,
            phase="search",
        ),
    )

    assert code == 104
    assert out == ""
    assert err == "Error: zypper search command failed.\n"
