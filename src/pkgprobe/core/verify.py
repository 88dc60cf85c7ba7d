"""Substring verification of package-manager search output.

These functions do no I/O so they can be exercised directly with
hand-built CommandResult objects.
"""

from __future__ import annotations

from pkgprobe.core.checkspec import CheckSpec
from pkgprobe.core.result import (
    CommandResult,
    FailureReason,
    VerificationOutcome,
)


def command_failed(
    result: CommandResult, phase: str = "search"
) -> VerificationOutcome:
    """Outcome for a command that exited non-zero."""
    return VerificationOutcome(
        success=False,
        failure_reason=FailureReason.COMMAND_FAILED,
        exit_status=result.exit_status,
        phase=phase,
    )


def verify(spec: CheckSpec, result: CommandResult) -> VerificationOutcome:
    """Check every required substring against the search output.

    Matching is literal and case-sensitive. All substrings are
    evaluated, so missing_substrings lists every miss in declaration
    order. A non-zero exit status short-circuits to CommandFailed
    regardless of what the output contains.

    Args:
        spec: Check configuration with required substrings
        result: Search command result

    Returns:
        VerificationOutcome for this run
    """
    if not result.success:
        return command_failed(result, phase="search")

    found = []
    missing = []
    for token in spec.required_substrings:
        if token in result.combined_output:
            found.append(token)
        else:
            missing.append(token)

    if missing:
        return VerificationOutcome(
            success=False,
            found_substrings=tuple(found),
            missing_substrings=tuple(missing),
            failure_reason=FailureReason.SUBSTRING_MISSING,
            phase="search",
        )

    return VerificationOutcome(success=True, found_substrings=tuple(found))


__all__ = ["command_failed", "verify"]
