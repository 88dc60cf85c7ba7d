"""Human-readable reporting of verification outcomes."""

from __future__ import annotations

import sys
from typing import TextIO

from pkgprobe.core.checkspec import CheckSpec
from pkgprobe.core.log import logger
from pkgprobe.core.result import FailureReason, VerificationOutcome


class Reporter:
    """Write status lines and diagnostics, and pick the exit code.

    Status lines go to ``out``; every failure diagnostic goes to
    ``err``. Streams default to the process stdout/stderr and can be
    replaced for testing.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def report(self, spec: CheckSpec, outcome: VerificationOutcome) -> int:
        """Report the outcome of one check.

        Args:
            spec: Check that was run
            outcome: Verdict for that check

        Returns:
            Process exit code
        """
        if outcome.failure_reason is FailureReason.COMMAND_FAILED:
            phase = outcome.phase or "search"
            label = spec.manager if phase in ("search", "refresh") else ""
            what = f"{label} {phase}".strip()
            self._err(f"Error: {what} command failed.")
            logger.error(
                "Command failed",
                phase=phase,
                exit_status=outcome.exit_status,
            )
            return outcome.exit_code

        missing = set(outcome.missing_substrings)
        for token in spec.required_substrings:
            if token in missing:
                self._out(f"Package {token} not found.")
            else:
                self._out(f"Package {token} found.")

        if outcome.success:
            self._out("")
            if len(spec.required_substrings) > 1:
                self._out("All packages found successfully.")
            else:
                self._out("Package found successfully.")
            logger.info(
                "Verification passed",
                found=list(outcome.found_substrings),
            )
            return outcome.exit_code

        if len(spec.required_substrings) == 1:
            self._err("Error: package not found.")
        else:
            for token in outcome.missing_substrings:
                self._err(f"Error: {token} not found.")
        logger.error(
            "Verification failed",
            missing=list(outcome.missing_substrings),
        )
        return outcome.exit_code

    def _out(self, line: str) -> None:
        print(line, file=self.out, flush=True)

    def _err(self, line: str) -> None:
        print(line, file=self.err, flush=True)


__all__ = ["Reporter"]
