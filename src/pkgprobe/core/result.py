"""Result types for command execution and verification."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CommandResult(BaseModel):
    """Outcome of one external command execution.

    combined_output holds stdout and stderr merged in the order the
    command wrote them.
    """

    model_config = ConfigDict(frozen=True)

    command: str
    combined_output: str = ""
    exit_status: int
    timestamp: datetime = Field(default_factory=datetime.now)
    log_file: Path | None = None

    @property
    def success(self) -> bool:
        return self.exit_status == 0

    @property
    def timed_out(self) -> bool:
        """Runner reports timeouts as exit status -1."""
        return self.exit_status == -1


class FailureReason(str, Enum):
    """Why a verification run did not succeed."""

    COMMAND_FAILED = "CommandFailed"
    SUBSTRING_MISSING = "SubstringMissing"
    NONE = "None"


class VerificationOutcome(BaseModel):
    """Verdict derived from a CheckSpec and a CommandResult."""

    model_config = ConfigDict(frozen=True)

    success: bool
    missing_substrings: tuple[str, ...] = ()
    found_substrings: tuple[str, ...] = ()
    failure_reason: FailureReason = FailureReason.NONE
    exit_status: int = 0
    phase: str | None = Field(
        default=None,
        description="Phase whose command failed (bootstrap, refresh, search)",
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> "VerificationOutcome":
        expected = self.exit_status == 0 and not self.missing_substrings
        if self.failure_reason is FailureReason.COMMAND_FAILED:
            expected = False
        if self.success != expected:
            raise ValueError(
                "success must be true exactly when the command exited 0 "
                "and no required substring is missing"
            )
        if self.success and self.failure_reason is not FailureReason.NONE:
            raise ValueError("successful outcome cannot carry a failure")
        if not self.success and self.failure_reason is FailureReason.NONE:
            raise ValueError("failed outcome needs a failure reason")
        return self

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        if self.success:
            return 0
        if self.failure_reason is FailureReason.COMMAND_FAILED:
            return self.exit_status
        return 1


__all__ = ["CommandResult", "FailureReason", "VerificationOutcome"]
