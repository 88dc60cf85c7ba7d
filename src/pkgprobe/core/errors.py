"""Exception types raised by pkgprobe."""

from __future__ import annotations

from pkgprobe.core.result import CommandResult


class PkgprobeError(Exception):
    """Base class for all pkgprobe errors."""


class ConfigError(PkgprobeError):
    """Configuration is missing or inconsistent."""


class PhaseFailure(PkgprobeError):
    """A command in a non-search phase exited non-zero.

    Attributes:
        phase: Workflow phase that failed
        result: Result of the last attempt
        attempts: Number of attempts made before giving up
    """

    phase = "unknown"

    def __init__(self, result: CommandResult, attempts: int = 1):
        self.result = result
        self.attempts = attempts
        super().__init__(
            f"{self.phase} command failed with exit status "
            f"{result.exit_status} after {attempts} attempt(s): "
            f"{result.command}"
        )


class BootstrapFailure(PhaseFailure):
    """Remote bootstrap script could not be fetched or executed."""

    phase = "bootstrap"


class RefreshFailure(PhaseFailure):
    """Package metadata refresh failed."""

    phase = "refresh"


__all__ = [
    "PkgprobeError",
    "ConfigError",
    "PhaseFailure",
    "BootstrapFailure",
    "RefreshFailure",
]
