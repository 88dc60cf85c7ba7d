"""Base pre-check hook interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pkgprobe.core.result import CommandResult


class PreCheckHook(Protocol):
    """Protocol for steps that prepare the environment before a check.

    Hooks run outside the trust boundary of the check: whatever they
    do to the host is not validated, and the check only relies on the
    package manager still being invocable afterwards.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Hook name for logs and diagnostics."""
        pass

    @abstractmethod
    def run(self) -> CommandResult | None:
        """Prepare the environment.

        Returns:
            Result of the command the hook ran, or None if it ran
            nothing

        Raises:
            BootstrapFailure: If the hook ran and failed
        """
        pass


class NoopHook:
    """Hook that does nothing. Used unless bootstrap is enabled."""

    name = "noop"

    def run(self) -> CommandResult | None:
        return None
