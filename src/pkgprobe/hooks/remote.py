"""Fetch a remote shell script and execute it."""

from __future__ import annotations

import shlex

from pkgprobe.core.errors import BootstrapFailure, ConfigError
from pkgprobe.core.log import logger
from pkgprobe.core.result import CommandResult
from pkgprobe.core.runner import Runner
from pkgprobe.hooks.base import NoopHook, PreCheckHook

# The fetch must finish before sh starts, so a failed download fails the
# command instead of feeding sh an empty script
DEFAULT_COMMAND = "s=$(wget -qO- {url}) && printf '%s\\n' \"$s\" | sh"


class RemoteScriptHook:
    """Pipe the body of a URL into a shell.

    This runs arbitrary code from the network with the privileges of
    the current process. Nothing about the script is verified; it is
    meant for disposable test containers pointed at a repository
    server under the operator's control.
    """

    name = "remote-script"

    def __init__(
        self,
        url: str,
        command: str = DEFAULT_COMMAND,
        timeout: int | None = 300,
        retries: int = 0,
        retry_delay: float = 0,
        runner: Runner | None = None,
    ):
        if "{url}" not in command:
            raise ConfigError(
                f"Bootstrap command {command!r} must contain {{url}}"
            )
        self.url = url
        self.command = command.replace("{url}", shlex.quote(url))
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self.runner = runner or Runner()

    def run(self) -> CommandResult:
        """Fetch and execute the script.

        Raises:
            BootstrapFailure: If every attempt exits non-zero
        """
        logger.warn(
            "Executing unverified remote script", url=self.url
        )
        result, attempts = self.runner.capture_with_retries(
            self.command,
            timeout=self.timeout,
            retries=self.retries,
            retry_delay=self.retry_delay,
        )
        if not result.success:
            raise BootstrapFailure(result, attempts)
        logger.info("Bootstrap script completed", url=self.url)
        return result


def create_hook(config, url: str | None) -> PreCheckHook:
    """Build the hook for a run.

    Args:
        config: BootstrapConfig section
        url: Bootstrap URL from the profile, overridden by config.url

    Returns:
        RemoteScriptHook when bootstrap is enabled and a URL is
        known, NoopHook otherwise
    """
    url = config.url or url
    if not config.enabled:
        return NoopHook()
    if not url:
        logger.warn("Bootstrap enabled but no URL configured; skipping")
        return NoopHook()
    return RemoteScriptHook(
        url,
        command=config.command,
        timeout=config.timeout,
        retries=config.retries,
        retry_delay=config.retry_delay,
    )
