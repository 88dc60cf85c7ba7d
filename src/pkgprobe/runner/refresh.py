"""Package metadata refresh."""

from pkgprobe.core.errors import RefreshFailure
from pkgprobe.core.log import logger
from pkgprobe.core.result import CommandResult
from pkgprobe.core.runner import Runner


class RefreshRunner:
    """Run a package manager's index refresh with bounded retries."""

    def __init__(
        self,
        timeout: int | None = 600,
        retries: int = 0,
        retry_delay: float = 0,
        runner: Runner | None = None,
    ):
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self.runner = runner or Runner()

    def refresh(self, command: str) -> CommandResult:
        """Run the refresh command.

        Args:
            command: Refresh command, e.g. 'apt update'

        Returns:
            CommandResult of the successful attempt

        Raises:
            RefreshFailure: If every attempt exits non-zero
        """
        logger.info("Refreshing package metadata", command=command)
        result, attempts = self.runner.capture_with_retries(
            command,
            timeout=self.timeout,
            retries=self.retries,
            retry_delay=self.retry_delay,
        )
        if not result.success:
            raise RefreshFailure(result, attempts)
        return result
