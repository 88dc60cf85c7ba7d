"""Command execution using invoke library with custom extensions."""

from __future__ import annotations

import time
from pathlib import Path

from invoke import Context, Result
from invoke.exceptions import CommandTimedOut

from pkgprobe.core.log import logger
from pkgprobe.core.result import CommandResult


class Runner(Context):
    """Wrapper around invoke.Context with custom command
    execution methods.

    Provides methods that don't collide with invoke's built-in
    functionality. Uses invoke internally for all command
    execution.
    """

    def execute(
        self,
        command: str,
        cwd: Path | None = None,
        timeout: int | None = None,
        stdin: str | None = None,
        log_file: Path | None = None,
        log_level: str | None = None,
        check: bool = True,
        env: dict[str, str] | None = None,
        merge_stderr: bool = False,
    ) -> Result:
        """Execute a command with full control over execution
        parameters.

        Args:
            command: Command string to execute
            cwd: Working directory for command execution
            timeout: Maximum execution time in seconds
            stdin: String to send to command's stdin
            log_file: Path to write combined stdout/stderr output
            log_level: Log level for echoing output lines
                (info, debug, etc.)
            check: If True, raise exception on non-zero exit
                code
            env: Environment variables to set (updates os.environ,
                does not replace it)
            merge_stderr: Redirect stderr into stdout inside the
                shell so the two streams keep their relative order

        Returns:
            invoke.Result with stdout, stderr, exited (return
                code); exited is -1 when the command timed out

        Raises:
            invoke.UnexpectedExit: If check=True and command
                returns non-zero
        """
        kwargs = {
            "hide": True,  # Capture output, don't print to console
            "warn": not check,  # If check=False, don't raise on error
            "in_stream": False,  # Don't read from stdin by default
        }

        if timeout:
            kwargs["timeout"] = timeout

        if stdin:
            kwargs["in_stream"] = stdin

        if env:
            kwargs["env"] = env

        if merge_stderr:
            command = f"{{ {command}\n}} 2>&1"

        logger.spew("Executing command", command=command, timeout=timeout)

        try:
            if cwd:
                with self.cd(str(cwd)):
                    result = self.run(command, **kwargs)
            else:
                result = self.run(command, **kwargs)
        except CommandTimedOut as e:
            logger.warn(
                "Command timed out", command=command, timeout=timeout
            )
            result = e.result
            result.exited = -1

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            log_file.write_text(result.stdout + result.stderr)

        if log_level:
            for line in (result.stdout + result.stderr).splitlines():
                logger.log(log_level, "{line}", line=line.rstrip())

        return result

    def capture(
        self,
        command: str,
        timeout: int | None = None,
        log_file: Path | None = None,
    ) -> CommandResult:
        """Run a command without raising and return a CommandResult.

        stderr is merged into stdout, so combined_output preserves
        the interleaving the command produced.
        """
        result = self.execute(
            command,
            timeout=timeout,
            log_file=log_file,
            log_level="debug",
            check=False,
            merge_stderr=True,
        )
        return CommandResult(
            command=command,
            combined_output=result.stdout + result.stderr,
            exit_status=result.exited,
            log_file=log_file,
        )

    def capture_with_retries(
        self,
        command: str,
        timeout: int | None = None,
        retries: int = 0,
        retry_delay: float = 0,
    ) -> tuple[CommandResult, int]:
        """Run a command until it succeeds or retries are used up.

        Args:
            command: Command string to execute
            timeout: Per-attempt timeout in seconds
            retries: Extra attempts after the first failure
            retry_delay: Seconds to wait between attempts, doubled
                after each failure

        Returns:
            Tuple of (result of the last attempt, attempts made)
        """
        attempts = 0
        delay = retry_delay
        while True:
            attempts += 1
            result = self.capture(command, timeout=timeout)
            if result.success or attempts > retries:
                return result, attempts
            logger.warn(
                f"Attempt {attempts}/{retries + 1} failed, retrying",
                command=command,
                exit_status=result.exit_status,
            )
            if delay:
                time.sleep(delay)
                delay *= 2


__all__ = ["Runner"]
