"""Package search execution with log management."""

import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from pkgprobe.core.log import logger
from pkgprobe.core.result import CommandResult
from pkgprobe.core.runner import Runner


class SearchRunner:
    """Execute a search command and echo its combined output."""

    def __init__(
        self,
        output_dir: Path | None = None,
        out: TextIO | None = None,
        runner: Runner | None = None,
    ):
        """Initialize search runner.

        Args:
            output_dir: Directory for timestamped search logs, or
                None to skip writing them
            out: Stream receiving the raw search output
                (default: stdout)
            runner: Command runner
        """
        self.output_dir = output_dir
        self.out = out
        self.runner = runner or Runner()

    def run(
        self, name: str, command: str, timeout: int | None = None
    ) -> CommandResult:
        """Run the search command.

        The combined output is always written to the output stream,
        before the caller decides whether the check passed.

        Args:
            name: Profile name (used in log filename)
            command: Search command to execute
            timeout: Timeout in seconds

        Returns:
            CommandResult with combined output and exit status
        """
        log_file = None
        if self.output_dir is not None:
            timestamp = datetime.now().strftime('%Y%m%d-%H%M%S')
            log_file = self.output_dir / f"{name}-search-{timestamp}.log"
            self.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info("Searching packages", command=command)
        result = self.runner.capture(
            command, timeout=timeout, log_file=log_file
        )

        out = self.out if self.out is not None else sys.stdout
        out.write(result.combined_output)
        if result.combined_output and not result.combined_output.endswith(
            "\n"
        ):
            out.write("\n")
        out.flush()

        logger.debug(
            "Search finished",
            exit_status=result.exit_status,
            output_chars=len(result.combined_output),
        )
        return result
