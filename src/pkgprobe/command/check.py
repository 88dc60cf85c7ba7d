"""Check command - verify that packages are available."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from pkgprobe.core.errors import ConfigError
from pkgprobe.core.log import logger

if TYPE_CHECKING:
    from pkgprobe.core.config import State

# Exit code for configuration errors; search failures use the
# package manager's own status and missing packages use 1
EXIT_CONFIG_ERROR = 2


class CheckCommand(BaseModel):
    """Search the package index and verify required packages appear.

    Runs prepare commands, the optional bootstrap script, a metadata
    refresh, and the package manager's search, then checks the search
    output for every required package name. Exits 0 when all are
    found, 1 when any is missing, or with the search command's exit
    status when the search itself fails.
    """

    profile: str | None = Field(
        default=None,
        description="Profile to check (default: config.profile)",
    )
    bootstrap: bool = Field(
        default=False,
        description=(
            "Fetch and execute the profile's remote bootstrap script "
            "first. The script is not verified"
        ),
    )
    strict: bool = Field(
        default=False,
        description="Fail when bootstrap or refresh fails",
    )

    async def run_workflow(self, state: State) -> int:
        """Run check workflow.

        Args:
            state: State instance with config loaded

        Returns:
            Exit code
        """
        config = state.config
        check = state.runtime.check
        state.runtime.global_.current_command = "check"

        try:
            profile = config.selected_profile(self.profile)
            check.spec = profile.to_check_spec()
        except ConfigError as e:
            logger.error("{error}", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

        check.strict = config.strict or self.strict
        check.bootstrap_enabled = config.bootstrap.enabled or self.bootstrap

        logger.info(
            f"Checking {check.spec.manager} for "
            f"{', '.join(check.spec.required_substrings) or 'nothing'}",
            profile=self.profile or config.profile,
            strict=check.strict,
            bootstrap=check.bootstrap_enabled,
        )

        from pkgprobe.workflow.graph import create_workflow
        from pkgprobe.workflow.nodes.prepare import Prepare

        workflow = create_workflow()

        async with workflow.iter(Prepare(), state=state) as run:
            async for _node in run:
                pass

        exit_code = run.result.output
        if check.warnings:
            logger.info(
                "Check finished with tolerated failures",
                warnings=check.warnings,
            )
        return exit_code
