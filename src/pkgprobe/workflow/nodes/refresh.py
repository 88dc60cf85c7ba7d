"""Refresh node - update package metadata before searching."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from pkgprobe.core.config import State
from pkgprobe.core.errors import RefreshFailure
from pkgprobe.core.log import logger
from pkgprobe.core.verify import command_failed
from pkgprobe.runner.refresh import RefreshRunner
from pkgprobe.workflow.nodes.report import Report
from pkgprobe.workflow.nodes.search import Search


@dataclass
class Refresh(BaseNode[State, None, int]):
    """Refresh the package index if the profile defines a command."""

    async def run(self, ctx: GraphRunContext[State]) -> Search | Report:
        """Run the refresh command.

        Returns:
            Search: Refresh succeeded, was skipped, or failed in
                tolerant mode
            Report: Refresh failed in strict mode
        """
        settings = ctx.state.config.refresh
        check = ctx.state.runtime.check
        command = check.spec.refresh_command

        if not settings.enabled or not command:
            logger.debug("No metadata refresh for this profile")
            return Search()

        runner = RefreshRunner(
            timeout=settings.timeout,
            retries=settings.retries,
            retry_delay=settings.retry_delay,
        )
        try:
            with logger.span("refresh", manager=check.spec.manager):
                check.refresh_result = runner.refresh(command)
        except RefreshFailure as e:
            check.refresh_result = e.result
            if check.strict:
                logger.error("{error}", error=str(e))
                check.outcome = command_failed(e.result, phase="refresh")
                return Report()
            logger.warn(
                "{error}; continuing with existing metadata", error=str(e)
            )
            check.warnings.append(str(e))

        return Search()
