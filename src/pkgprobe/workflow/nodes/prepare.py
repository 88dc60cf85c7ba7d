"""Prepare node - run the profile's preparatory commands."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from pkgprobe.core.config import State
from pkgprobe.core.log import logger
from pkgprobe.core.runner import Runner
from pkgprobe.workflow.nodes.bootstrap import Bootstrap


@dataclass
class Prepare(BaseNode[State, None, int]):
    """Run prepare commands; their failures are never fatal."""

    async def run(self, ctx: GraphRunContext[State]) -> Bootstrap:
        check = ctx.state.runtime.check
        check.status = "running"
        timeout = ctx.state.config.refresh.timeout
        runner = Runner()

        for command in check.spec.prepare_commands:
            with logger.span("prepare", command=command):
                result = runner.capture(command, timeout=timeout)
            check.prepare_results.append(result)
            if not result.success:
                message = (
                    f"Prepare command '{command}' exited "
                    f"{result.exit_status}"
                )
                logger.warn(
                    "Prepare command exited {exit_status}",
                    command=command,
                    exit_status=result.exit_status,
                )
                check.warnings.append(message)

        return Bootstrap()
