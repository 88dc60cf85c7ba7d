"""Bootstrap node - run the pre-check hook."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from pkgprobe.core.config import State
from pkgprobe.core.errors import BootstrapFailure
from pkgprobe.core.log import logger
from pkgprobe.core.verify import command_failed
from pkgprobe.hooks import create_hook
from pkgprobe.workflow.nodes.refresh import Refresh
from pkgprobe.workflow.nodes.report import Report


@dataclass
class Bootstrap(BaseNode[State, None, int]):
    """Run the configured pre-check hook (no-op by default)."""

    async def run(self, ctx: GraphRunContext[State]) -> Refresh | Report:
        """Run the hook.

        Returns:
            Refresh: Hook succeeded, did nothing, or failed in
                tolerant mode
            Report: Hook failed in strict mode
        """
        settings = ctx.state.config.bootstrap.model_copy(
            update={"enabled": ctx.state.runtime.check.bootstrap_enabled}
        )
        check = ctx.state.runtime.check
        hook = create_hook(settings, check.spec.bootstrap_url)

        try:
            with logger.span("bootstrap", hook=hook.name):
                check.bootstrap_result = hook.run()
        except BootstrapFailure as e:
            check.bootstrap_result = e.result
            if check.strict:
                logger.error("{error}", error=str(e))
                check.outcome = command_failed(e.result, phase="bootstrap")
                return Report()
            logger.warn(
                "{error}; continuing without bootstrap", error=str(e)
            )
            check.warnings.append(str(e))

        return Refresh()
