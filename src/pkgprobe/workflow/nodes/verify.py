"""Verify node - look for required substrings in search output."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from pkgprobe.core.config import State
from pkgprobe.core.log import logger
from pkgprobe.core.verify import verify
from pkgprobe.workflow.nodes.report import Report


@dataclass
class Verify(BaseNode[State, None, int]):
    """Derive the verification outcome from the search result."""

    async def run(self, ctx: GraphRunContext[State]) -> Report:
        check = ctx.state.runtime.check
        check.outcome = verify(check.spec, check.search_result)
        logger.debug(
            "Verification outcome",
            success=check.outcome.success,
            reason=check.outcome.failure_reason.value,
            missing=list(check.outcome.missing_substrings),
        )
        return Report()
