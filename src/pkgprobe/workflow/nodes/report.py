"""Report node - print the verdict and produce the exit code."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from pkgprobe.core.config import State
from pkgprobe.core.report import Reporter


@dataclass
class Report(BaseNode[State, None, int]):
    """Report the outcome recorded by an earlier node."""

    async def run(self, ctx: GraphRunContext[State]) -> End[int]:
        """Report and finish.

        Returns:
            End[int]: Process exit code
        """
        check = ctx.state.runtime.check
        exit_code = Reporter().report(check.spec, check.outcome)
        check.status = "passed" if check.outcome.success else "failed"
        return End(exit_code)
