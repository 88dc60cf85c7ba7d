"""Search node - run the package manager's search subcommand."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from pkgprobe.core.config import State
from pkgprobe.core.log import logger
from pkgprobe.runner.search import SearchRunner
from pkgprobe.workflow.nodes.verify import Verify


@dataclass
class Search(BaseNode[State, None, int]):
    """Run the search and keep its combined output."""

    async def run(self, ctx: GraphRunContext[State]) -> Verify:
        config = ctx.state.config
        check = ctx.state.runtime.check

        output_dir = config.log_root / "search" if config.save_logs else None
        runner = SearchRunner(output_dir=output_dir)

        with logger.span("search", manager=check.spec.manager):
            check.search_result = runner.run(
                config.profile,
                check.spec.search_command,
                timeout=config.timeout,
            )
        return Verify()
