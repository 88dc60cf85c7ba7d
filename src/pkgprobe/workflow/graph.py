"""Graph workflow definition."""

from pydantic_graph import Graph

from pkgprobe.core.config import State
from pkgprobe.core.log import logger


def create_workflow():
    """Create the check workflow graph.

    Prepare → Bootstrap → Refresh → Search → Verify → Report

    Bootstrap and Refresh jump straight to Report when they fail in
    strict mode.

    Returns:
        Graph workflow with State as state_type
    """
    logger.debug("Building workflow graph")

    from pkgprobe.workflow.nodes.bootstrap import Bootstrap
    from pkgprobe.workflow.nodes.prepare import Prepare
    from pkgprobe.workflow.nodes.refresh import Refresh
    from pkgprobe.workflow.nodes.report import Report
    from pkgprobe.workflow.nodes.search import Search
    from pkgprobe.workflow.nodes.verify import Verify

    return Graph(
        nodes=(Prepare, Bootstrap, Refresh, Search, Verify, Report),
        state_type=State,
    )
