"""Workflow nodes for the check graph."""

from pkgprobe.workflow.nodes.bootstrap import Bootstrap
from pkgprobe.workflow.nodes.prepare import Prepare
from pkgprobe.workflow.nodes.refresh import Refresh
from pkgprobe.workflow.nodes.report import Report
from pkgprobe.workflow.nodes.search import Search
from pkgprobe.workflow.nodes.verify import Verify

__all__ = ["Prepare", "Bootstrap", "Refresh", "Search", "Verify", "Report"]
