"""Runners for package manager subcommands."""

from pkgprobe.runner.refresh import RefreshRunner
from pkgprobe.runner.search import SearchRunner

__all__ = ["RefreshRunner", "SearchRunner"]
