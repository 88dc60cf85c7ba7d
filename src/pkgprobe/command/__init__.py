"""CLI command modules for pkgprobe."""

from pkgprobe.command.check import CheckCommand
from pkgprobe.command.profiles import ProfilesCommand

__all__ = ["CheckCommand", "ProfilesCommand"]
