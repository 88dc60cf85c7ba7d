#!/usr/bin/env python3
"""pkgprobe CLI - verify package availability in a repository."""

import asyncio
import sys

from pydantic_settings import CliApp, CliSubCommand, get_subcommand

from pkgprobe.command.check import CheckCommand
from pkgprobe.command.profiles import ProfilesCommand
from pkgprobe.core.config import State
from pkgprobe.core.log import logger


class CliState(State):
    """Verify that a distribution's package repository offers the
    expected packages.

    Configuration sources (in priority order):
    1. Command-line arguments (--config.profile zypper)
    2. --include files, ./pkgprobe.yaml, user config, defaults
    3. .env file
    4. Environment variables (PKGPROBE_CONFIG__PROFILE=zypper)
    """

    check: CliSubCommand[CheckCommand]
    profiles: CliSubCommand[ProfilesCommand]

    def cli_cmd(self):
        """Dispatch to active subcommand, or show help if none
        provided."""
        subcommand = get_subcommand(self, is_required=False)

        if subcommand is None:
            CliApp.run(CliState, cli_args=['--help'])
            sys.exit(1)

        with logger:
            exit_code = asyncio.run(subcommand.run_workflow(self))
            raise SystemExit(exit_code)


def main():
    """Main entry point for CLI."""
    CliApp.run(CliState)


if __name__ == "__main__":
    main()
