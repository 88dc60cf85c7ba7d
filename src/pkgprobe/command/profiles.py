"""Profiles command - list configured package manager profiles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from pydantic import BaseModel

from pkgprobe.command.check import EXIT_CONFIG_ERROR
from pkgprobe.core.errors import ConfigError
from pkgprobe.core.log import logger

if TYPE_CHECKING:
    from pkgprobe.core.config import State


class ProfilesCommand(BaseModel):
    """List configured profiles with their search command and the
    packages each one requires."""

    async def run_workflow(self, state: State) -> int:
        config = state.config
        try:
            specs = {
                name: config.profiles[name].to_check_spec()
                for name in sorted(config.profiles)
            }
        except ConfigError as e:
            logger.error("{error}", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

        for name, spec in specs.items():
            marker = "*" if name == config.profile else " "
            print(f"{marker} {name}: {spec.search_command}")
            for token in spec.required_substrings:
                print(f"    requires {token}")
        return 0
