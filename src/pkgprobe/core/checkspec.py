"""Immutable description of one verification run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CheckSpec(BaseModel):
    """What to search for and which substrings must appear.

    Built once from the selected profile at startup and never
    mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    manager: str = Field(description="Package manager name (apt, zypper)")
    search_command: str = Field(
        description="Fully rendered search command, e.g. 'apt search foo'"
    )
    required_substrings: tuple[str, ...] = Field(
        default=(),
        description="Tokens that must all appear in the search output",
    )
    refresh_command: str | None = Field(
        default=None,
        description="Metadata refresh command, or None to skip refresh",
    )
    prepare_commands: tuple[str, ...] = Field(
        default=(),
        description="Commands run before bootstrap; failures tolerated",
    )
    bootstrap_url: str | None = Field(
        default=None,
        description="Remote script to execute before the check",
    )


__all__ = ["CheckSpec"]
