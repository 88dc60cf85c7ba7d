"""Application state and configuration."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from pkgprobe.core.base import BaseConfig, BaseState
from pkgprobe.core.checkspec import CheckSpec
from pkgprobe.core.errors import ConfigError
from pkgprobe.core.log import Logger
from pkgprobe.core.result import CommandResult, VerificationOutcome
from pkgprobe.core.yaml_settings import YamlWithIncludesSettingsSource
from pkgprobe.hooks.remote import DEFAULT_COMMAND

# Modules available for template substitution in YAML files
# Usage: {platformdirs.user_log_dir}, {Path.home}
TEMPLATE_NAMESPACE = {
    'os': os,
    'platformdirs': platformdirs,
    'Path': Path,
}

# ============================================================
# CONFIG MODELS (loaded from YAML/env/CLI)
# ============================================================

class ProfileConfig(BaseConfig):
    """One package manager and the packages expected from it."""

    manager: str = Field(
        description="Package manager executable (apt, zypper, dnf)"
    )
    query: str = Field(
        description="Search term passed to the search subcommand"
    )
    search: str = Field(
        default="{manager} search {query}",
        description="Search command template ({manager}, {query})",
    )
    refresh: str | None = Field(
        default=None,
        description="Metadata refresh command, or null to skip",
    )
    prepare: list[str] = Field(
        default_factory=list,
        description=(
            "Commands run before the bootstrap step. Failures are "
            "logged and ignored"
        ),
    )
    required: list[str] = Field(
        default_factory=list,
        description="Substrings that must all appear in search output",
    )
    bootstrap_url: str | None = Field(
        default=None,
        description="Remote script that prepares repositories",
    )

    def to_check_spec(self) -> CheckSpec:
        """Render command templates into an immutable CheckSpec.

        Only {manager} and {query} are substituted; any other braces
        are shell syntax and pass through untouched.
        """
        search = (
            self.search
            .replace("{manager}", self.manager)
            .replace("{query}", self.query)
        )

        return CheckSpec(
            manager=self.manager,
            search_command=search,
            required_substrings=tuple(self.required),
            refresh_command=self.refresh,
            prepare_commands=tuple(self.prepare),
            bootstrap_url=self.bootstrap_url,
        )


class BootstrapConfig(BaseConfig):
    """Remote bootstrap script execution.

    The script is fetched from the network and run by a shell with
    the privileges of this process. Its content is not validated,
    which is why it is disabled unless explicitly requested.
    """

    enabled: bool = Field(
        default=False,
        description="Run the profile's bootstrap script before checking",
    )
    url: str | None = Field(
        default=None,
        description="Override the profile's bootstrap_url",
    )
    command: str = Field(
        default=DEFAULT_COMMAND,
        description="Fetch-and-execute command template ({url})",
    )
    timeout: int = Field(
        default=300,
        description="Timeout per attempt in seconds",
    )
    retries: int = Field(
        default=2,
        description="Extra attempts after a failed bootstrap",
    )
    retry_delay: float = Field(
        default=2.0,
        description="Seconds before the first retry (doubles each time)",
    )


class RefreshConfig(BaseConfig):
    """Package metadata refresh settings."""

    enabled: bool = Field(
        default=True,
        description="Run the profile's refresh command",
    )
    timeout: int = Field(
        default=600,
        description="Timeout per attempt in seconds",
    )
    retries: int = Field(
        default=2,
        description="Extra attempts after a failed refresh",
    )
    retry_delay: float = Field(
        default=5.0,
        description="Seconds before the first retry (doubles each time)",
    )


class Config(BaseConfig):
    """Application configuration loaded from YAML/env/CLI."""

    logger: Logger = Field(
        default=None,
        description="Logger configuration and runtime instance"
    )
    profile: str = Field(
        default="apt",
        description="Name of the profile to check",
    )
    profiles: dict[str, ProfileConfig] = Field(
        default_factory=dict,
        description="Package manager profiles by name",
    )
    strict: bool = Field(
        default=False,
        description=(
            "Treat bootstrap and refresh failures as fatal instead of "
            "warnings"
        ),
    )
    timeout: int = Field(
        default=600,
        description="Timeout for the search command in seconds",
    )
    bootstrap: BootstrapConfig = Field(
        default_factory=BootstrapConfig,
        description="Remote bootstrap settings",
    )
    refresh: RefreshConfig = Field(
        default_factory=RefreshConfig,
        description="Metadata refresh settings",
    )
    save_logs: bool = Field(
        default=False,
        description="Write search output to a timestamped log file",
    )
    log_level: str = Field(
        default="info",
        alias="log-level",
        description=(
            "Console log level: 'trace', 'debug', 'info', "
            "'warn', 'error', 'fatal'"
        ),
    )
    log_root: Path = Field(
        default_factory=(
            lambda: Path(platformdirs.user_state_dir()) / "pkgprobe"
        ),
        description="Root directory for log files",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode='after')
    def _setup_logger(self) -> 'Config':
        """Initialize the global logger singleton once config loads."""
        from pkgprobe.core.log import ConsoleSink, setup_logger

        if self.logger is None:
            self.logger = Logger(
                level=self.log_level,
                console=ConsoleSink(level=self.log_level),
            )

        setup_logger(
            log_root=self.log_root,
            run_name=self.profile,
            level=self.logger.level,
            console=self.logger.console,
            otlp=self.logger.otlp,
            file=self.logger.file,
            logfire=self.logger.logfire,
        )
        return self

    def selected_profile(self, name: str | None = None) -> ProfileConfig:
        """Look up a profile by name (default: the configured one).

        Raises:
            ConfigError: If no such profile is configured
        """
        name = name or self.profile
        try:
            return self.profiles[name]
        except KeyError:
            available = ", ".join(sorted(self.profiles)) or "none"
            raise ConfigError(
                f"Unknown profile '{name}'. Available: {available}"
            ) from None

    def close(self):
        """Close the global logger along with child resources."""
        from pkgprobe.core.log import logger
        logger.close()
        super().close()


# ============================================================
# RUNTIME STATE MODELS (mutable during workflow execution)
# ============================================================

class GlobalState(BaseState):
    """Global runtime state shared across all workflows."""

    current_command: str | None = Field(
        default=None,
        description="Subcommand being executed",
    )


class CheckState(BaseState):
    """Check workflow runtime state (mutates during execution)."""

    spec: CheckSpec | None = Field(
        default=None,
        description="Check being run, fixed at workflow start",
    )
    strict: bool = Field(
        default=False,
        description="Effective strict mode for this run",
    )
    bootstrap_enabled: bool = Field(
        default=False,
        description="Effective bootstrap switch for this run",
    )
    prepare_results: list[CommandResult] = Field(
        default_factory=list,
        description="Results of prepare commands",
    )
    bootstrap_result: CommandResult | None = None
    refresh_result: CommandResult | None = None
    search_result: CommandResult | None = None
    outcome: VerificationOutcome | None = None
    warnings: list[str] = Field(
        default_factory=list,
        description="Tolerated failures from earlier phases",
    )
    status: str = Field(
        default="pending",
        description="Workflow status: pending, running, passed, failed",
    )


class Runtime(BaseModel):
    """All runtime state organized by workflow."""

    global_: GlobalState = Field(
        default_factory=GlobalState,
        alias="global",
        description="Global state shared across all workflows"
    )
    check: CheckState = Field(
        default_factory=CheckState,
        description="Check workflow runtime state"
    )

    model_config = ConfigDict(populate_by_name=True)


# ============================================================
# STATE (config + runtime combined)
# ============================================================

class State(BaseSettings):
    """Complete application state - configuration and runtime.

    This is the object every workflow node receives.

    - config: loaded from YAML/env/CLI, not changed afterwards
    - runtime: written by workflow nodes as the check proceeds
    """

    config: Config = Field(
        default_factory=Config,
        description="Application configuration (from YAML/env/CLI)",
    )
    runtime: Runtime = Field(
        default_factory=Runtime,
        description="Runtime state (mutates during workflow execution)",
    )
    include: list[str] | None = Field(
        default=None,
        description=(
            "Additional YAML files to include and merge. "
            "Use --include on CLI or include: in YAML files."
        ),
    )

    model_config = SettingsConfigDict(
        yaml_file="pkgprobe.yaml",
        env_file=".env",
        env_prefix="PKGPROBE_",
        env_nested_delimiter="__",
        cli_parse_args=True,
        cli_implicit_flags=True,
        cli_use_class_docs_for_groups=True,
        arbitrary_types_allowed=True,
        extra='ignore',
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority order (highest to lowest): init arguments, YAML
        files, .env file, environment variables, file secrets."""
        return (
            init_settings,
            YamlWithIncludesSettingsSource(settings_cls),
            dotenv_settings,
            env_settings,
            file_secret_settings,
        )

    @model_validator(mode="after")
    def substitute_templates(self) -> "State":
        """Replace {config.*} and {platformdirs.*} templates in all
        string fields recursively.

        Runtime placeholders such as {query} and {url} do not
        resolve against State and are left for the runners.
        """
        self._substitute_recursive(self.config)
        return self

    def _substitute_recursive(self, obj: Any) -> None:
        if isinstance(obj, BaseModel):
            for field_name in obj.__class__.model_fields:
                value = getattr(obj, field_name)
                new_value = self._substitute_value(value)
                if new_value is not value:
                    setattr(obj, field_name, new_value)
        elif isinstance(obj, dict):
            for key in obj:
                obj[key] = self._substitute_value(obj[key])
        elif isinstance(obj, list):
            for i in range(len(obj)):
                obj[i] = self._substitute_value(obj[i])

    def _substitute_value(self, value: Any) -> Any:
        if isinstance(value, str):
            new = self._substitute_string(value)
            return value if new == value else new
        elif isinstance(value, Path):
            new = self._substitute_string(str(value))
            return value if new == str(value) else Path(new)
        elif isinstance(value, (BaseModel, dict, list)):
            self._substitute_recursive(value)
            return value
        else:
            return value

    def _substitute_string(self, value: str) -> str:
        """Replace {field.path} templates with actual field values.

        Examples:
            "{config.profile}.log" → "apt.log"
            "{platformdirs.user_log_dir}" → "~/.local/state/pkgprobe/log"
        """
        def replace_template(match):
            parts = match.group(1).split(".")

            if parts[0] in TEMPLATE_NAMESPACE:
                obj = TEMPLATE_NAMESPACE[parts[0]]
                parts = parts[1:]
            else:
                obj = self

            try:
                for part in parts:
                    obj = getattr(obj, part)

                if callable(obj):
                    obj = obj('pkgprobe', appauthor=False)

                return str(obj)
            except (AttributeError, TypeError):
                return match.group(0)

        return re.sub(r'\{([a-z._]+)\}', replace_template, value)


__all__ = [
    "State",
    "Config",
    "ProfileConfig",
    "BootstrapConfig",
    "RefreshConfig",
    "CheckState",
]
