# devsetup/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for application configuration.

This module defines the structured settings for the setup tool,
including defaults, type annotations, and descriptions.
It utilizes Pydantic for data validation and settings management.
"""

from pathlib import Path
from typing import Dict, List

from packaging.version import InvalidVersion, Version
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from devsetup.config import (
    BROWSER_PATHS_DEFAULT,
    BUILD_DIR_DEFAULT,
    DOCS_PATH_DEFAULT,
    ENV_OVERRIDE_DEFAULT,
    ENV_TEMPLATE_DEFAULT,
    INSTALL_COMMAND_DEFAULT,
    LINT_FIX_SCRIPT_DEFAULT,
    LINT_SCRIPT_DEFAULT,
    LOG_PREFIX_DEFAULT,
    PACKAGE_MANAGERS_DEFAULT,
    PROJECT_NAME_DEFAULT,
    RUNTIME_COMMAND_DEFAULT,
    RUNTIME_DISPLAY_NAME_DEFAULT,
    RUNTIME_MINIMUM_VERSION_DEFAULT,
    SYMBOLS_DEFAULT,
    TYPECHECK_SCRIPT_DEFAULT,
)

__all__ = [
    "SYMBOLS_DEFAULT",
    "AppSettings",
    "RuntimeSettings",
    "ScriptSettings",
]


class RuntimeSettings(BaseModel):
    """Runtime version gate settings."""

    command: str = Field(
        default=RUNTIME_COMMAND_DEFAULT,
        description="Runtime executable queried with --version (e.g., node).",
    )
    display_name: str = Field(
        default=RUNTIME_DISPLAY_NAME_DEFAULT,
        description="Human-readable runtime name used in messages.",
    )
    minimum_version: str = Field(
        default=RUNTIME_MINIMUM_VERSION_DEFAULT,
        description="Lowest accepted runtime version, compared numerically.",
    )

    @field_validator("minimum_version")
    @classmethod
    def _validate_minimum_version(cls, value: str) -> str:
        try:
            Version(value.strip().lstrip("v"))
        except InvalidVersion as e:
            raise ValueError(f"not a valid version: {value!r}") from e
        return value.strip()


class ScriptSettings(BaseModel):
    """Names of the package manager commands and project scripts."""

    install: str = Field(
        default=INSTALL_COMMAND_DEFAULT,
        description="Package manager subcommand that installs dependencies.",
    )
    typecheck: str = Field(
        default=TYPECHECK_SCRIPT_DEFAULT,
        description="Project script run via '<manager> run' for type checking.",
    )
    lint: str = Field(
        default=LINT_SCRIPT_DEFAULT,
        description="Project script run via '<manager> run' for linting.",
    )
    lint_fix: str = Field(
        default=LINT_FIX_SCRIPT_DEFAULT,
        description="Project script run when linting fails.",
    )


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEVSETUP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    project_name: str = Field(
        default=PROJECT_NAME_DEFAULT,
        description="Display name used in the setup banner.",
    )
    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the project being set up.",
    )
    log_prefix: str = Field(
        default=LOG_PREFIX_DEFAULT,
        description="Prefix for log messages from the setup tool.",
    )

    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
    scripts: ScriptSettings = Field(default_factory=ScriptSettings)

    package_managers: List[str] = Field(
        default_factory=lambda: list(PACKAGE_MANAGERS_DEFAULT),
        description="Package manager candidates, in order of preference.",
    )

    env_template: Path = Field(
        default=ENV_TEMPLATE_DEFAULT,
        description="Checked-in environment template file.",
    )
    env_override: Path = Field(
        default=ENV_OVERRIDE_DEFAULT,
        description="Local environment override file seeded from the template.",
    )
    build_dir: Path = Field(
        default=BUILD_DIR_DEFAULT,
        description="Build output directory.",
    )
    docs_path: str = Field(
        default=DOCS_PATH_DEFAULT,
        description="Documentation pointer shown in the completion banner.",
    )

    browser_paths: Dict[str, List[str]] = Field(
        default_factory=lambda: {
            platform: list(paths)
            for platform, paths in BROWSER_PATHS_DEFAULT.items()
        },
        description="Browser executable locations keyed by platform.",
    )

    skip_typecheck: bool = Field(
        default=False, description="Skip the type check step."
    )
    skip_lint: bool = Field(default=False, description="Skip the lint step.")
    skip_browser_check: bool = Field(
        default=False, description="Skip the browser installation check."
    )

    symbols: Dict[str, str] = Field(
        default_factory=lambda: dict(SYMBOLS_DEFAULT)
    )

    @field_validator("package_managers")
    @classmethod
    def _require_package_managers(cls, value: List[str]) -> List[str]:
        cleaned = [name.strip() for name in value if name and name.strip()]
        if not cleaned:
            raise ValueError("at least one package manager must be listed")
        return cleaned

    def resolve_path(self, path: Path) -> Path:
        """Return `path` anchored at the project root unless it is absolute."""
        return path if path.is_absolute() else self.project_root / path
