# devsetup/steps/runtime_check.py
# -*- coding: utf-8 -*-
"""
Runtime version gate.

Queries the JavaScript runtime (node by default) for its version and compares
it numerically, segment by segment, against the configured minimum.
"""

import logging
import re
import subprocess
from typing import Optional

from packaging.version import InvalidVersion, Version

from common.command_utils import (
    get_symbols,
    log_message,
    resolve_executable,
    run_command,
)
from common.step_result import StepResult
from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext

module_logger = logging.getLogger(__name__)

# Leading "v" and anything after the numeric release (e.g. "-nightly2023") are ignored.
_RELEASE_RE = re.compile(r"^\s*v?(\d+(?:\.\d+)*)")


def parse_runtime_version(raw_version: str) -> Version:
    """
    Parse a runtime version string such as "v20.11.1" into a Version.

    Raises:
        InvalidVersion: If the string carries no numeric release.
    """
    match = _RELEASE_RE.match(raw_version)
    if not match:
        raise InvalidVersion(f"Invalid version: '{raw_version}'")
    return Version(match.group(1))


def is_version_supported(raw_version: str, minimum_version: str) -> bool:
    """Return True if `raw_version` is at least `minimum_version`."""
    return parse_runtime_version(raw_version) >= parse_runtime_version(
        minimum_version
    )


def get_runtime_version(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> str:
    """Run `<runtime> --version` and return its trimmed output."""
    result = run_command(
        [resolve_executable(app_settings.runtime.command), "--version"],
        app_settings,
        check=True,
        capture_output=True,
        current_logger=current_logger,
    )
    return (result.stdout or "").strip()


def check_runtime_version(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    runtime = app_settings.runtime

    try:
        raw_version = get_runtime_version(app_settings, logger_to_use)
    except (subprocess.CalledProcessError, OSError):
        return StepResult.fatal(
            f"{runtime.display_name} {runtime.minimum_version} or higher is required, "
            f"but '{runtime.command}' could not be run"
        )

    log_message(
        f"{symbols.get('clipboard', '📋')} {runtime.display_name} version: {raw_version}",
        "info",
        logger_to_use,
        app_settings,
    )

    try:
        supported = is_version_supported(raw_version, runtime.minimum_version)
    except InvalidVersion:
        return StepResult.fatal(
            f"Could not parse {runtime.display_name} version '{raw_version}'"
        )

    if not supported:
        return StepResult.fatal(
            f"{runtime.display_name} {runtime.minimum_version} or higher is required"
        )

    return StepResult.success(
        f"{runtime.display_name} {raw_version} satisfies >= {runtime.minimum_version}",
        value=raw_version,
    )
