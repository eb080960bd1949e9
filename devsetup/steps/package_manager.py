# devsetup/steps/package_manager.py
# -*- coding: utf-8 -*-
"""
Detects which JavaScript package manager is available.
"""

import logging
import subprocess
from typing import Iterable, List, Optional

from common.command_utils import resolve_executable, run_command
from common.step_result import StepResult
from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext

module_logger = logging.getLogger(__name__)


def probe_package_manager(
    manager: str,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """Return True if `<manager> --version` runs and exits 0."""
    try:
        run_command(
            [resolve_executable(manager), "--version"],
            app_settings,
            check=True,
            quiet=True,
            current_logger=current_logger,
        )
    except (subprocess.CalledProcessError, OSError):
        return False
    return True


def find_package_manager(
    candidates: Iterable[str],
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Probe `candidates` in order and return the first one that works.

    Probing stops at the first success. Returns None if no candidate works.
    """
    logger_to_use = current_logger if current_logger else module_logger
    for manager in candidates:
        if probe_package_manager(manager, app_settings, logger_to_use):
            return manager
        logger_to_use.debug(f"Package manager '{manager}' is not available")
    return None


def detect_package_manager(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    manager = find_package_manager(
        app_settings.package_managers, app_settings, current_logger
    )
    if manager is None:
        return StepResult.fatal(
            f"No package manager found ({_describe_candidates(app_settings.package_managers)} required)"
        )

    context.package_manager = manager
    return StepResult.success(f"Package manager: {manager}", value=manager)


def _describe_candidates(candidates: List[str]) -> str:
    if len(candidates) < 3:
        return " or ".join(candidates)
    return f"{', '.join(candidates[:-1])}, or {candidates[-1]}"
