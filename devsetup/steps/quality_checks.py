# devsetup/steps/quality_checks.py
# -*- coding: utf-8 -*-
"""
Runs the project's type check and lint scripts.

Failures here never stop the setup; they are reported as warnings.
"""

import logging
import subprocess
from typing import Optional

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


def run_project_script(
    script_name: str,
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Run `<manager> run <script_name>` in the project root.

    Returns:
        bool: True if the script exited 0, False if it failed or the package
        manager could not be launched.
    """
    manager = context.require_package_manager()
    try:
        run_command(
            [resolve_executable(manager), "run", script_name],
            app_settings,
            check=True,
            current_logger=current_logger,
            cwd=str(context.project_root),
        )
    except (subprocess.CalledProcessError, OSError):
        return False
    return True


def run_type_check(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    logger_to_use = current_logger if current_logger else module_logger
    if app_settings.skip_typecheck:
        return StepResult.skipped("Type check skipped")

    log_message(
        f"{get_symbols(app_settings).get('search', '🔍')} Running type check...",
        "info",
        logger_to_use,
        app_settings,
    )
    if run_project_script(
        app_settings.scripts.typecheck, app_settings, context, logger_to_use
    ):
        return StepResult.success("Type check passed")
    return StepResult.warning(
        "Type check failed - you may need to fix TypeScript errors"
    )


def run_linting(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    """
    Run the lint script, falling back to the lint fix script on failure.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    if app_settings.skip_lint:
        return StepResult.skipped("Linting skipped")

    log_message(
        f"{symbols.get('broom', '🧹')} Running linter...",
        "info",
        logger_to_use,
        app_settings,
    )
    if run_project_script(
        app_settings.scripts.lint, app_settings, context, logger_to_use
    ):
        return StepResult.success("Linting passed")

    log_message(
        f"{symbols.get('warning', '⚠️')} Linting failed - running auto-fix...",
        "warning",
        logger_to_use,
        app_settings,
    )
    if run_project_script(
        app_settings.scripts.lint_fix, app_settings, context, logger_to_use
    ):
        return StepResult.success("Auto-fix completed")
    return StepResult.warning("Some linting issues need manual fixing")
