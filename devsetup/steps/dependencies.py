# devsetup/steps/dependencies.py
# -*- coding: utf-8 -*-
"""
Installs project dependencies with the detected package manager.
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


def install_dependencies(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    """
    Run `<manager> install` in the project root.

    Output streams are inherited so the install progress is shown live. Any
    failure is fatal for the whole setup.
    """
    logger_to_use = current_logger if current_logger else module_logger
    manager = context.require_package_manager()

    log_message(
        f"{get_symbols(app_settings).get('package', '📦')} Installing dependencies...",
        "info",
        logger_to_use,
        app_settings,
    )
    try:
        run_command(
            [resolve_executable(manager), app_settings.scripts.install],
            app_settings,
            check=True,
            current_logger=logger_to_use,
            cwd=str(context.project_root),
        )
    except subprocess.CalledProcessError as e:
        return StepResult.fatal(
            "Failed to install dependencies",
            details=[f"'{manager} {app_settings.scripts.install}' exited with code {e.returncode}"],
        )
    except OSError as e:
        return StepResult.fatal(
            "Failed to install dependencies",
            details=[f"'{manager}' could not be started: {e}"],
        )

    return StepResult.success("Dependencies installed successfully")
