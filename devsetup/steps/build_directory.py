# devsetup/steps/build_directory.py
# -*- coding: utf-8 -*-
"""
Ensures the build output directory exists.
"""

import logging
from typing import Optional

from common.file_utils import ensure_directory
from common.step_result import StepResult
from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext

module_logger = logging.getLogger(__name__)


def setup_build_directory(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    # Filesystem errors are left to the orchestrator.
    build_dir = app_settings.resolve_path(app_settings.build_dir)
    if ensure_directory(build_dir, app_settings, current_logger):
        return StepResult.success("Created build directory")
    return StepResult.skipped(f"Build directory {build_dir} already exists")
