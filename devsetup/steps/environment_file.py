# devsetup/steps/environment_file.py
# -*- coding: utf-8 -*-
"""
Seeds the local environment override file from the checked-in template.
"""

import logging
from typing import Optional

from common.file_utils import copy_file_if_absent
from common.step_result import StepResult
from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext

module_logger = logging.getLogger(__name__)


def setup_environment_file(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    """
    Copy the env template to the override path if the override is missing.

    An existing override is never overwritten. A missing template is skipped
    without a warning.
    """
    logger_to_use = current_logger if current_logger else module_logger
    template_path = app_settings.resolve_path(app_settings.env_template)
    override_path = app_settings.resolve_path(app_settings.env_override)
    template_name = app_settings.env_template.name
    override_name = app_settings.env_override.name

    if override_path.exists():
        return StepResult.skipped(f"{override_name} already exists")

    if not copy_file_if_absent(
        template_path, override_path, app_settings, logger_to_use
    ):
        return StepResult.skipped(
            f"No {template_name} found, {override_name} not created"
        )

    memo = app_settings.symbols.get("memo", "📝")
    return StepResult.success(
        f"Created {override_name} from {template_name}",
        details=[
            f"{memo} Please update {override_name} with your API keys and configuration"
        ],
    )
