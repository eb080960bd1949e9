# devsetup/steps/browser.py
# -*- coding: utf-8 -*-
"""
Checks for a Chrome or Chromium installation in well-known locations.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from common.command_utils import get_symbols, log_message
from common.step_result import StepResult
from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext

module_logger = logging.getLogger(__name__)


def iter_browser_paths(browser_paths: Dict[str, List[str]]) -> Iterator[str]:
    """Yield every configured location, all platforms, in declaration order."""
    for paths in browser_paths.values():
        yield from paths


def find_browser(browser_paths: Dict[str, List[str]]) -> Optional[str]:
    """Return the first configured location that exists, or None."""
    for candidate in iter_browser_paths(browser_paths):
        if Path(candidate).exists():
            return candidate
    return None


def check_browser(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> StepResult:
    logger_to_use = current_logger if current_logger else module_logger
    if app_settings.skip_browser_check:
        return StepResult.skipped("Browser check skipped")

    log_message(
        f"{get_symbols(app_settings).get('globe', '🌐')} Checking Chrome browser...",
        "info",
        logger_to_use,
        app_settings,
    )
    browser_path = find_browser(app_settings.browser_paths)
    if browser_path:
        return StepResult.success(
            "Chrome browser found", details=[browser_path], value=browser_path
        )
    return StepResult.warning(
        "Chrome browser not found in standard locations",
        details=["Please ensure Chrome is installed for extension development"],
    )
