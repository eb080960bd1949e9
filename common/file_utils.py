# common/file_utils.py
# -*- coding: utf-8 -*-
"""
File system utility functions, such as seeding files from templates and
creating directories.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from devsetup.config_models import AppSettings

from .command_utils import get_symbols, log_message

module_logger = logging.getLogger(__name__)


def copy_file_if_absent(
    template_path: Path,
    target_path: Path,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Copy `template_path` to `target_path` unless the target already exists.

    The copy is byte-for-byte. An existing target is never overwritten, and
    a missing template is not an error.

    Parameters:
        template_path (Path): The file to copy from.
        target_path (Path): The file to create.
        app_settings (Optional[AppSettings]): Settings providing log symbols.
        current_logger (Optional[logging.Logger]): Logger instance to use.

    Returns:
        bool: True if the target was created, False if nothing was done.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    if target_path.exists():
        log_message(
            f"{symbols.get('info', 'ℹ️')} {target_path} already exists. Leaving it untouched.",
            "debug",
            logger_to_use,
            app_settings,
        )
        return False

    if not template_path.is_file():
        log_message(
            f"{symbols.get('info', 'ℹ️')} Template {template_path} not found. Nothing to copy.",
            "debug",
            logger_to_use,
            app_settings,
        )
        return False

    target_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(template_path, target_path)
    log_message(
        f"{symbols.get('debug', '🐛')} Copied {template_path} to {target_path}",
        "debug",
        logger_to_use,
        app_settings,
    )
    return True


def ensure_directory(
    directory_path: Path,
    app_settings: Optional[AppSettings],
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Make sure `directory_path` exists, creating parent directories as needed.

    Parameters:
        directory_path (Path): The directory to create.
        app_settings (Optional[AppSettings]): Settings providing log symbols.
        current_logger (Optional[logging.Logger]): Logger instance to use.

    Returns:
        bool: True if the directory was created, False if it already existed.

    Raises:
        OSError: If the directory cannot be created, or the path exists and is
            not a directory.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if directory_path.is_dir():
        return False

    directory_path.mkdir(parents=True, exist_ok=True)
    log_message(
        f"{get_symbols(app_settings).get('debug', '🐛')} Created directory {directory_path}",
        "debug",
        logger_to_use,
        app_settings,
    )
    return True
