# common/command_utils.py
# -*- coding: utf-8 -*-
"""
Utilities for executing shell commands and logging their output.
"""

import logging
import shutil
import subprocess
from typing import Any, Dict, List, Optional

from devsetup.config_models import SYMBOLS_DEFAULT, AppSettings

module_logger = logging.getLogger(__name__)


def get_symbols(app_settings: Optional[AppSettings]) -> Dict[str, str]:
    """Return the configured message symbols, falling back to the defaults."""
    return (
        app_settings.symbols
        if app_settings and app_settings.symbols
        else SYMBOLS_DEFAULT
    )


def log_message(
    message: str,
    level: str = "info",
    current_logger: Optional[logging.Logger] = None,
    app_settings: Optional[AppSettings] = None,
    exc_info: bool = False,
) -> None:
    """
    Logs a setup message at the requested level.

    Args:
        message (str): The log message to be recorded.
        level (str): The severity level of the log message. Defaults to "info".
            Common options include "debug", "info", "success", "warning",
            "error", and "critical". "success" is logged at INFO.
        current_logger (Optional[logging.Logger]): A logger instance to use for logging. If not provided,
            a module-level logger will be used.
        app_settings (Optional[AppSettings]): Optional application settings that can influence logging behavior.
        exc_info (bool): Indicator to include exception details in the log. By default, this is set to False.

    Returns:
        None
    """
    effective_logger = current_logger if current_logger else module_logger

    if level == "warning":
        effective_logger.warning(message, exc_info=exc_info)
    elif level == "error":
        effective_logger.error(message, exc_info=exc_info)
    elif level == "critical":
        effective_logger.critical(message, exc_info=exc_info)
    elif level == "debug":
        effective_logger.debug(message, exc_info=exc_info)
    else:
        effective_logger.info(message, exc_info=exc_info)


def resolve_executable(command_name: str) -> str:
    """
    Resolve a command name to the executable found on PATH.

    Honours PATHEXT on Windows, so `npm` resolves to `npm.cmd`. When the
    command is not on PATH the bare name is returned and the subprocess call
    raises FileNotFoundError.
    """
    return shutil.which(command_name) or command_name


def run_command(
    command: List[str],
    app_settings: Optional[AppSettings],
    check: bool = True,
    capture_output: bool = False,
    quiet: bool = False,
    current_logger: Optional[logging.Logger] = None,
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess:
    """
    Executes a system command and logs the process details and results.

    By default the child inherits this process's standard streams, so
    long-running tools such as package installs show live progress.

    Args:
        command (List[str]): The command and its arguments.
        app_settings (Optional[AppSettings]): Settings providing logging
            symbols. If not provided, default symbols are used.
        check (bool): Raise CalledProcessError on a non-zero exit code.
            Defaults to True.
        capture_output (bool): Capture stdout and stderr as text. Defaults
            to False.
        quiet (bool): Discard stdout and stderr, and log failures at debug
            level. Output is still captured when capture_output is set.
            Defaults to False.
        current_logger (Optional[logging.Logger]): Logger for command details.
        cwd (Optional[str]): Working directory for the command.

    Returns:
        subprocess.CompletedProcess: The completed process instance.

    Raises:
        subprocess.CalledProcessError: The command exited non-zero and
            `check` is True.
        FileNotFoundError: The command was not found on the system.
        Exception: Other unexpected errors during execution.
    """
    effective_logger = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    command_to_log_str = subprocess.list2cmdline(command)
    failure_level = "debug" if quiet else "error"

    log_message(
        f"{symbols.get('gear', '⚙️')} Executing: {command_to_log_str} {f'(in {cwd})' if cwd else ''}".rstrip(),
        "debug" if quiet else "info",
        effective_logger,
        app_settings,
    )

    stream_kwargs: Dict[str, Any] = {}
    if capture_output:
        stream_kwargs["capture_output"] = True
    elif quiet:
        stream_kwargs["stdout"] = subprocess.DEVNULL
        stream_kwargs["stderr"] = subprocess.DEVNULL

    try:
        result = subprocess.run(
            command, check=check, text=True, cwd=cwd, **stream_kwargs
        )
        if capture_output:
            if result.stdout and result.stdout.strip():
                log_message(
                    f"   stdout: {result.stdout.strip()}",
                    "debug",
                    effective_logger,
                    app_settings,
                )
            if result.stderr and result.stderr.strip():
                log_message(
                    f"   stderr: {result.stderr.strip()}",
                    "debug",
                    effective_logger,
                    app_settings,
                )
        return result
    except subprocess.CalledProcessError as e:
        log_message(
            f"{symbols.get('error', '❌')} Command `{command_to_log_str}` failed (rc {e.returncode}).",
            failure_level,
            effective_logger,
            app_settings,
        )
        if e.stdout and e.stdout.strip():
            log_message(
                f"   stdout: {e.stdout.strip()}",
                failure_level,
                effective_logger,
                app_settings,
            )
        if e.stderr and e.stderr.strip():
            log_message(
                f"   stderr: {e.stderr.strip()}",
                failure_level,
                effective_logger,
                app_settings,
            )
        raise
    except FileNotFoundError as e:
        log_message(
            f"{symbols.get('error', '❌')} Command not found: {e.filename}. Ensure it's installed and in PATH.",
            failure_level,
            effective_logger,
            app_settings,
        )
        raise
    except Exception as e:
        log_message(
            f"{symbols.get('error', '❌')} Unexpected error running command `{command_to_log_str}`: {e}",
            failure_level,
            effective_logger,
            app_settings,
            exc_info=not quiet,
        )
        raise
