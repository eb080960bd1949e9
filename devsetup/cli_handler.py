# devsetup/cli_handler.py
# -*- coding: utf-8 -*-
"""
Handles user-facing CLI output for the setup tool: the effective
configuration view, the per-step summary and the completion banner.
"""

import logging
from typing import List, Optional

from common.command_utils import get_symbols, log_message
from common.step_result import SetupReport, StepStatus
from devsetup import config as static_config
from devsetup.config_models import AppSettings

module_logger = logging.getLogger(__name__)


def view_configuration(
    app_config: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    """
    Displays the current effective configuration values, after CLI, YAML,
    environment variables and model defaults have been merged.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = app_config.symbols

    config_text = f"{symbols.get('info', 'ℹ️')} Current effective configuration values (CLI > YAML > ENV > Defaults):\n\n"
    config_text += f"  Project:                       {app_config.project_name}\n"
    config_text += f"  Project Root:                  {app_config.project_root}\n"
    config_text += f"  Log Prefix:                    {app_config.log_prefix}\n\n"

    config_text += "  Runtime (runtime.*):\n"
    config_text += f"    Command:                     {app_config.runtime.command}\n"
    config_text += f"    Minimum Version:             {app_config.runtime.minimum_version}\n\n"

    config_text += f"  Package Managers (in order):   {', '.join(app_config.package_managers)}\n"
    config_text += "  Scripts (scripts.*):\n"
    config_text += f"    Install:                     {app_config.scripts.install}\n"
    config_text += f"    Type Check:                  {app_config.scripts.typecheck}\n"
    config_text += f"    Lint:                        {app_config.scripts.lint}\n"
    config_text += f"    Lint Fix:                    {app_config.scripts.lint_fix}\n\n"

    config_text += f"  Env Template:                  {app_config.resolve_path(app_config.env_template)}\n"
    config_text += f"  Env Override:                  {app_config.resolve_path(app_config.env_override)}\n"
    config_text += f"  Build Directory:               {app_config.resolve_path(app_config.build_dir)}\n\n"

    config_text += "  Browser Locations:\n"
    for platform, paths in app_config.browser_paths.items():
        for path in paths:
            config_text += f"    [{platform}] {path}\n"
    config_text += "\n"

    config_text += f"  Skip Type Check:               {app_config.skip_typecheck}\n"
    config_text += f"  Skip Lint:                     {app_config.skip_lint}\n"
    config_text += f"  Skip Browser Check:            {app_config.skip_browser_check}\n\n"
    config_text += f"  Script Version (static):       {static_config.SCRIPT_VERSION}\n\n"
    config_text += "Configuration is loaded with precedence: CLI > YAML File > Environment Variables > Model Defaults."

    log_message(
        "Displaying current configuration:", "info", logger_to_use, app_config
    )
    log_message(f"\n{config_text}\n", "info", logger_to_use, app_config)


def log_setup_summary(
    report: SetupReport,
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> None:
    """Logs one line per executed step with its final status."""
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)
    status_symbols = {
        StepStatus.SUCCESS: symbols.get("success", "✅"),
        StepStatus.WARNING: symbols.get("warning", "⚠️"),
        StepStatus.SKIPPED: symbols.get("skip", "⏭️"),
        StepStatus.FATAL: symbols.get("error", "❌"),
    }

    log_message("Setup summary:", "info", logger_to_use, app_settings)
    for step_name, result in report.results:
        log_message(
            f"   {status_symbols[result.status]} {step_name}: {result.status.value}",
            "info",
            logger_to_use,
            app_settings,
        )


def completion_banner_lines(app_settings: AppSettings) -> List[str]:
    """Returns the success banner with the manual next steps."""
    symbols = get_symbols(app_settings)
    override_name = app_settings.env_override.as_posix()
    build_dir_name = app_settings.build_dir.as_posix()
    return [
        "",
        f"{symbols.get('party', '🎉')} Setup completed successfully!",
        "",
        f"{symbols.get('books', '📚')} Next steps:",
        f"   1. Update {override_name} with your API keys",
        '   2. Run "npm run dev" to start development',
        "   3. Load the extension in Chrome from chrome://extensions/",
        '   4. Enable "Developer mode" and click "Load unpacked"',
        f'   5. Select the "{build_dir_name}" directory',
        "",
        f"{symbols.get('book', '📖')} Documentation: {app_settings.docs_path}",
        f"{symbols.get('bug', '🐛')} Issues: Check the GitHub repository",
    ]


def print_completion_banner(
    app_settings: AppSettings, current_logger: Optional[logging.Logger] = None
) -> None:
    logger_to_use = current_logger if current_logger else module_logger
    log_message(
        "\n".join(completion_banner_lines(app_settings)),
        "success",
        logger_to_use,
        app_settings,
    )
