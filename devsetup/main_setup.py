# devsetup/main_setup.py
# -*- coding: utf-8 -*-
"""
Main entry point for the development environment setup.

Parses the command line, loads settings, runs every setup step in order and
turns the resulting report into the process exit code.
"""

import argparse
import logging
import sys
from typing import List, Optional

from common.command_utils import get_symbols, log_message
from common.core_utils import setup_logging
from common.orchestrator import Orchestrator
from common.step_result import SetupReport
from devsetup import config as static_config
from devsetup.cli_handler import (
    log_setup_summary,
    print_completion_banner,
    view_configuration,
)
from devsetup.config_loader import load_app_settings
from devsetup.config_models import AppSettings
from devsetup.setup_context import SetupContext
from devsetup.steps import (
    check_browser,
    check_runtime_version,
    detect_package_manager,
    install_dependencies,
    run_linting,
    run_type_check,
    setup_build_directory,
    setup_environment_file,
)

module_logger = logging.getLogger("devsetup")

SETUP_STEPS = [
    ("Runtime version check", check_runtime_version),
    ("Package manager detection", detect_package_manager),
    ("Environment file", setup_environment_file),
    ("Dependency installation", install_dependencies),
    ("Build directory", setup_build_directory),
    ("Type check", run_type_check),
    ("Linting", run_linting),
    ("Browser check", check_browser),
]


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="devsetup",
        description=f"Set up the {static_config.PROJECT_NAME_DEFAULT} development environment.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--project-root",
        dest="project_root",
        default=None,
        help="Project directory to set up (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"YAML config file, relative to the project root (default: {static_config.CONFIG_FILE_DEFAULT})",
    )
    parser.add_argument(
        "--min-node-version",
        dest="min_node_version",
        default=None,
        help=f"Minimum runtime version (default: {static_config.RUNTIME_MINIMUM_VERSION_DEFAULT})",
    )
    parser.add_argument(
        "--package-manager",
        dest="package_managers",
        action="append",
        default=None,
        metavar="NAME",
        help="Package manager to try, in order. Repeat to give several.",
    )
    parser.add_argument(
        "--skip-typecheck",
        action="store_true",
        default=None,
        help="Skip the type check step",
    )
    parser.add_argument(
        "--skip-lint",
        action="store_true",
        default=None,
        help="Skip the lint step",
    )
    parser.add_argument(
        "--skip-browser-check",
        action="store_true",
        default=None,
        help="Skip the browser installation check",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log output to this file",
    )
    parser.add_argument(
        "--view-config",
        action="store_true",
        help="Show the effective configuration and exit",
    )
    return parser.parse_args(args)


def build_orchestrator(
    app_settings: AppSettings,
    context: SetupContext,
    current_logger: Optional[logging.Logger] = None,
) -> Orchestrator:
    """Create an orchestrator loaded with every setup step, in run order."""
    orchestrator = Orchestrator(
        app_settings, context, current_logger or module_logger
    )
    for step_name, step_function in SETUP_STEPS:
        orchestrator.add_task(step_name, step_function)
    return orchestrator


def run_setup(
    app_settings: AppSettings,
    current_logger: Optional[logging.Logger] = None,
) -> SetupReport:
    """
    Run the full setup and report the outcome.

    The success banner is printed only when no step was fatal.
    """
    logger_to_use = current_logger if current_logger else module_logger
    symbols = get_symbols(app_settings)

    log_message(
        f"{symbols.get('rocket', '🚀')} Setting up {app_settings.project_name}...",
        "info",
        logger_to_use,
        app_settings,
    )

    context = SetupContext(project_root=app_settings.project_root)
    report = build_orchestrator(app_settings, context, logger_to_use).run()

    log_setup_summary(report, app_settings, logger_to_use)
    if report.halted:
        log_message(
            f"{symbols.get('error', '❌')} Setup failed.",
            "error",
            logger_to_use,
            app_settings,
        )
    else:
        print_completion_banner(app_settings, logger_to_use)
    return report


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the development environment setup."""
    parsed_args = parse_args(args)
    setup_logging(
        log_level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        log_file=parsed_args.log_file,
        log_format_str="%(message)s",
    )

    try:
        app_settings = load_app_settings(
            parsed_args, current_logger=module_logger
        )
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    # Re-apply logging with the configured prefix and symbols.
    setup_logging(
        log_level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        log_file=parsed_args.log_file,
        log_format_str=None if parsed_args.verbose else "%(message)s",
        log_prefix=app_settings.log_prefix,
        symbols=app_settings.symbols,
    )

    if parsed_args.view_config:
        view_configuration(app_settings, module_logger)
        return 0

    try:
        report = run_setup(app_settings, module_logger)
    except KeyboardInterrupt:
        log_message(
            f"{get_symbols(app_settings).get('warning', '⚠️')} Setup interrupted by user.",
            "warning",
            module_logger,
            app_settings,
        )
        return 130
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
