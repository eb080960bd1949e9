# devsetup/steps/__init__.py
"""
Individual setup steps.

Every step is called as step(app_settings=..., context=..., current_logger=...)
and returns a StepResult.
"""

from devsetup.steps.browser import check_browser
from devsetup.steps.build_directory import setup_build_directory
from devsetup.steps.dependencies import install_dependencies
from devsetup.steps.environment_file import setup_environment_file
from devsetup.steps.package_manager import detect_package_manager
from devsetup.steps.quality_checks import run_linting, run_type_check
from devsetup.steps.runtime_check import check_runtime_version

__all__ = [
    "check_browser",
    "check_runtime_version",
    "detect_package_manager",
    "install_dependencies",
    "run_linting",
    "run_type_check",
    "setup_build_directory",
    "setup_environment_file",
]
