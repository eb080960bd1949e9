# devsetup/config_loader.py
# -*- coding: utf-8 -*-
"""
Configuration loader for the setup tool.

Handles loading settings from Pydantic model defaults, environment
variables, a YAML file in the project root, and command-line arguments,
applying a specific order of precedence:
1. Pydantic Model Defaults
2. Environment Variables (DEVSETUP_ prefix, loaded by BaseSettings)
3. YAML Configuration File
4. Command-Line Arguments
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from devsetup.config import CONFIG_FILE_DEFAULT

from .config_models import AppSettings

module_logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT_CODE = 2


def _deep_update(
    source: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Recursively updates `source` with values from `overrides`.

    Nested dictionaries are merged key by key. `None` values in `overrides`
    never replace an existing value in `source`.

    Parameters:
        source: Dict[str, Any]
            The dictionary to be updated. Modified in place.
        overrides: Dict[str, Any]
            The dictionary containing values to update or add to `source`.

    Returns:
        Dict[str, Any]: The updated `source` dictionary.
    """
    for key, value in overrides.items():
        if (
            isinstance(value, dict)
            and key in source
            and isinstance(source[key], dict)
        ):
            source[key] = _deep_update(source[key], value)
        elif value is not None:
            source[key] = value
        elif key not in source:
            source[key] = value
    return source


def load_yaml_config(
    yaml_config_path: Path,
    current_logger: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    """
    Reads a YAML configuration file into a dictionary.

    A missing, unreadable or malformed file is not an error: the problem is
    logged and an empty dictionary is returned so the caller falls back to
    defaults and environment variables.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if not (yaml_config_path.exists() and yaml_config_path.is_file()):
        logger_to_use.debug(
            f"Configuration file '{yaml_config_path}' not found. Using defaults, environment variables, and CLI args."
        )
        return {}

    try:
        with open(yaml_config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger_to_use.warning(
            f"Could not parse YAML config file '{yaml_config_path}': {e}. Using defaults and environment variables."
        )
        return {}
    except IOError as e:
        logger_to_use.warning(
            f"Could not read config file '{yaml_config_path}': {e}. Using defaults and environment variables."
        )
        return {}

    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        logger_to_use.warning(
            f"Config file '{yaml_config_path}' does not contain a valid YAML dictionary. Ignoring."
        )
        return {}

    logger_to_use.info(f"Loaded configuration from {yaml_config_path}")
    return yaml_data


def _map_cli_args(cli_args: argparse.Namespace) -> Dict[str, Any]:
    """Translates parsed CLI arguments into AppSettings field overrides."""
    cli_arg_dict = vars(cli_args)
    mapped_cli_values: Dict[str, Any] = {}
    runtime_cli_values: Dict[str, Any] = {}

    for cli_key, cli_value in cli_arg_dict.items():
        if cli_value is None:
            continue

        if cli_key == "min_node_version":
            runtime_cli_values["minimum_version"] = cli_value
        elif cli_key == "package_managers":
            mapped_cli_values["package_managers"] = list(cli_value)
        elif cli_key in (
            "skip_typecheck",
            "skip_lint",
            "skip_browser_check",
        ):
            mapped_cli_values[cli_key] = cli_value

    if runtime_cli_values:
        mapped_cli_values["runtime"] = runtime_cli_values
    return mapped_cli_values


def resolve_project_root(
    cli_args: Optional[argparse.Namespace] = None,
) -> Path:
    """
    Determines the project root: the CLI value wins, then DEVSETUP_PROJECT_ROOT,
    then the current working directory.
    """
    cli_root = getattr(cli_args, "project_root", None) if cli_args else None
    if cli_root:
        return Path(cli_root).expanduser().resolve()
    return AppSettings().project_root.expanduser().resolve()


def load_app_settings(
    cli_args: Optional[argparse.Namespace] = None,
    config_file_path: Optional[str] = None,
    current_logger: Optional[logging.Logger] = None,
) -> AppSettings:
    """
    Loads application settings with the following precedence:
    1. Pydantic Model Defaults.
    2. Environment Variables (BaseSettings loads these on instantiation).
    3. Values from the YAML configuration file in the project root.
    4. Command-Line Arguments (highest precedence, overrides all else).

    Args:
        cli_args: Parsed command-line arguments (from argparse).
        config_file_path: YAML file name or path, relative to the project root.
            Falls back to the CLI `--config` value, then devsetup.yaml.
        current_logger: Optional logger to use instead of the module logger.

    Returns:
        An instance of AppSettings with the fully resolved configuration.

    Raises:
        SystemExit: With exit code 2 when the merged values fail validation.
    """
    logger_to_use = current_logger if current_logger else module_logger

    try:
        settings_after_env_and_defaults = AppSettings()
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise SystemExit(CONFIG_ERROR_EXIT_CODE) from e

    current_values_dict = settings_after_env_and_defaults.model_dump(
        exclude_defaults=False
    )

    project_root = resolve_project_root(cli_args)

    if config_file_path is None:
        config_file_path = (
            getattr(cli_args, "config", None) if cli_args else None
        ) or CONFIG_FILE_DEFAULT
    yaml_config_path = Path(config_file_path)
    if not yaml_config_path.is_absolute():
        yaml_config_path = project_root / yaml_config_path

    yaml_data = load_yaml_config(yaml_config_path, logger_to_use)
    if yaml_data:
        current_values_dict = _deep_update(current_values_dict, yaml_data)

    if cli_args:
        current_values_dict = _deep_update(
            current_values_dict, _map_cli_args(cli_args)
        )

    # The root decides where the YAML file lives, so it cannot come from it.
    current_values_dict["project_root"] = project_root

    try:
        final_settings = AppSettings(**current_values_dict)
    except ValidationError as e:
        logger_to_use.error(f"Configuration validation failed: {e}")
        raise SystemExit(CONFIG_ERROR_EXIT_CODE) from e

    logger_to_use.debug(
        "Successfully loaded and validated application settings"
    )
    return final_settings
