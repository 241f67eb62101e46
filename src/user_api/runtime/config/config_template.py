"""Configuration template substitution utilities."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.user_api.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str, env: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    variables = os.environ if env is None else env

    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return variables.get(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = variables.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            value = variables.get(var_expr)
            if value is None:
                raise ValueError(f"Required environment variable {var_expr} not set")
            return value

    # Comment lines are left untouched
    return "".join(
        line if line.lstrip().startswith("#") else _PLACEHOLDER.sub(replacer, line)
        for line in text.splitlines(keepends=True)
    )


def environment_overrides(env_mode: str, env: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the variables visible to the template for the given environment.

    Variables prefixed with the upper-cased environment name (``TEST_DATABASE_URL``)
    shadow their unprefixed counterparts (``DATABASE_URL``).
    """
    variables = dict(os.environ if env is None else env)
    prefix = f"{env_mode.upper()}_"

    overrides = {
        name[len(prefix):]: value
        for name, value in variables.items()
        if name.startswith(prefix)
    }
    if overrides:
        logger.info(
            "Applying environment-specific overrides: {}", sorted(overrides.keys())
        )
    variables.update(overrides)
    return variables


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Environment whose prefixed variables take precedence

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing or the file is invalid
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    logger.info("Loading configuration for environment: {}", env_mode)
    substituted_content = substitute_env_vars(content, environment_overrides(env_mode))

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = loaded.get("config", {})
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return config
