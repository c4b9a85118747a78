"""Loading of ``config.yaml`` with ``${VAR}`` placeholders resolved from the environment."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from crm_api.runtime.config.config_data import ConfigData
from crm_api.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<op>:-|:\?)(?P<arg>[^}]*))?\}"
)


def _resolve(match: re.Match[str]) -> str:
    name, op, arg = match.group("name", "op", "arg")
    value = os.getenv(name)
    if value is not None:
        return value
    if op == ":-":
        return arg
    if op == ":?":
        raise ValueError(f"Required environment variable {name}: {arg}")
    raise ValueError(f"Required environment variable {name} not set")


def substitute_env_vars(text: str) -> str:
    """Replace environment placeholders in ``text``.

    ``${NAME}`` must be set, ``${NAME:-default}`` falls back to ``default`` and
    ``${NAME:?message}`` fails with ``message`` when unset.

    Raises:
        ValueError: if a required variable is not set
    """
    return _PLACEHOLDER.sub(_resolve, text)


def _promote_environment_overrides(env_mode: str) -> None:
    """Expose ``<ENV>_NAME`` variables as ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    promoted = {name[len(prefix):]: value for name, value in os.environ.items() if name.startswith(prefix)}
    if promoted:
        logger.info("Applying {} overrides: {}", env_mode, sorted(promoted))
    os.environ.update(promoted)


def _apply_environment_variables(config: ConfigData, env_vars: EnvironmentVariables) -> ConfigData:
    """Let explicitly set primitive environment variables win over the file."""
    if "environment" in env_vars.model_fields_set:
        config.app.environment = env_vars.environment
    if env_vars.log_level:
        config.logging.level = env_vars.log_level
    if env_vars.database_url:
        config.database.url = env_vars.database_url
    return config


def _expand(node: Any) -> Any:
    """Substitute placeholders in every string value of a parsed document."""
    if isinstance(node, str):
        return substitute_env_vars(node)
    if isinstance(node, dict):
        return {key: _expand(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_expand(item) for item in node]
    return node


def _parse(text: str) -> dict[str, Any]:
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not document:
        raise ValueError("Failed to parse YAML: the file is empty")
    return _expand(document.get("config", {}))


def load_templated_yaml(file_path: Path, env_vars: EnvironmentVariables | None = None) -> ConfigData:
    """Build ``ConfigData`` from a templated YAML file.

    A missing file yields the defaults, still subject to environment overrides.

    Raises:
        ValueError: if a required variable is missing or the file is invalid
    """
    env_vars = env_vars or EnvironmentVariables()
    logger.info("Loading configuration for environment: {}", env_vars.environment)

    if not file_path.exists():
        logger.warning("Configuration file {} not found; using defaults", file_path)
        return _apply_environment_variables(ConfigData(), env_vars)

    _promote_environment_overrides(env_vars.environment)
    section = _parse(file_path.read_text())

    try:
        config = ConfigData.model_validate(section)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return _apply_environment_variables(config, env_vars)
