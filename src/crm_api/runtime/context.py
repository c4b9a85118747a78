"""Process-wide configuration held in a context variable.

The configuration is read once from ``APP_CONFIG_FILE`` at import time. Code
reads it through ``get_config()``; tests and scripts swap parts of it for a
block with ``with_context(override)``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from crm_api.runtime.config.config_data import ConfigData
from crm_api.runtime.config.config_template import load_templated_yaml
from crm_api.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    config: ConfigData


def _load_startup_context() -> AppContext:
    env_vars = EnvironmentVariables()
    return AppContext(config=load_templated_yaml(Path(env_vars.config_file), env_vars))


_app_context: ContextVar[AppContext] = ContextVar("crm_app_context", default=_load_startup_context())


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Make ``context`` current; the returned token undoes the change."""
    return _app_context.set(context)


def get_config() -> ConfigData:
    return get_context().config


def set_config(config: ConfigData) -> None:
    """Replace the whole configuration of the current context."""
    set_context(replace(get_context(), config=config))


def _explicit_fields(model: BaseModel) -> dict[str, Any]:
    """Collect the fields assigned on ``model`` or any nested model.

    Nested models built by a default factory are never in their parent's
    ``model_fields_set``, so each level is inspected on its own.
    """
    explicit: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_fields(value)
            if nested:
                explicit[name] = nested
            elif name in model.model_fields_set:
                explicit[name] = value.model_dump()
        elif name in model.model_fields_set:
            explicit[name] = value
    return explicit


def _deep_update(target: dict[str, Any], changes: dict[str, Any]) -> dict[str, Any]:
    merged = dict(target)
    for key, value in changes.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_update(current, value)
        else:
            merged[key] = value
    return merged


def merge_config(base: ConfigData, override: ConfigData) -> ConfigData:
    """Return ``base`` with every explicitly assigned value of ``override`` applied."""
    return ConfigData.model_validate(_deep_update(base.model_dump(), _explicit_fields(override)))


@contextmanager
def with_context(config_override: ConfigData | None = None) -> Iterator[None]:
    """Run a block with parts of the configuration replaced.

    Example:
        override = ConfigData(logging=LoggingConfig(level="DEBUG"))
        with with_context(override):
            assert get_config().logging.level == "DEBUG"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(f"config_override must be ConfigData, or None, got {type(config_override)}")

    current = get_context()
    token = set_context(replace(current, config=merge_config(current.config, config_override)))
    try:
        yield
    finally:
        _app_context.reset(token)
