"""Environment variables read before config.yaml is parsed."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from crm_api.runtime.config.config_data import Environment


class EnvironmentVariables(BaseSettings):
    """Primitive values that select and override the configuration file.

    ``log_level`` and ``database_url`` win over config.yaml when set.
    """

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    environment: Environment = Field(default="development", validation_alias="APP_ENVIRONMENT")
    config_file: str = Field(default="config.yaml", validation_alias="APP_CONFIG_FILE")
    log_level: str | None = Field(default=None, validation_alias="LOG_LEVEL")
    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")
