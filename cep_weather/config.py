from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Settings could not be loaded; the entry point decides whether to exit."""


class AppSettings(BaseSettings):
    app_name: str = "CEP Weather"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    # Outbound HTTP
    viacep_url: str = "https://viacep.com.br/ws/{cep}/json/"
    weatherapi_url: str = "https://api.weatherapi.com/v1/current.json"
    connect_timeout_s: float = Field(5.0, gt=0)
    read_timeout_s: float = Field(10.0, gt=0)

    # Read as WEATHER_API_KEY, without the APP_ prefix
    weather_api_key: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("WEATHER_API_KEY", "weather_api_key"),
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("weather_api_key")
    @classmethod
    def _require_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("WEATHER_API_KEY must not be empty")
        return v


def load_settings(env_file: Optional[str] = ".env") -> AppSettings:
    """Load settings from the environment merged over ``env_file``.

    Raises ``ConfigError`` instead of letting a ``ValidationError`` escape, so
    callers only need to handle one failure type.
    """
    try:
        return AppSettings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
