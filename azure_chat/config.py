from __future__ import annotations

import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .schemas import Credentials, mask_secret

logger = logging.getLogger(__name__)

# Field name -> environment variable, in the order they are reported.
CREDENTIAL_ENV_VARS: dict[str, str] = {
    "azure_api_key": "AZURE_API_KEY",
    "azure_openai_api_instance_name": "AZURE_OPENAI_API_INSTANCE_NAME",
    "azure_openai_api_deployment_name": "AZURE_OPENAI_API_DEPLOYMENT_NAME",
    "azure_openai_api_version": "AZURE_OPENAI_API_VERSION",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    azure_api_key: str | None = Field(default=None, validation_alias="AZURE_API_KEY")
    azure_openai_api_instance_name: str | None = Field(
        default=None, validation_alias="AZURE_OPENAI_API_INSTANCE_NAME"
    )
    azure_openai_api_deployment_name: str | None = Field(
        default=None, validation_alias="AZURE_OPENAI_API_DEPLOYMENT_NAME"
    )
    azure_openai_api_version: str | None = Field(default=None, validation_alias="AZURE_OPENAI_API_VERSION")

    # None means wait for as long as the transport does.
    request_timeout_s: float | None = Field(default=None, validation_alias="AZURE_OPENAI_REQUEST_TIMEOUT")

    def missing_credentials(self) -> tuple[str, ...]:
        return tuple(env for field, env in CREDENTIAL_ENV_VARS.items() if not getattr(self, field))


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        bad = tuple(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        logger.error("Invalid Azure OpenAI environment value for %s", ", ".join(bad))
        raise ConfigurationError(
            f"Invalid environment configuration: bad value for {', '.join(bad)}",
            missing=bad,
        ) from e


def check_credentials(credentials: Credentials) -> Credentials:
    """Reject credentials with an empty field before they reach the network."""
    empty = credentials.empty_fields()
    if empty:
        logger.error("Azure OpenAI credentials incomplete, empty %s (%s)", ", ".join(empty), credentials.log_view())
        raise ConfigurationError(f"Invalid credentials: empty {', '.join(empty)}", missing=empty)
    return credentials


def get_azure_credentials(settings: Settings | None = None) -> Credentials:
    """Read the four Azure OpenAI credential values from the environment.

    Settings are built fresh on each call unless one is passed in, so nothing
    read from the environment outlives the call.
    """
    settings = settings if settings is not None else load_settings()

    missing = settings.missing_credentials()
    if missing:
        logger.error(
            "Azure OpenAI environment incomplete, missing %s (instance=%r deployment=%r api_version=%r key=%s)",
            ", ".join(missing),
            settings.azure_openai_api_instance_name,
            settings.azure_openai_api_deployment_name,
            settings.azure_openai_api_version,
            mask_secret(settings.azure_api_key),
        )
        raise ConfigurationError(
            f"Invalid environment configuration: missing {', '.join(missing)}",
            missing=missing,
        )

    return Credentials(
        api_key=settings.azure_api_key,
        instance_name=settings.azure_openai_api_instance_name,
        deployment_name=settings.azure_openai_api_deployment_name,
        api_version=settings.azure_openai_api_version,
    )
