from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SecretStr

# Request and response bodies are passed through untouched.
ChatMessage = Any
ResponseBody = Any


def mask_secret(value: str | None, visible: int = 4) -> str:
    if not value:
        return "<missing>"
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    instance_name: str
    deployment_name: str
    api_version: str

    def empty_fields(self) -> tuple[str, ...]:
        values = {
            "api_key": self.api_key.get_secret_value(),
            "instance_name": self.instance_name,
            "deployment_name": self.deployment_name,
            "api_version": self.api_version,
        }
        return tuple(name for name, value in values.items() if not value)

    def masked_key(self) -> str:
        return mask_secret(self.api_key.get_secret_value())

    def log_view(self) -> dict[str, str]:
        """Loggable view: everything but the raw key."""
        return {
            "instance_name": self.instance_name,
            "deployment_name": self.deployment_name,
            "api_version": self.api_version,
            "api_key": self.masked_key(),
        }
