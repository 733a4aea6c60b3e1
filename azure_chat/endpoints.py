from __future__ import annotations

import logging

from .errors import ConfigurationError
from .schemas import Credentials

logger = logging.getLogger(__name__)


def sanitize_model_name(name: str) -> str:
    """Strip dots so a versioned model name can be used as a URL path segment."""
    return name.replace(".", "")


def gen_azure_endpoint(instance_name: str | None, deployment_name: str | None) -> str:
    """Base URL of a deployment on an Azure OpenAI instance."""
    if not instance_name or not deployment_name:
        missing = tuple(
            label
            for label, value in (("instance_name", instance_name), ("deployment_name", deployment_name))
            if not value
        )
        raise ConfigurationError(
            "Azure OpenAI API instance name and deployment name must be provided.",
            missing=missing,
        )

    return f"https://{instance_name}.openai.azure.com/openai/deployments/{deployment_name}"


def gen_azure_chat_completion(credentials: Credentials) -> str:
    """Chat-completions URL, with the api-version query, for `credentials`."""
    base = gen_azure_endpoint(credentials.instance_name, credentials.deployment_name)
    endpoint = f"{base}/chat/completions?api-version={credentials.api_version}"
    logger.debug("Generated endpoint: %s", endpoint)
    return endpoint
