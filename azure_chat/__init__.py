from __future__ import annotations

from .client import AzureChatClient, send_chat_message
from .config import Settings, get_azure_credentials
from .endpoints import gen_azure_chat_completion, gen_azure_endpoint, sanitize_model_name
from .errors import ConfigurationError, RequestError
from .schemas import ChatMessage, Credentials, ResponseBody

__all__ = [
    "AzureChatClient",
    "ChatMessage",
    "ConfigurationError",
    "Credentials",
    "RequestError",
    "ResponseBody",
    "Settings",
    "gen_azure_chat_completion",
    "gen_azure_endpoint",
    "get_azure_credentials",
    "sanitize_model_name",
    "send_chat_message",
]
