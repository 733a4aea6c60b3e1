from __future__ import annotations

import logging
from typing import Any

import requests

from .config import check_credentials, get_azure_credentials, load_settings
from .endpoints import gen_azure_chat_completion
from .errors import RequestError
from .schemas import ChatMessage, Credentials, ResponseBody

logger = logging.getLogger(__name__)


def _decode_body(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _response_error(resp: requests.Response) -> RequestError:
    body = _decode_body(resp)
    headers = dict(resp.headers)
    logger.error(
        "Error sending chat message: HTTP %s, headers=%s, body=%s",
        resp.status_code,
        headers,
        body,
    )
    return RequestError(
        f"Azure OpenAI returned HTTP {resp.status_code}",
        status_code=resp.status_code,
        headers=headers,
        body=body,
    )


class AzureChatClient:
    """Posts chat-completion payloads to an Azure OpenAI deployment.

    With explicit `credentials` the environment is never read. Without them,
    credentials are loaded from the environment on every call.
    """

    def __init__(self, credentials: Credentials | None = None, *, timeout: float | None = None) -> None:
        self._credentials = credentials
        self.timeout = timeout

    def _resolve(self) -> tuple[Credentials, float | None]:
        if self._credentials is not None:
            return check_credentials(self._credentials), self.timeout

        settings = load_settings()
        credentials = get_azure_credentials(settings)
        timeout = self.timeout if self.timeout is not None else settings.request_timeout_s
        return credentials, timeout

    def endpoint(self) -> str:
        credentials, _ = self._resolve()
        return gen_azure_chat_completion(credentials)

    def send_chat_message(self, message: ChatMessage) -> ResponseBody:
        credentials, timeout = self._resolve()
        endpoint = gen_azure_chat_completion(credentials)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credentials.api_key.get_secret_value()}",
        }
        logger.debug("Sending chat message with credentials %s", credentials.log_view())

        try:
            resp = requests.post(endpoint, json=message, headers=headers, timeout=timeout)
            resp.raise_for_status()
            if not 200 <= resp.status_code < 300:
                raise _response_error(resp)
        except requests.HTTPError as e:
            raise _response_error(e.response) from e
        except requests.RequestException as e:
            logger.error("Error sending chat message: no response received: %s", e)
            raise RequestError(
                "No response received from Azure OpenAI",
                transport_error=str(e),
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Azure OpenAI returned a non-JSON body (HTTP %s): %s", resp.status_code, resp.text)
            raise RequestError(
                "Azure OpenAI returned a non-JSON response body",
                status_code=resp.status_code,
                headers=dict(resp.headers),
                body=resp.text,
            ) from e

        logger.debug("Response: %s", data)
        return data


def send_chat_message(
    message: ChatMessage,
    credentials: Credentials | None = None,
    *,
    timeout: float | None = None,
) -> ResponseBody:
    """POST `message` to the chat-completions endpoint and return the decoded JSON reply."""
    return AzureChatClient(credentials, timeout=timeout).send_chat_message(message)
