"""
Chat-completion client

Sends the built context to an OpenAI-compatible chat-completion endpoint
(DeepSeek by default) and returns the first completion's text.
Requires environment variable: DEEPSEEK_API_KEY
"""

import logging
import os
import httpx

from config import DEEPSEEK_API_URL, MODEL, TEMPERATURE, MAX_TOKENS, REQUEST_TIMEOUT
from errors import MalformedResponse, UpstreamError
from models import RoleContent

logger = logging.getLogger(__name__)

http_client = httpx.Client(timeout=REQUEST_TIMEOUT)


def _upstream_error_message(response: httpx.Response) -> str:
    """Pull `error.message` out of an error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return "Unknown error"
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return "Unknown error"


def complete_chat(messages: list[RoleContent]) -> str:
    """Run one chat completion. A single attempt: no retries, no streaming."""
    api_key = os.environ.get("DEEPSEEK_API_KEY")
    if not api_key:
        raise UpstreamError("Missing DEEPSEEK_API_KEY environment variable")

    try:
        response = http_client.post(
            DEEPSEEK_API_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": MODEL,
                "messages": messages,
                "temperature": TEMPERATURE,
                "max_tokens": MAX_TOKENS,
            },
        )
    except httpx.HTTPError as e:
        logger.error("Chat-completion request failed: %s", e)
        raise UpstreamError("Chat-completion request failed") from e

    if not response.is_success:
        message = _upstream_error_message(response)
        logger.error("Chat-completion API error %s: %s", response.status_code, message)
        raise UpstreamError(f"Chat-completion API error: {message}", response.status_code)

    try:
        data = response.json()
        content = data["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise MalformedResponse("Unexpected chat-completion response shape") from e

    if not isinstance(content, str):
        raise MalformedResponse("Chat-completion content is not text")

    logger.debug("Chat-completion returned %d characters", len(content))
    return content
