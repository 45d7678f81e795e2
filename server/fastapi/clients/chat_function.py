import httpx
from pydantic import ValidationError

from config import CHAT_FUNCTION_TIMEOUT
from errors import MalformedResponse, UpstreamError
from models import Location, Message

http_client = httpx.Client(timeout=CHAT_FUNCTION_TIMEOUT)


class ChatFunctionClient:
    """Invokes the Nova chat handler over HTTP on behalf of the widget."""

    def __init__(self, url: str, anon_key: str | None = None):
        self.url = url
        self.anon_key = anon_key

    def invoke(self, message: str, context: list[Message], location: Location | None = None) -> Message:
        headers = {"Content-Type": "application/json"}
        if self.anon_key:
            headers["apikey"] = self.anon_key
            headers["Authorization"] = f"Bearer {self.anon_key}"

        body = {
            "message": message,
            "context": [m.model_dump(exclude_none=True) for m in context],
        }
        if location is not None:
            body["location"] = location.model_dump(exclude_none=True)

        try:
            response = http_client.post(self.url, headers=headers, json=body)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Chat function request failed: {e}") from e

        if not response.is_success:
            try:
                error = response.json().get("error") or "Unknown error"
            except (ValueError, AttributeError):
                error = "Unknown error"
            raise UpstreamError(error, response.status_code)

        try:
            return Message.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise MalformedResponse("Chat function returned an unexpected body") from e
