"""
Supabase auth + message persistence

Resolves the signed-in user from an access token and appends chat messages
to the `chat_messages` table through the PostgREST API.
Requires environment variables: SUPABASE_URL, SUPABASE_ANON_KEY
"""

import logging
from dataclasses import dataclass
from typing import Literal, Protocol

import httpx

from errors import AuthRequired, PersistenceError

logger = logging.getLogger(__name__)

http_client = httpx.Client(timeout=10.0)


@dataclass(frozen=True)
class Session:
    access_token: str
    user_id: str


class SessionProvider(Protocol):
    def get_session(self) -> Session | None: ...


class MessageStore(Protocol):
    def append(self, content: str, role: Literal["user", "bot"], user_id: str | None = None) -> None: ...


class StaticSessionProvider:
    """Returns a fixed session (or none); used for local runs and tests."""

    def __init__(self, session: Session | None = None):
        self.session = session

    def get_session(self) -> Session | None:
        return self.session


class InMemoryMessageStore:
    """Keeps appended records in a list instead of a database."""

    def __init__(self):
        self.records: list[dict] = []

    def append(self, content: str, role: Literal["user", "bot"], user_id: str | None = None) -> None:
        record = {"content": content, "role": role}
        if user_id is not None:
            record["user_id"] = user_id
        self.records.append(record)


def _headers(anon_key: str, access_token: str | None) -> dict[str, str]:
    return {
        "apikey": anon_key,
        "Authorization": f"Bearer {access_token or anon_key}",
    }


class SupabaseSessionProvider:
    """Looks up the user behind an access token via GoTrue's /auth/v1/user."""

    def __init__(self, url: str, anon_key: str, access_token: str | None = None):
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.access_token = access_token

    def get_session(self) -> Session | None:
        if not self.access_token:
            return None

        try:
            response = http_client.get(
                f"{self.url}/auth/v1/user",
                headers=_headers(self.anon_key, self.access_token),
            )
        except httpx.HTTPError as e:
            raise AuthRequired(f"Session lookup failed: {e}") from e

        if response.status_code in (401, 403):
            return None
        if not response.is_success:
            raise AuthRequired(f"Session lookup failed: {response.status_code}", response.status_code)

        try:
            user_id = response.json().get("id")
        except (ValueError, AttributeError) as e:
            raise AuthRequired("Session lookup returned an unexpected body") from e
        if not user_id:
            return None
        return Session(access_token=self.access_token, user_id=user_id)


class SupabaseMessageStore:
    """Append-only writes of `{content, role, user_id?}` rows."""

    def __init__(self, url: str, anon_key: str, access_token: str | None = None, table: str = "chat_messages"):
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.access_token = access_token
        self.table = table

    def append(self, content: str, role: Literal["user", "bot"], user_id: str | None = None) -> None:
        record = {"content": content, "role": role}
        if user_id is not None:
            record["user_id"] = user_id

        try:
            response = http_client.post(
                f"{self.url}/rest/v1/{self.table}",
                headers={
                    **_headers(self.anon_key, self.access_token),
                    "Content-Type": "application/json",
                    "Prefer": "return=minimal",
                },
                json=[record],
            )
        except httpx.HTTPError as e:
            raise PersistenceError(f"Failed to store {role} message: {e}") from e

        if not response.is_success:
            logger.error("Supabase insert failed %s: %s", response.status_code, response.text)
            raise PersistenceError(f"Failed to store {role} message", response.status_code)
