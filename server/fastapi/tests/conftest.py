import httpx
import pytest

from clients import InMemoryMessageStore, Session, StaticSessionProvider
from models import Message


class FakeNotifier:
    """Captures widget notices for assertion."""

    def __init__(self):
        self.notices = []

    def __call__(self, notice):
        self.notices.append(notice)

    def descriptions(self) -> list[str]:
        return [n.description for n in self.notices]


class FakeChatClient:
    """Stands in for the chat handler; records calls, replies or raises."""

    def __init__(self, reply: Message | None = None, error: Exception | None = None):
        self.reply = reply or Message(role="bot", content="Stay safe.", options=["Tell me more"])
        self.error = error
        self.calls = []

    def invoke(self, message, context, location=None):
        self.calls.append({"message": message, "context": list(context), "location": location})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def store():
    return InMemoryMessageStore()


@pytest.fixture
def session():
    return Session(access_token="token-123", user_id="user-1")


@pytest.fixture
def session_provider(session):
    return StaticSessionProvider(session)


@pytest.fixture
def chat_client():
    return FakeChatClient()


@pytest.fixture
def deepseek_key(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-test")


def make_history(*pairs: tuple[str, str]) -> list[Message]:
    """Helper to build a message list from (role, content) pairs."""
    return [Message(role=role, content=content) for role, content in pairs]


def completion_response(content="Move to higher ground.", status_code=200) -> httpx.Response:
    """Helper to create a chat-completion response body."""
    return httpx.Response(
        status_code,
        json={"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]},
    )
