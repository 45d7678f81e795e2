"""Nova chat widget controller.

Holds the view state of the chat widget (message log, busy flag, open state,
location) and runs a turn: session check, persistence, handler call. Rendering
is left to the host; notifications go through the injected `notify` callback.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Literal

from clients import ChatFunctionClient, MessageStore, SessionProvider
from config import CONTEXT_WINDOW, GENERIC_ERROR_MESSAGE
from errors import AuthRequired, GeolocationError, NovaError
from models import DEFAULT_LOCATION, Coordinates, Location, Message

logger = logging.getLogger(__name__)

NOTICE_DURATION_MS = 3000

GREETING = Message(
    role="bot",
    content="Hi! I'm Nova, your flood awareness assistant. How can I help you today?",
    options=[
        "Learn about flood risks",
        "Check emergency preparedness",
        "Get local flood alerts",
        "Post-flood recovery help",
        "Set my location",
    ],
)

SPELLING_NOTICE = "I've corrected some spelling to better understand your question."
SIGN_IN_NOTICE = "Please sign in to send messages."


@dataclass(frozen=True)
class Notice:
    description: str
    variant: Literal["default", "destructive"] = "default"
    duration_ms: int = NOTICE_DURATION_MS


@dataclass(frozen=True)
class TurnResult:
    reply: Message | None = None
    error: NovaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _identity(text: str) -> str:
    return text


class NovaChat:
    def __init__(
        self,
        session_provider: SessionProvider,
        store: MessageStore,
        chat_client: ChatFunctionClient,
        notify: Callable[[Notice], None],
        autocorrect: Callable[[str], str] = _identity,
        location: Location = DEFAULT_LOCATION,
        context_window: int = CONTEXT_WINDOW,
        full_screen: bool = False,
    ):
        self.session_provider = session_provider
        self.store = store
        self.chat_client = chat_client
        self.notify = notify
        self.autocorrect = autocorrect
        self.location = location
        self.context_window = context_window
        self.full_screen = full_screen

        self.messages: list[Message] = [GREETING]
        self.is_loading = False
        self.is_open = full_screen

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        if not self.full_screen:
            self.is_open = False

    def recent_messages(self) -> list[Message]:
        if self.context_window <= 0:
            return []
        return self.messages[-self.context_window:]

    def request_location(self, locate: Callable[[], tuple[float, float]] | None = None) -> None:
        """Update coordinates from the device, keeping the default on failure."""
        if locate is None:
            return

        try:
            latitude, longitude = locate()
        except GeolocationError as e:
            logger.info("Geolocation unavailable: %s", e.message)
            self.notify(Notice(
                f"Unable to access location. Using default {self.location.city} location.",
                variant="destructive",
            ))
            return

        self.location = self.location.model_copy(
            update={"coordinates": Coordinates(latitude=latitude, longitude=longitude)}
        )
        self.notify(Notice(f"Location updated to {self.location.city}, {self.location.state}"))

    def send(self, text: str) -> TurnResult | None:
        """Autocorrect and send typed input. Ignored when blank or busy."""
        if not text.strip() or self.is_loading:
            return None

        corrected = self.autocorrect(text)
        if corrected != text:
            self.notify(Notice(SPELLING_NOTICE))

        return self.handle_response(corrected)

    def select_option(self, option: str) -> TurnResult | None:
        """Send a quick-reply label as the user's next message. Ignored when busy."""
        return self.handle_response(option)

    def handle_response(self, user_message: str) -> TurnResult | None:
        """Run one turn. Failures become a notice; nothing is rolled back.

        Returns None without side effects while another turn is in flight.
        """
        if self.is_loading:
            return None

        self.is_loading = True
        try:
            session = self.session_provider.get_session()
            if session is None:
                self.notify(Notice(SIGN_IN_NOTICE, variant="destructive"))
                return TurnResult(error=AuthRequired())

            self.store.append(user_message, "user", user_id=session.user_id)

            reply = self.chat_client.invoke(user_message, self.recent_messages(), self.location)

            self.store.append(reply.content, "bot")

            self.messages.extend([Message(role="user", content=user_message), reply])
            return TurnResult(reply=reply)
        except NovaError as e:
            logger.error("Chat turn failed (%s): %s", type(e).__name__, e.message)
            self.notify(Notice(GENERIC_ERROR_MESSAGE, variant="destructive"))
            return TurnResult(error=e)
        finally:
            self.is_loading = False
