from pydantic import BaseModel, ConfigDict, Field
from typing import Literal
from typing_extensions import TypedDict


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class EmergencyContacts(BaseModel):
    police: str
    flood_control: str
    emergency_services: str


class Location(BaseModel):
    city: str
    state: str
    country: str
    emergency_contacts: EmergencyContacts
    coordinates: Coordinates | None = None  # Optional device geolocation


DEFAULT_LOCATION = Location(
    city="Chennai",
    state="Tamil Nadu",
    country="India",
    emergency_contacts=EmergencyContacts(
        police="100",
        flood_control="1913",
        emergency_services="108",
    ),
)


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "bot"]
    content: str
    options: list[str] | None = None  # Quick-reply labels (bot messages only)


class RoleContent(TypedDict):
    """One entry of the chat-completion `messages` array."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    message: str = Field(min_length=1)
    context: list[Message] = []  # Recent conversation window
    location: Location | None = None


class ErrorResponse(BaseModel):
    error: str
