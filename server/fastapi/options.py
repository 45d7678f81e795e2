from models import Message

DEFAULT_OPTIONS = ["Tell me more", "What should I do next?", "Back to main menu"]

# Evaluated in order; the first keyword found in the user message wins
OPTION_RULES: list[tuple[str, list[str]]] = [
    ("flood risk", ["How can I prepare?", "Show emergency contacts", "Get local alerts"]),
    ("emergency", ["Call emergency services", "Evacuation guidelines", "Find shelter"]),
]


def select_options(user_message: str) -> list[str]:
    """Pick quick-reply labels by case-insensitive keyword match on the user message."""
    lowered = user_message.lower()
    for keyword, options in OPTION_RULES:
        if keyword in lowered:
            return list(options)
    return list(DEFAULT_OPTIONS)


def augment_reply(model_text: str, user_message: str) -> Message:
    """Wrap the model's text as a bot message with follow-up options attached."""
    return Message(role="bot", content=model_text, options=select_options(user_message))
