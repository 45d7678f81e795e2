from models import DEFAULT_LOCATION, Location, Message, RoleContent

SYSTEM_PROMPT = """You are Nova, a flood awareness and emergency response assistant. Your primary goal is to help users with:
1. Understanding flood risks and types
2. Emergency preparedness
3. Local flood alerts and warnings
4. Post-flood recovery guidance
5. Emergency contacts and resources

Keep responses concise, practical, and focused on flood-related information. Always maintain a helpful and reassuring tone.

Current location context: {city}, {state}, {country}
Emergency contacts:
- Police: {police}
- Flood Control: {flood_control}
- Emergency Services: {emergency_services}"""

ROLE_MAP = {"user": "user", "bot": "assistant"}


def render_system_prompt(location: Location = DEFAULT_LOCATION) -> str:
    """Fill the system directive with the location's name and emergency contacts."""
    contacts = location.emergency_contacts
    return SYSTEM_PROMPT.format(
        city=location.city,
        state=location.state,
        country=location.country,
        police=contacts.police,
        flood_control=contacts.flood_control,
        emergency_services=contacts.emergency_services,
    )


def build_context(
    history: list[Message],
    message: str,
    location: Location = DEFAULT_LOCATION,
) -> list[RoleContent]:
    """Build the model input for one turn.

    Returns the system directive, then each history entry with its role mapped
    (user -> user, bot -> assistant) and options dropped, then the new user
    message. The caller is responsible for limiting `history`.
    """
    context: list[RoleContent] = [{"role": "system", "content": render_system_prompt(location)}]
    for msg in history:
        context.append({"role": ROLE_MAP[msg.role], "content": msg.content})
    context.append({"role": "user", "content": message})
    return context
