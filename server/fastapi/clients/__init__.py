from .supabase import (
    Session,
    SessionProvider,
    MessageStore,
    StaticSessionProvider,
    InMemoryMessageStore,
    SupabaseSessionProvider,
    SupabaseMessageStore,
)
from .chat_function import ChatFunctionClient

__all__ = [
    "Session",
    "SessionProvider",
    "MessageStore",
    "StaticSessionProvider",
    "InMemoryMessageStore",
    "SupabaseSessionProvider",
    "SupabaseMessageStore",
    "ChatFunctionClient",
]
