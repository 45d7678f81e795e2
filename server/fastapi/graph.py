from typing_extensions import TypedDict

from langgraph.graph import StateGraph, START, END

from context import build_context
from llm import complete_chat
from models import Location, Message, RoleContent
from options import augment_reply


class State(TypedDict, total=False):
    """State schema for one chat turn."""
    message: str
    history: list[Message]
    location: Location
    context: list[RoleContent]
    reply_text: str
    reply: Message


def preprocessor(state: State):
    """Build the model input from the history window and the new message."""
    return {"context": build_context(state["history"], state["message"], state["location"])}


def chatbot(state: State):
    """Call the chat-completion endpoint with the built context."""
    return {"reply_text": complete_chat(state["context"])}


def augmenter(state: State):
    """Attach quick-reply options chosen from the user message."""
    return {"reply": augment_reply(state["reply_text"], state["message"])}


# Build the graph
graph_builder = StateGraph(State)
graph_builder.add_node("preprocessor", preprocessor)
graph_builder.add_node("chatbot", chatbot)
graph_builder.add_node("augmenter", augmenter)

graph_builder.add_edge(START, "preprocessor")
graph_builder.add_edge("preprocessor", "chatbot")
graph_builder.add_edge("chatbot", "augmenter")
graph_builder.add_edge("augmenter", END)

graph = graph_builder.compile()
