import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import CONTEXT_WINDOW, CORS_ALLOW_HEADERS, GENERIC_ERROR_MESSAGE, LOG_LEVEL
from graph import graph
from models import DEFAULT_LOCATION, ChatRequest, ErrorResponse, Message

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper())


configure_logging()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}

app = FastAPI(
    title="Nova API",
    description="Flood awareness assistant backend for Nova",
    version="0.1.0",
)

# Permissive CORS; the widget is embedded on arbitrary origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


# Registered after CORSMiddleware so it runs first: every OPTIONS request,
# preflight or not, gets an empty body with the CORS headers and stops here.
@app.middleware("http")
async def answer_options(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    return await call_next(request)


# --- Endpoints ---


@app.get("/")
async def root():
    return {"message": "Hello from Nova API"}


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post(
    "/chat",
    response_model=Message,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def chat(request: ChatRequest):
    """Answer one user turn with a bot message and quick-reply options."""
    history = request.context[-CONTEXT_WINDOW:] if CONTEXT_WINDOW > 0 else []
    logger.info("Received message: %r (context: %d messages)", request.message, len(history))

    try:
        result = graph.invoke({
            "message": request.message,
            "history": history,
            "location": request.location or DEFAULT_LOCATION,
        })
    except Exception:
        logger.exception("Error in chat turn")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})

    return result["reply"]
