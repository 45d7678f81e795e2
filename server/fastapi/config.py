import os
from dotenv import load_dotenv

load_dotenv()

# Chat-completion endpoint
DEEPSEEK_API_URL = os.environ.get("DEEPSEEK_API_URL", "https://api.deepseek.com/v1/chat/completions")
MODEL = os.environ.get("NOVA_MODEL", "deepseek-chat")
TEMPERATURE = float(os.environ.get("NOVA_TEMPERATURE", "0.7"))
MAX_TOKENS = int(os.environ.get("NOVA_MAX_TOKENS", "1000"))
REQUEST_TIMEOUT = float(os.environ.get("NOVA_REQUEST_TIMEOUT", "30"))

# Widget -> chat handler call; covers the handler's own model call
CHAT_FUNCTION_TIMEOUT = float(os.environ.get("NOVA_CHAT_FUNCTION_TIMEOUT", "60"))

# Number of prior messages sent with each turn
CONTEXT_WINDOW = int(os.environ.get("NOVA_CONTEXT_WINDOW", "5"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Backend-as-a-service (auth + message persistence)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

GENERIC_ERROR_MESSAGE = "Failed to get response. Please try again."
