import os
from dotenv import load_dotenv

load_dotenv(os.getenv("ENV_FILE", ".env"))


def _positive_int(name, default):
    try:
        value = int(os.getenv(name, ""))
    except ValueError:
        return default
    return value if value > 0 else default


NEWS_PROVIDER = os.getenv("NEWS_PROVIDER", "gnews")
NEWS_QUERY_LIMIT = _positive_int("NEWS_QUERY_LIMIT", 5)
NEWS_MAX_RESULTS_PER_QUERY = _positive_int("NEWS_MAX_RESULTS_PER_QUERY", 3)
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]


def get_api_keys():
    """
    Reads the API keys on every call so a rotated key needs no restart.
    The OpenAI key is optional and switches summarization on.
    """
    return {
        "newsApiKey": os.getenv("NEWS_API_KEY"),
        "openaiApiKey": os.getenv("OPENAI_API_KEY"),
    }
