from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from news_pipeline.errors import ConfigurationError, ValidationError

from . import config
from .pipeline import get_personalized_news
from .response_formatter import format_error

app = FastAPI(title="Personalized News API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


async def _read_payload(request: Request):
    try:
        return await request.json()
    except ValueError:
        return None


@app.post("/getNews")
async def get_news(request: Request):
    """
    Callable-style entry point. Always answers 200; failures are reported
    inside the envelope.
    """
    data = await _read_payload(request)
    try:
        return await get_personalized_news(data, config.get_api_keys())
    except ValidationError as e:
        return format_error(str(e))
    except ConfigurationError:
        return format_error("News API is not configured. Please contact administrator.")
    except Exception as e:
        print(f"[ERROR] Unexpected error in getNews: {e}")
        return format_error("An unexpected error occurred. Please try again later.")


@app.post("/getNewsHttp")
async def get_news_http(request: Request):
    """
    REST entry point for curl/Postman: 400 for a bad payload, 500 for
    configuration problems or anything unexpected.
    """
    data = await _read_payload(request)
    try:
        return await get_personalized_news(data, config.get_api_keys())
    except ValidationError as e:
        return JSONResponse(format_error(str(e)), status_code=400)
    except ConfigurationError:
        return JSONResponse(format_error("News API is not configured."), status_code=500)
    except Exception as e:
        print(f"[ERROR] Error in getNewsHttp: {e}")
        return JSONResponse(format_error("An unexpected error occurred."), status_code=500)
