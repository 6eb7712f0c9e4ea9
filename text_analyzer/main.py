import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from text_analyzer import __version__
from text_analyzer.config import Settings, get_settings
from text_analyzer.logging_config import setup_logging
from text_analyzer.messages import error_message
from text_analyzer.routes.analyze import router as analyze_router
from text_analyzer.routes.health import router as health_router
from text_analyzer.services.analyzer import TextAnalyzer

logger = logging.getLogger(__name__)

USAGE_TEXT = """Text Analyzer API

Endpoint: POST /api/analyze

Body: {"text": "...", "delimiter": "optional literal sentence delimiter"}

Example with curl:
curl -X POST http://localhost:%(port)d/api/analyze \\
  -H "Content-Type: application/json" \\
  -d '{"text":"Hello, world! This is a sample text."}'
"""


def _validation_message(exc: RequestValidationError, locale: str) -> str:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return error_message("invalid_json", locale)
    if not errors:
        return error_message("invalid_body", locale)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    if not location:
        # the body as a whole was not an object, e.g. a non-JSON content type
        return error_message("invalid_body", locale)
    return f"{location}: {message}"


# -----------------------------
# Exception handlers
# -----------------------------
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = _validation_message(exc, request.app.state.settings.locale)
    logger.warning("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


# -----------------------------
# Application factory
# -----------------------------
def create_app(settings: Optional[Settings] = None, configure_logging: bool = True) -> FastAPI:
    """
    Build the FastAPI application. The analyzer is constructed once here and
    handed to the routes through app.state.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_dir, settings.log_level)

    app = FastAPI(
        title="Text Analyzer API",
        description="Character, word and sentence counts, top words and reading time for a block of text.",
        version=__version__,
    )
    app.state.settings = settings
    app.state.analyzer = TextAnalyzer(settings.analyzer_config())

    # Register routers
    app.include_router(analyze_router, prefix="/api", tags=["Analysis"])
    app.include_router(health_router, prefix="/health", tags=["General"])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # --- Usage page ---
    @app.get("/", response_class=PlainTextResponse, tags=["General"])
    def read_root():
        """Plain-text description of the API."""
        return USAGE_TEXT % {"port": settings.port}

    logger.info(
        "Text analyzer configured: reading_model=%s locale=%s top_n=%d shape=%s",
        settings.reading_model, settings.locale, settings.top_n, settings.frequent_words_shape,
    )
    return app
