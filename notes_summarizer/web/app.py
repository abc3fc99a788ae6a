"""
FastAPI Application Factory

Creates and configures the FastAPI web application with all routers and middleware.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
import uvicorn

from ..core.config import ConfigManager, get_config
from ..core.logging_config import setup_logging
from ..utils.validators import is_flagged_recipient


logger = logging.getLogger(__name__)

# Rate limiter instance (shared across routes)
limiter = Limiter(key_func=get_remote_address)

RELAY_RATE_LIMIT = "30/minute"
PAGE_RATE_LIMIT = "60/minute"


def create_app(config: Optional[ConfigManager] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        config: Configuration to inject (default: global ConfigManager)

    Returns:
        Configured FastAPI app
    """
    config = config or get_config()

    app = FastAPI(
        title="AI Meeting Notes Summarizer",
        description="Summarize meeting transcripts with an LLM and email the result",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc"
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    web_dir = Path(__file__).parent
    templates = Jinja2Templates(directory=str(web_dir / "templates"))
    templates.env.globals["is_flagged_recipient"] = is_flagged_recipient
    app.state.templates = templates

    app.mount("/static", StaticFiles(directory=str(web_dir / "static")), name="static")

    # Store config in app state
    app.state.config = config

    for problem in config.validate():
        logger.warning(f"Configuration problem: {problem}")

    # Register routers (imported here to avoid circular imports)
    from .routers import api, health, page

    app.include_router(page.router, tags=["Page"])
    app.include_router(api.router, prefix="/api", tags=["Relays"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    # Malformed relay bodies answer with the relay's {"error": ...} shape
    app.add_exception_handler(RequestValidationError, api.relay_validation_error_handler)

    logger.info("FastAPI application created successfully")

    return app


def run_server(host: str = "0.0.0.0", port: int = 8000):
    """
    Run the FastAPI server using uvicorn.

    Args:
        host: Host to bind to
        port: Port to bind to
    """
    config = get_config()
    setup_logging(config.app)

    logger.info(f"Starting web server on {host}:{port}")

    app = create_app(config)

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info"
    )


if __name__ == "__main__":
    run_server()
