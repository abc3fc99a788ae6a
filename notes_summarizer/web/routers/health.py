"""
Health Check Router

System health monitoring endpoints.
"""

from datetime import datetime

from fastapi import APIRouter, Request


router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """
    Basic health check.

    Reports whether each provider has credentials configured; providers
    are never contacted.
    """
    config = request.app.state.config
    problems = config.validate()

    return {
        "status": "healthy" if not problems else "degraded",
        "timestamp": datetime.now().isoformat(),
        "service": "meeting-notes-summarizer",
        "components": {
            "completion_api": "configured" if config.completion.api_key else "not_configured",
            "email": "configured" if config.email.user and config.email.password else "not_configured",
        },
    }
