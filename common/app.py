"""FastAPI application factory with health endpoint and logging configured."""

from typing import Any

import fastapi

import common.log
import common.settings

_health_router = fastapi.APIRouter()


@_health_router.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {'status': 'healthy'}


def create_app(title: str, **kwargs: Any) -> fastapi.FastAPI:
    """Create a FastAPI app with health endpoint and logging configured.

    Additional keyword arguments are forwarded to FastAPI.__init__ (e.g. lifespan).
    """
    app = fastapi.FastAPI(title=title, **kwargs)
    common.log.configure_logging(common.settings.LOG_LEVEL)
    app.include_router(_health_router)
    return app
