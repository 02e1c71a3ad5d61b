# store_backend/main.py

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_backend.api.api import api_router
from store_backend.api.routes_root import router as root_router
from store_backend.core.config import Settings, get_settings
from store_backend.core.exceptions import DatabaseUnavailable
from store_backend.core.logging import configure_logging
from store_backend.db.gateway import DatabaseGateway
from store_backend.db.init_db import init_db

logger = logging.getLogger(__name__)

# Unparseable input answers the way a failed statement would on that route;
# keyed by route name
INVALID_REQUEST_RESPONSES = {
    "signup": (400, "Username already exists"),
    "login": (401, "Invalid credentials"),
    "update_user": (500, "Error updating user"),
    "delete_user": (500, "Error deleting user"),
    "add_product": (500, "Error adding product"),
    "update_product": (500, "Error updating product"),
    "delete_product": (500, "Error deleting product"),
}
DEFAULT_INVALID_REQUEST_RESPONSE = (400, "Invalid request")


def create_application(
    settings: Optional[Settings] = None,
    gateway: Optional[DatabaseGateway] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    gateway = gateway or DatabaseGateway.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # No retry: an unreachable database at startup stops the process
        try:
            gateway.connect()
        except DatabaseUnavailable:
            logger.critical("Error connecting to the database", exc_info=True)
            raise
        if settings.auto_create_tables:
            init_db(gateway.engine)
        logger.info("Server running on http://localhost:%s", settings.port)
        yield
        gateway.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.gateway = gateway
    app.state.settings = settings

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    # Clients only ever get the short message, as plain text
    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_exception(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def plain_text_validation_error(request: Request, exc: RequestValidationError):
        route = request.scope.get("route")
        status_code, message = INVALID_REQUEST_RESPONSES.get(
            getattr(route, "name", None), DEFAULT_INVALID_REQUEST_RESPONSE
        )
        logger.warning(
            "Rejected %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return PlainTextResponse(message, status_code=status_code)

    # ---------- ROUTERS ----------
    app.include_router(root_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_application()


def main() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = app.state.settings
    # Check before handing over to uvicorn, which would exit with its own status
    try:
        app.state.gateway.connect()
    except DatabaseUnavailable:
        logger.critical("Error connecting to the database", exc_info=True)
        sys.exit(1)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
