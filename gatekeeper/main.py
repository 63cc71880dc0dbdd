"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gatekeeper.api import router
from gatekeeper.core.config import settings
from gatekeeper.core.errors import Forbidden, GatekeeperError, Unauthorized, ValidationError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Gatekeeper API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


def status_for(exc: GatekeeperError) -> int:
    """HTTP status for a domain error; auth failures collapse to 500 unless STRICT_AUTH_STATUS."""
    if isinstance(exc, (Unauthorized, Forbidden)) and not settings.STRICT_AUTH_STATUS:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return exc.status_code


@app.exception_handler(GatekeeperError)
async def gatekeeper_error_handler(request: Request, exc: GatekeeperError) -> JSONResponse:
    code = status_for(exc)
    body: dict = {"detail": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    headers = None
    if isinstance(exc, Unauthorized) and code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    logger.debug("%s %s -> %s (%s)", request.method, request.url.path, code, type(exc).__name__)
    return JSONResponse(status_code=code, content=body, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Report unsupported methods on known routes as 404, like unknown routes."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})
    return await http_exception_handler(request, exc)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Gatekeeper API"}
