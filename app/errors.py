from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
import logging
from urllib.parse import quote

from app.config import ADMIN_LOGIN_PATH
from app.apps.admin.dependencies import AdminSessionRequired
from app.apps.backend.exceptions import (
    BackendAPIError,
    BackendAuthError,
    BackendDecodeError,
    BackendTransportError,
)

logger = logging.getLogger(__name__)


def _login_redirect(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=f"{ADMIN_LOGIN_PATH}?next={quote(request.url.path)}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


def register_error_handlers(app: FastAPI):
    @app.exception_handler(AdminSessionRequired)
    async def handle_missing_session(request: Request, error: AdminSessionRequired):
        return _login_redirect(request)

    @app.exception_handler(BackendAuthError)
    async def handle_backend_auth(request: Request, error: BackendAuthError):
        logger.warning(f"Backend rejected admin token on {request.url.path} ({error.status_code})")
        return _login_redirect(request)

    @app.exception_handler(BackendAPIError)
    async def handle_backend_error(request: Request, error: BackendAPIError):
        logger.error(f"Unhandled backend error on {request.url.path}: {error}")
        if isinstance(error, (BackendTransportError, BackendDecodeError)) or not error.status_code:
            status_code = status.HTTP_502_BAD_GATEWAY
        else:
            status_code = error.status_code
        return JSONResponse(
            {"success": False, "message": error.message},
            status_code=status_code,
        )
