"""Глобальные обработчики ошибок: единый конверт {success: false, message, errors?}"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Регистрация обработчиков ошибок приложения"""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
            message = "Route not found"
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": message},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = _field_errors(exc)
        logger.warning("Validation error", extra={"path": request.url.path, "method": request.method})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Validation errors", "errors": errors},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # Детали ошибки только в лог
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": SERVER_ERROR},
        )


def _field_errors(exc: RequestValidationError) -> list:
    """Ошибки по полям; сообщения собственных валидаторов без префикса pydantic"""
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        ctx_error = (error.get("ctx") or {}).get("error")
        message = str(ctx_error) if isinstance(ctx_error, ValueError) else error.get("msg")
        errors.append({"field": ".".join(location), "message": message})
    return errors
