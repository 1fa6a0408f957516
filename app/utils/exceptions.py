import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.utils.response import error_response

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: str | None = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.field = field


class NotFoundError(AppException):
    def __init__(self, message: str = "Session not found"):
        super().__init__(message, status_code=404)


class UploadValidationError(AppException):
    def __init__(self, message: str, details: str, field: str | None = None):
        super().__init__(message, status_code=400, details=details, field=field)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, details=exc.details, field=exc.field),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
