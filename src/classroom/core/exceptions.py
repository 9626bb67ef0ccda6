"""Domain exceptions and handlers that include request_id in responses."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.classroom.core.logging import get_logger
from src.classroom.core.violations import ValidationResult, Violation
from src.classroom.schemas import ValidationErrorResponse, ViolationRead

logger = get_logger(__name__)


class AssignmentValidationError(Exception):
    """Raised by the service layer when an assignment fails validation.

    Nothing has been written when this is raised.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(
            "Assignment is invalid: " + "; ".join(v.full_message for v in result.violations)
        )

    @property
    def violations(self) -> list[Violation]:
        return self.result.violations


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(AssignmentValidationError)
    async def assignment_validation_handler(
        request: Request, exc: AssignmentValidationError
    ) -> JSONResponse:
        body = ValidationErrorResponse(
            errors=[ViolationRead.from_violation(v) for v in exc.violations],
            request_id=correlation_id.get(),
        )
        return JSONResponse(
            status_code=422,
            content=body.model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "detail": jsonable_encoder(exc.errors()),
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
