from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from review_widget.core.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


class ReviewNotFoundError(LookupError):
    """Raised by a store when an operation targets an unknown review id."""

    def __init__(self, review_id: str):
        super().__init__(review_id)
        self.review_id = review_id


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        message = err.get("msg", "Invalid value")
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": ".".join(loc), "message": message})
    return errors


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    from_body = any((err.get("loc") or ("",))[0] == "body" for err in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid review data" if from_body else "Invalid request parameters",
            "errors": _field_errors(exc),
        },
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    add_context(method=request.method, path=request.url.path)
    try:
        logger.error("unhandled_error", exc_info=exc)
    finally:
        clear_context()
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
