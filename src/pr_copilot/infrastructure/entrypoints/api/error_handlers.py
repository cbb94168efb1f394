import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError

logger = structlog.get_logger()


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(PrCopilotError)
    async def pr_copilot_error_handler(request: Request, exc: PrCopilotError) -> JSONResponse:
        logger.error(
            "Diff analysis failed",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_code=exc.error_code,
            error_details=str(exc),
            http_status=exc.status_code,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "error": exc.error_code, "message": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Invalid request", error_details=str(exc.errors()))
        return JSONResponse(
            status_code=422,
            content={"status": "error", "error": "ValidationError", "detail": _jsonable_errors(exc)},
        )


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
