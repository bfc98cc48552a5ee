"""
HTTP mapping of the engine's error taxonomy

ValidationError / DomainError -> 400, NotFoundError -> 404, ConflictError -> 409
(seat conflicts list the contested seats), StorageError -> 503 with Retry-After,
anything unexpected -> 500 without internals.
"""

from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import ConflictError, CustomBaseError, StorageError
from src.platform.logging.loguru_io import Logger

ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

STORAGE_RETRY_AFTER_SECONDS = 5


def _request_line(request: Request) -> str:
    return f'{request.method} {request.url.path}'


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    headers: dict[str, str] | None = None

    if isinstance(error, StorageError):
        headers = {'Retry-After': str(STORAGE_RETRY_AFTER_SECONDS)}
        Logger.base.error(
            f'🗄️ [HTTP] {_request_line(request)} storage failure: {error.message}'
        )
    elif error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        Logger.base.error(f'💥 [HTTP] {_request_line(request)} {type(error).__name__}: {error}')
    elif isinstance(error, ConflictError):
        Logger.base.info(f'🔒 [HTTP] {_request_line(request)} conflict: {error.message}')

    return JSONResponse(status_code=error.status_code, content=error.to_detail(), headers=headers)


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Malformed payloads are client errors, same as a rejected seat request
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': jsonable_encoder(error.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'💥 [HTTP] {_request_line(request)} unhandled {type(exc).__name__}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: unhandled_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
