from typing import Callable, List, Optional, Tuple

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException

from boardgames.logger import setup_logger


logger = setup_logger('errors')

ErrorResult = Tuple[int, str]

INTERNAL_ERROR_MESSAGE = 'Internal server error'
DATA_TYPE_MESSAGE = 'Value does not match expected data type'
UNKNOWN_ENDPOINT_MESSAGE = 'Endpoint does not exist'


class APIError(HTTPException):
    """Error raised by the application with a status and a client-facing message."""
    def __init__(self, status_code: int, msg: str):
        super().__init__(status_code=status_code, detail=msg)

    @property
    def msg(self) -> str:
        return self.detail


class ValidationError(APIError):
    """400 - malformed or missing client input"""
    def __init__(self, msg: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, msg)


class NotFoundError(APIError):
    """404 - referenced entity is absent"""
    def __init__(self, msg: str = 'Resource not found in the database'):
        super().__init__(status.HTTP_404_NOT_FOUND, msg)


# SQLSTATE codes from PostgreSQL, extended error names from SQLite
DATABASE_ERROR_MESSAGES = {
    '22P02': DATA_TYPE_MESSAGE,
    'SQLITE_MISMATCH': DATA_TYPE_MESSAGE,
    '23502': 'Expected value cannot be null',
    'SQLITE_CONSTRAINT_NOTNULL': 'Expected value cannot be null',
    '23503': 'Required value does not exist',
    'SQLITE_CONSTRAINT_FOREIGNKEY': 'Required value does not exist',
    '23505': 'Value already exists',
    'SQLITE_CONSTRAINT_PRIMARYKEY': 'Value already exists',
    'SQLITE_CONSTRAINT_UNIQUE': 'Value already exists',
}


def database_error_code(exc: DBAPIError) -> Optional[str]:
    original = getattr(exc, 'orig', None)
    for attribute in ('sqlstate', 'pgcode', 'sqlite_errorname'):
        code = getattr(original, attribute, None)
        if code:
            return code
    return None


def translate_api_error(exc: Exception) -> Optional[ErrorResult]:
    if isinstance(exc, APIError):
        return exc.status_code, exc.msg
    return None


def translate_database_error(exc: Exception) -> Optional[ErrorResult]:
    if not isinstance(exc, DBAPIError):
        return None

    message = DATABASE_ERROR_MESSAGES.get(database_error_code(exc))
    if message is None:
        return None
    return status.HTTP_400_BAD_REQUEST, message


ERROR_TRANSLATORS: List[Callable[[Exception], Optional[ErrorResult]]] = [
    translate_api_error,
    translate_database_error,
]


def translate_error(exc: Exception) -> ErrorResult:
    """Return the first translator answer, falling back to a 500."""
    for translator in ERROR_TRANSLATORS:
        result = translator(exc)
        if result is not None:
            return result

    logger.error(f"Unhandled error: {exc!r}", exc_info=exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE


def validation_error_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        context = error.get('ctx') or {}
        if error.get('type') == 'value_error' and 'error' in context:
            return str(context['error'])
    return DATA_TYPE_MESSAGE


async def translated_error_response(request: Request, exc: Exception) -> JSONResponse:
    status_code, msg = translate_error(exc)
    if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning(f"{request.method} {request.url.path} rejected with {status_code}: {msg}")
    return JSONResponse(status_code=status_code, content={'msg': msg})


async def validation_error_response(request: Request, exc: RequestValidationError) -> JSONResponse:
    msg = validation_error_message(exc)
    logger.warning(f"{request.method} {request.url.path} failed validation: {msg}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'msg': msg})


async def http_error_response(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        msg = UNKNOWN_ENDPOINT_MESSAGE
    else:
        msg = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={'msg': msg},
        headers=getattr(exc, 'headers', None)
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, translated_error_response)
    app.add_exception_handler(DBAPIError, translated_error_response)
    app.add_exception_handler(RequestValidationError, validation_error_response)
    app.add_exception_handler(StarletteHTTPException, http_error_response)
    app.add_exception_handler(Exception, translated_error_response)
