from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)

ANIMAL_NOT_FOUND = 'Animal not found'
INVALID_ID_FORMAT = 'Invalid ID format'


def not_found_exception(detail: str = ANIMAL_NOT_FOUND) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def bad_request_exception(detail: str = 'Bad request') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def invalid_id_exception() -> HTTPException:
    return bad_request_exception(INVALID_ID_FORMAT)


def internal_server_error_exception(detail: str = 'Internal server error') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


def error_body(message) -> dict:
    return {'error': str(message)}


def register_exception_handlers(app: FastAPI):
    """Every per-request failure leaves the app as ``{"error": <message>}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.detail),
                            headers=getattr(exc, 'headers', None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request on {request.url.path}: {exc.errors()}")
        messages = [e.get('msg', 'Invalid request') for e in exc.errors()]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                            content=error_body('; '.join(messages) or 'Invalid request body'))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content=error_body('Internal server error'))
