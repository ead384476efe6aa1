"""
cosme-review-api/api/errors.py
Correspondance unique erreurs du domaine -> réponses HTTP
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.errors import (
    DomainError, ValidationError, UnauthorizedError, ForbiddenError,
    NotFoundError, InternalError
)

logger = logging.getLogger(__name__)

# Ordre significatif : la première classe parente trouvée l'emporte
ERROR_STATUS_CODES = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

# Emplacements ajoutés par FastAPI en tête de loc
_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def status_code_for(exc: DomainError) -> int:
    """Code HTTP associé à une erreur du domaine"""
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(exc: DomainError) -> Dict[str, Any]:
    """{message, cause?} ou {message, error:{name, issues}} pour les 400"""
    if isinstance(exc, ValidationError):
        return {
            "message": exc.message,
            "error": {
                "name": type(exc).__name__,
                "issues": exc.issues
            }
        }

    body = {"message": exc.message}
    if exc.cause and not isinstance(exc, InternalError):
        body["cause"] = exc.cause
    return body


def error_response(exc: DomainError) -> JSONResponse:
    status_code = status_code_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=error_body(exc), headers=headers)


def request_validation_issues(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Convertit les erreurs pydantic en issues {code, path, message}"""
    issues = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        issues.append({
            "code": error.get("type", "invalid"),
            "path": [str(part) for part in loc],
            "message": error.get("msg", "Invalid value")
        })
    return issues


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {status_code}: {exc.message} ({exc.cause})")
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return error_response(exc)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> 400: invalid request")
    error = ValidationError("Invalid input", issues=request_validation_issues(exc))
    body = error_body(error)
    body["error"]["name"] = "RequestValidationError"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre la correspondance erreurs -> HTTP sur l'application"""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
