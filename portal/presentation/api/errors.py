"""
Errors - Traduction des erreurs en reponses HTTP.

Responsabilite unique:
----------------------
- Convertir un Result en echec en HTTPException (404, 400)
- Enregistrer les handlers globaux de l'application

Politique:
----------
- Result NOT_FOUND -> 404
- Result INVALID -> 400
- DomainException non geree -> 400 (404 pour EntityNotFoundError)
- Toute autre exception -> 500 avec le message de l'exception

Limite:
-------
Starlette execute le handler `Exception` dans ServerErrorMiddleware,
la couche la plus externe. Les reponses 500 ne passent donc ni par
RequestLogger ni par CORSMiddleware: pas d'en-tete X-Request-ID ni
d'en-tetes CORS. L'erreur reste tracee par `request_failed`.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from portal.application.result import Result, ResultStatus
from portal.domain.exceptions import DomainException, EntityNotFoundError
from portal.infrastructure.logging import get_logger

logger = get_logger(__name__)

_FAILURE_STATUS_CODES = {
    ResultStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultStatus.INVALID: status.HTTP_400_BAD_REQUEST,
}


def raise_for_result(result: Result) -> None:
    """
    Leve une HTTPException si le Result est un echec.

    Args:
        result: Result retourne par un use case.

    Raises:
        HTTPException: 404 ou 400 selon le statut.
    """
    if result.is_success:
        return

    raise HTTPException(
        status_code=_FAILURE_STATUS_CODES.get(
            result.status, status.HTTP_400_BAD_REQUEST
        ),
        detail="; ".join(result.errors) or result.status.value,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers d'exceptions globaux."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        """Erreur metier non traduite par un use case."""
        status_code = (
            status.HTTP_404_NOT_FOUND
            if isinstance(exc, EntityNotFoundError)
            else status.HTTP_400_BAD_REQUEST
        )
        logger.warning("domain_error", code=exc.code, error=exc.message)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": exc.code},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Catch-all: toute exception non geree devient une 500."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "error_type": type(exc).__name__},
        )
