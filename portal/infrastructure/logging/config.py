"""
Logging Config - structlog pour l'API.

Responsabilite unique:
----------------------
Installer un handler unique sur le logger racine: les logs structlog
du portail et les logs stdlib (uvicorn, sqlalchemy) passent par le
meme rendu.

Rendu:
------
- json_logs=False: console lisible (couleurs si terminal)
- json_logs=True: une ligne JSON par evenement, horodatage UTC

Usage:
------
    from portal.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True, log_level="WARNING")
    logger = get_logger("portal")
    logger.info("contributor_created", contributor_id=1)
"""

import logging
import sys
import time
from typing import Optional
from uuid import uuid4

import structlog

REQUEST_ID_HEADER = "x-request-id"

# Loggers tiers qui installent leurs propres handlers
_THIRD_PARTY_LOGGERS = ("uvicorn", "uvicorn.error", "sqlalchemy.engine")


def _pre_chain() -> list:
    """Processors communs a structlog et aux records stdlib."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def _build_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        final = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final = [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
    )


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog et le logger racine.

    Peut etre appele plusieurs fois (une par create_app): le handler
    precedent est remplace.

    Args:
        json_logs: Rendu JSON (production) au lieu de la console.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(json_logs))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in _THIRD_PARTY_LOGGERS:
        third_party = logging.getLogger(name)
        third_party.handlers.clear()
        third_party.propagate = True
    # Doublon avec RequestLogger
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Retourne un logger structure (nom du module en general)."""
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging pour FastAPI (dispatch de BaseHTTPMiddleware).

    Lie le contexte de la requete (request_id, methode, chemin, IP)
    a structlog, log la duree et le statut, et renvoie l'ID de requete
    dans l'en-tete X-Request-ID.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("portal.requests")

    async def __call__(self, request, call_next):
        """Log la requete et la reponse."""
        start_time = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=self._elapsed_ms(start_time),
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=self._elapsed_ms(start_time),
        )
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)
