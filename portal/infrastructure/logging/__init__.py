"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from portal.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("contributor_updated", contributor_id=3)
"""

from portal.infrastructure.logging.config import (
    RequestLogger,
    configure_logging,
    get_logger,
)

__all__ = ["configure_logging", "get_logger", "RequestLogger"]
