"""
Adapters pour la persistance des donnees.

Ce module expose le DatabaseManager, les modeles et les repositories
SQLAlchemy de l'architecture hexagonale.
"""

from portal.infrastructure.persistence.database import DatabaseManager
from portal.infrastructure.persistence.models import (
    Base,
    ContributorModel,
    ProductModel,
)
from portal.infrastructure.persistence.seed import seed_database
from portal.infrastructure.persistence.sqlalchemy_contributor_repository import (
    SqlAlchemyContributorRepository,
)
from portal.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)

__all__ = [
    # Core
    "Base",
    "DatabaseManager",
    "seed_database",
    # Models
    "ContributorModel",
    "ProductModel",
    # Repositories
    "SqlAlchemyContributorRepository",
    "SqlAlchemyProductRepository",
]
