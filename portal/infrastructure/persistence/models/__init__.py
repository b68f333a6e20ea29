"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- contributor_models: Contributeurs
- product_models: Produits
"""

from portal.infrastructure.persistence.models.base import Base
from portal.infrastructure.persistence.models.contributor_models import ContributorModel
from portal.infrastructure.persistence.models.product_models import ProductModel

__all__ = [
    "Base",
    "ContributorModel",
    "ProductModel",
]
