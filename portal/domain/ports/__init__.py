"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- ContributorRepository: Persistance des contributeurs
- ProductRepository: Persistance des produits

Pattern:
--------
Les Ports sont des ABC implementees par des Adapters
dans la couche Infrastructure (SQLAlchemy, memoire).
"""

from portal.domain.ports.contributor_repository import ContributorRepository
from portal.domain.ports.product_repository import ProductRepository

__all__ = [
    "ContributorRepository",
    "ProductRepository",
]
