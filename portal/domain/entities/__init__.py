"""
Entites du domaine.

Les entites ont une identite (ID entier attribue par le store)
et un etat persistant.
"""

from portal.domain.entities.contributor import Contributor
from portal.domain.entities.product import Product

__all__ = [
    "Contributor",
    "Product",
]
