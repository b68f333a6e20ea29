"""
Data Transfer Objects.

Copies reduites des entites, exposees a l'exterieur de la couche
application. Construites par copie directe des champs, sans cycle
de vie propre.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, List, Optional, TypeVar

from portal.domain.entities.contributor import Contributor
from portal.domain.entities.product import Product

T = TypeVar("T")


@dataclass(frozen=True)
class ContributorDTO:
    """Vue externe d'un contributeur."""

    id: int
    name: str
    status: str
    phone_number: Optional[str] = None

    @classmethod
    def from_entity(cls, contributor: Contributor) -> "ContributorDTO":
        """Copie les champs d'un Contributor."""
        return cls(
            id=contributor.id,
            name=contributor.name,
            status=contributor.status.value,
            phone_number=str(contributor.phone_number) if contributor.phone_number else None,
        )


@dataclass(frozen=True)
class ProductDTO:
    """Vue externe d'un produit."""

    id: int
    name: str
    price: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        """Copie les champs d'un Product."""
        return cls(id=product.id, name=product.name, price=product.price)


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """
    Page d'elements avec le total.

    Attributes:
        items: Elements de la page.
        total: Nombre total d'elements dans le store.
        skip: Nombre d'elements sautes.
        take: Taille de page demandee (None = tout).
    """

    items: List[T]
    total: int
    skip: int = 0
    take: Optional[int] = None
