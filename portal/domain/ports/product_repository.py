"""
Port ProductRepository - Interface pour la persistance des produits.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from portal.domain.entities.product import Product


class ProductRepository(ABC):
    """
    Interface Repository pour les produits.

    Meme contrat que ContributorRepository: les operations par ID
    levent ProductNotFoundError si le produit n'existe pas.
    """

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persiste un nouveau produit et lui attribue un ID."""
        ...

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Recupere un produit par son ID."""
        ...

    @abstractmethod
    def list(self, skip: int = 0, take: Optional[int] = None) -> List[Product]:
        """Liste les produits tries par ID."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de produits."""
        ...

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Met a jour un produit existant."""
        ...

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Supprime un produit."""
        ...
