"""
CreateProductUseCase - Creation d'un produit.
"""

from dataclasses import dataclass
from decimal import Decimal

from portal.application.dto import ProductDTO
from portal.application.result import Result
from portal.domain.entities.product import Product
from portal.domain.exceptions import DomainException
from portal.domain.ports.product_repository import ProductRepository


@dataclass(frozen=True)
class CreateProductCommand:
    """Commande de creation (nom et prix)."""
    name: str
    price: Decimal


class CreateProductUseCase:
    """Cree et persiste un produit: CREATED, ou INVALID."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def execute(self, command: CreateProductCommand) -> Result[ProductDTO]:
        try:
            product = Product.create(name=command.name, price=command.price)
        except DomainException as e:
            return Result.invalid(e.message)

        saved = self._repository.add(product)
        return Result.created(ProductDTO.from_entity(saved))
