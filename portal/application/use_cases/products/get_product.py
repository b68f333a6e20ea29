"""
GetProductUseCase - Lecture d'un produit par ID.
"""

from dataclasses import dataclass

from portal.application.dto import ProductDTO
from portal.application.result import Result
from portal.domain.exceptions import ProductNotFoundError
from portal.domain.ports.product_repository import ProductRepository


@dataclass(frozen=True)
class GetProductQuery:
    """Requete de lecture par ID."""
    product_id: int


class GetProductUseCase:
    """Retourne le DTO du produit, ou NOT_FOUND."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def execute(self, query: GetProductQuery) -> Result[ProductDTO]:
        try:
            product = self._repository.get_by_id(query.product_id)
        except ProductNotFoundError as e:
            return Result.not_found(e.message)

        return Result.ok(ProductDTO.from_entity(product))
