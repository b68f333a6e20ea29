"""
ListProductsUseCase - Liste paginee des produits.
"""

from dataclasses import dataclass
from typing import Optional

from portal.application.dto import PagedList, ProductDTO
from portal.application.result import Result
from portal.domain.ports.product_repository import ProductRepository


@dataclass(frozen=True)
class ListProductsQuery:
    """Requete de liste (skip/take)."""
    skip: int = 0
    take: Optional[int] = None


class ListProductsUseCase:
    """Liste les produits tries par ID avec le total."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def execute(
        self,
        query: ListProductsQuery = ListProductsQuery(),
    ) -> Result[PagedList[ProductDTO]]:
        products = self._repository.list(skip=query.skip, take=query.take)

        return Result.ok(PagedList(
            items=[ProductDTO.from_entity(p) for p in products],
            total=self._repository.count(),
            skip=query.skip,
            take=query.take,
        ))
