"""
DeleteProductUseCase - Suppression d'un produit.
"""

from dataclasses import dataclass

from portal.application.result import Result
from portal.domain.exceptions import ProductNotFoundError
from portal.domain.ports.product_repository import ProductRepository


@dataclass(frozen=True)
class DeleteProductCommand:
    """Commande de suppression par ID."""
    product_id: int


class DeleteProductUseCase:
    """Supprime le produit: NO_CONTENT, ou NOT_FOUND."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def execute(self, command: DeleteProductCommand) -> Result[None]:
        try:
            self._repository.delete(command.product_id)
        except ProductNotFoundError as e:
            return Result.not_found(e.message)

        return Result.no_content()
