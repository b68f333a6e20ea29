"""
UpdateProductUseCase - Mise a jour partielle d'un produit.

Seuls les champs renseignes dans la commande sont modifies.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from portal.application.dto import ProductDTO
from portal.application.result import Result
from portal.domain.exceptions import DomainException, ProductNotFoundError
from portal.domain.ports.product_repository import ProductRepository


@dataclass(frozen=True)
class UpdateProductCommand:
    """
    Commande de mise a jour.

    Attributes:
        product_id: ID du produit a modifier.
        new_name: Nouveau nom (None = inchange).
        new_price: Nouveau prix (None = inchange).
    """
    product_id: int
    new_name: Optional[str] = None
    new_price: Optional[Decimal] = None


class UpdateProductUseCase:
    """Use case de mise a jour de produit."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def execute(self, command: UpdateProductCommand) -> Result[ProductDTO]:
        """
        Execute la mise a jour.

        Le produit est charge avant tout controle: un ID inconnu donne
        NOT_FOUND meme si la commande ne contient aucun champ.

        Returns:
            Result OK avec le DTO, NOT_FOUND, ou INVALID.
        """
        try:
            product = self._repository.get_by_id(command.product_id)
            if command.new_name is None and command.new_price is None:
                return Result.invalid("Aucun champ a mettre a jour")
            if command.new_name is not None:
                product.rename(command.new_name)
            if command.new_price is not None:
                product.change_price(command.new_price)
            updated = self._repository.update(product)
        except ProductNotFoundError as e:
            return Result.not_found(e.message)
        except DomainException as e:
            return Result.invalid(e.message)

        return Result.ok(ProductDTO.from_entity(updated))
