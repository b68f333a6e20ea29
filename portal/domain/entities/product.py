"""
Entite Product - Produit du catalogue.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from portal.domain.exceptions import InvalidPriceError, InvalidProductNameError


@dataclass
class Product:
    """
    Produit avec un nom et un prix.

    Le prix est stocke en Decimal arrondi a deux decimales.

    Example:
        >>> product = Product.create("Clavier", "49.9")
        >>> product.price
        Decimal('49.90')
    """

    name: str
    price: Decimal
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    MAX_NAME_LENGTH = 100
    MAX_PRICE = Decimal("99999999.99")

    @classmethod
    def create(cls, name: str, price: Any) -> "Product":
        """
        Factory pour creer un nouveau produit (sans ID).

        Raises:
            InvalidProductNameError: Si le nom est invalide.
            InvalidPriceError: Si le prix est negatif, non numerique
                ou au-dela de MAX_PRICE.
        """
        return cls(
            name=cls._validate_name(name),
            price=cls._validate_price(price),
        )

    @classmethod
    def _validate_name(cls, name: str) -> str:
        cleaned = str(name).strip() if name is not None else ""
        if not cleaned:
            raise InvalidProductNameError(name, "le nom est vide")
        if len(cleaned) > cls.MAX_NAME_LENGTH:
            raise InvalidProductNameError(
                name, f"{cls.MAX_NAME_LENGTH} caracteres maximum"
            )
        return cleaned

    @classmethod
    def _validate_price(cls, price: Any) -> Decimal:
        if price is None or isinstance(price, bool):
            raise InvalidPriceError(price)
        try:
            value = Decimal(str(price))
            if not value.is_finite() or value < 0:
                raise InvalidPriceError(price)
            value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidPriceError(price)
        # Borne de la colonne Numeric(10, 2)
        if value > cls.MAX_PRICE:
            raise InvalidPriceError(price)
        return value

    def rename(self, new_name: str) -> None:
        """Change le nom du produit."""
        self.name = self._validate_name(new_name)
        self.updated_at = datetime.now()

    def change_price(self, new_price: Any) -> None:
        """Change le prix du produit."""
        self.price = self._validate_price(new_price)
        self.updated_at = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name='{self.name}', price={self.price})"
