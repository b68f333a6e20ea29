"""
Products Schemas - Modeles Pydantic pour les endpoints products.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """Representation d'un produit."""

    id: int
    name: str
    price: Decimal


class ProductListResponse(BaseModel):
    """Liste paginee de produits."""

    items: list[ProductResponse]
    total: int
    page: int
    page_size: int
    pages: int


class CreateProductRequest(BaseModel):
    """Requete de creation de produit."""

    name: str = Field(..., min_length=1, max_length=100, description="Nom du produit")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Prix")


class UpdateProductRequest(BaseModel):
    """Requete de mise a jour partielle d'un produit."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
