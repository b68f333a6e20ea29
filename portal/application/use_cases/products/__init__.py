"""
Use Cases des produits.

Meme decoupage que les contributeurs: un use case par operation
(create, get, list, update, delete), chacun retournant un Result.
"""

from portal.application.use_cases.products.create_product import (
    CreateProductCommand,
    CreateProductUseCase,
)
from portal.application.use_cases.products.delete_product import (
    DeleteProductCommand,
    DeleteProductUseCase,
)
from portal.application.use_cases.products.get_product import (
    GetProductQuery,
    GetProductUseCase,
)
from portal.application.use_cases.products.list_products import (
    ListProductsQuery,
    ListProductsUseCase,
)
from portal.application.use_cases.products.update_product import (
    UpdateProductCommand,
    UpdateProductUseCase,
)

__all__ = [
    "CreateProductCommand",
    "CreateProductUseCase",
    "GetProductQuery",
    "GetProductUseCase",
    "ListProductsQuery",
    "ListProductsUseCase",
    "UpdateProductCommand",
    "UpdateProductUseCase",
    "DeleteProductCommand",
    "DeleteProductUseCase",
]
