"""
Products Router - Endpoints CRUD pour les produits.

Endpoints:
----------
- GET /products: Lister les produits (pagine)
- GET /products/{id}: Recuperer un produit
- POST /products: Creer un produit
- PUT /products/{id}: Mettre a jour nom et/ou prix
- DELETE /products/{id}: Supprimer un produit
"""

from math import ceil

from fastapi import APIRouter, Depends, Query, status

from portal.application.dto import ProductDTO
from portal.application.use_cases.products import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductQuery,
    ListProductsQuery,
    UpdateProductCommand,
)
from portal.infrastructure.container import Container
from portal.infrastructure.logging import get_logger
from portal.presentation.api.dependencies import get_container
from portal.presentation.api.errors import raise_for_result
from portal.presentation.api.products.schemas import (
    CreateProductRequest,
    ProductListResponse,
    ProductResponse,
    UpdateProductRequest,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def _dto_to_response(dto: ProductDTO) -> ProductResponse:
    return ProductResponse(id=dto.id, name=dto.name, price=dto.price)


@router.get("", response_model=ProductListResponse, summary="Lister les produits")
def list_products(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    container: Container = Depends(get_container),
):
    result = container.list_products.execute(ListProductsQuery(
        skip=(page - 1) * page_size,
        take=page_size,
    ))
    raise_for_result(result)

    paged = result.value
    return ProductListResponse(
        items=[_dto_to_response(dto) for dto in paged.items],
        total=paged.total,
        page=page,
        page_size=page_size,
        pages=ceil(paged.total / page_size),
    )


@router.get("/{product_id}", response_model=ProductResponse, summary="Recuperer un produit")
def get_product(product_id: int, container: Container = Depends(get_container)):
    result = container.get_product.execute(GetProductQuery(product_id))
    raise_for_result(result)
    return _dto_to_response(result.value)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un produit",
)
def create_product(data: CreateProductRequest, container: Container = Depends(get_container)):
    result = container.create_product.execute(
        CreateProductCommand(name=data.name, price=data.price)
    )
    raise_for_result(result)

    logger.info("product_created", product_id=result.value.id)
    return _dto_to_response(result.value)


@router.put("/{product_id}", response_model=ProductResponse, summary="Mettre a jour un produit")
def update_product(
    product_id: int,
    data: UpdateProductRequest,
    container: Container = Depends(get_container),
):
    """
    Met a jour le nom et/ou le prix (400 si aucun champ fourni).
    """
    result = container.update_product.execute(UpdateProductCommand(
        product_id=product_id,
        new_name=data.name,
        new_price=data.price,
    ))
    raise_for_result(result)

    logger.info("product_updated", product_id=product_id)
    return _dto_to_response(result.value)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Supprimer un produit",
)
def delete_product(product_id: int, container: Container = Depends(get_container)):
    result = container.delete_product.execute(DeleteProductCommand(product_id))
    raise_for_result(result)

    logger.info("product_deleted", product_id=product_id)
