"""
SqlAlchemyProductRepository - Adapter SQLAlchemy pour les produits.
"""

from decimal import Decimal
from typing import List, Optional

from portal.domain.entities.product import Product
from portal.domain.exceptions import ProductNotFoundError
from portal.domain.ports.product_repository import ProductRepository
from portal.infrastructure.persistence.database import DatabaseManager
from portal.infrastructure.persistence.models import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Repository SQLAlchemy pour les produits."""

    def __init__(self, db: DatabaseManager):
        self._db = db

    def add(self, product: Product) -> Product:
        with self._db.get_session() as session:
            model = ProductModel(
                name=product.name,
                price=product.price,
                created_at=product.created_at,
                updated_at=product.updated_at,
            )
            session.add(model)
            session.flush()

            product.id = model.id
            return product

    def get_by_id(self, product_id: int) -> Product:
        with self._db.get_session() as session:
            return self._to_entity(self._find(session, product_id))

    def list(self, skip: int = 0, take: Optional[int] = None) -> List[Product]:
        with self._db.get_session() as session:
            query = session.query(ProductModel).order_by(ProductModel.id)
            if skip:
                query = query.offset(skip)
            if take is not None:
                query = query.limit(take)
            return [self._to_entity(m) for m in query.all()]

    def count(self) -> int:
        with self._db.get_session() as session:
            return session.query(ProductModel).count()

    def update(self, product: Product) -> Product:
        with self._db.get_session() as session:
            model = self._find(session, product.id)
            model.name = product.name
            model.price = product.price
            model.updated_at = product.updated_at
            return product

    def delete(self, product_id: int) -> None:
        with self._db.get_session() as session:
            session.delete(self._find(session, product_id))

    def _find(self, session, product_id: Optional[int]) -> ProductModel:
        """Charge le model ou leve ProductNotFoundError."""
        model = None
        if product_id is not None:
            model = session.query(ProductModel).filter(
                ProductModel.id == product_id
            ).first()
        if model is None:
            raise ProductNotFoundError(product_id)
        return model

    def _to_entity(self, model: ProductModel) -> Product:
        """Convertit un model en entite."""
        return Product(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)).quantize(Decimal("0.01")),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
