"""
Modeles SQLAlchemy pour le catalogue produits.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, Numeric, String

from portal.infrastructure.persistence.models.base import Base


class ProductModel(Base):
    """
    Table products - Produits du catalogue.

    Colonnes:
        id: Identifiant auto-incremente
        name: Nom du produit
        price: Prix (2 decimales)
        created_at: Date de creation
        updated_at: Derniere modification
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
