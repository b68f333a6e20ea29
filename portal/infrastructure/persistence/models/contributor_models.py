"""
Modeles SQLAlchemy pour les contributeurs.

Tables:
-------
- contributors: Contributeurs avec statut et telephone

Le numero de telephone (value object PhoneNumber) est aplati
en trois colonnes nullables.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime, Index, Integer, String

from portal.infrastructure.persistence.models.base import Base


class ContributorModel(Base):
    """
    Table contributors - Contributeurs du portail.

    Colonnes:
        id: Identifiant auto-incremente
        name: Nom du contributeur
        status: not_set, core_team ou community
        phone_country_code: Indicatif (ex: +33)
        phone_number: Numero local
        phone_extension: Extension optionnelle
        created_at: Date de creation
        updated_at: Derniere modification
    """
    __tablename__ = "contributors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default="not_set")
    phone_country_code = Column(String(8), nullable=True)
    phone_number = Column(String(32), nullable=True)
    phone_extension = Column(String(16), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_contributors_status', 'status'),
    )
