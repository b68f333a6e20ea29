"""
SqlAlchemyContributorRepository - Adapter SQLAlchemy pour les contributeurs.

Implemente le port ContributorRepository avec SQLAlchemy.
Responsabilite unique: CRUD des contributeurs et conversion
ContributorModel <-> Contributor.
"""

from typing import List, Optional

from portal.domain.entities.contributor import Contributor
from portal.domain.exceptions import ContributorNotFoundError
from portal.domain.ports.contributor_repository import ContributorRepository
from portal.domain.value_objects.contributor_status import ContributorStatus
from portal.domain.value_objects.phone_number import PhoneNumber
from portal.infrastructure.persistence.database import DatabaseManager
from portal.infrastructure.persistence.models import ContributorModel


class SqlAlchemyContributorRepository(ContributorRepository):
    """
    Repository SQLAlchemy pour les contributeurs.

    Chaque operation ouvre sa propre session (une transaction par appel).

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialise le repository.

        Args:
            db: Instance DatabaseManager.
        """
        self._db = db

    def add(self, contributor: Contributor) -> Contributor:
        """
        Persiste un nouveau contributeur.

        L'ID genere par la base est reporte sur l'entite.

        Args:
            contributor: Entite a persister.

        Returns:
            Contributor avec son ID.
        """
        with self._db.get_session() as session:
            model = ContributorModel(
                name=contributor.name,
                status=contributor.status.value,
                created_at=contributor.created_at,
                updated_at=contributor.updated_at,
            )
            self._apply_phone(model, contributor.phone_number)
            session.add(model)
            session.flush()

            contributor.id = model.id
            return contributor

    def get_by_id(self, contributor_id: int) -> Contributor:
        """Recupere par ID (ContributorNotFoundError si absent)."""
        with self._db.get_session() as session:
            model = self._find(session, contributor_id)
            return self._to_entity(model)

    def list(self, skip: int = 0, take: Optional[int] = None) -> List[Contributor]:
        """Liste tries par ID."""
        with self._db.get_session() as session:
            query = session.query(ContributorModel).order_by(ContributorModel.id)
            if skip:
                query = query.offset(skip)
            if take is not None:
                query = query.limit(take)
            return [self._to_entity(m) for m in query.all()]

    def count(self) -> int:
        """Nombre total de contributeurs."""
        with self._db.get_session() as session:
            return session.query(ContributorModel).count()

    def update(self, contributor: Contributor) -> Contributor:
        """Met a jour nom, statut et telephone."""
        with self._db.get_session() as session:
            model = self._find(session, contributor.id)
            model.name = contributor.name
            model.status = contributor.status.value
            self._apply_phone(model, contributor.phone_number)
            model.updated_at = contributor.updated_at
            return contributor

    def delete(self, contributor_id: int) -> None:
        """Suppression definitive."""
        with self._db.get_session() as session:
            model = self._find(session, contributor_id)
            session.delete(model)

    def _find(self, session, contributor_id: Optional[int]) -> ContributorModel:
        """Charge le model ou leve ContributorNotFoundError."""
        model = None
        if contributor_id is not None:
            model = session.query(ContributorModel).filter(
                ContributorModel.id == contributor_id
            ).first()
        if model is None:
            raise ContributorNotFoundError(contributor_id)
        return model

    @staticmethod
    def _apply_phone(model: ContributorModel, phone: Optional[PhoneNumber]) -> None:
        """Aplatit le PhoneNumber dans les colonnes du model."""
        model.phone_country_code = phone.country_code if phone else None
        model.phone_number = phone.number if phone else None
        model.phone_extension = phone.extension if phone else None

    def _to_entity(self, model: ContributorModel) -> Contributor:
        """Convertit un model en entite."""
        phone = None
        if model.phone_country_code and model.phone_number:
            phone = PhoneNumber(
                model.phone_country_code,
                model.phone_number,
                model.phone_extension,
            )

        return Contributor(
            id=model.id,
            name=model.name,
            status=ContributorStatus.from_string(model.status),
            phone_number=phone,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
