"""
Entite Contributor - Contributeur du portail.

Represente une personne qui contribue au projet, avec son statut
et un numero de telephone optionnel.

Attributes:
-----------
- id: Identifiant entier attribue par le store (None avant persistance)
- name: Nom affiche du contributeur
- status: Statut (not_set, core_team, community)
- phone_number: Numero de telephone optionnel

Cycle de vie:
-------------
Cree, mis a jour et supprime directement via le repository.
Pas de versioning, pas de soft delete.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from portal.domain.exceptions import InvalidContributorNameError
from portal.domain.value_objects.contributor_status import ContributorStatus
from portal.domain.value_objects.phone_number import PhoneNumber


@dataclass
class Contributor:
    """
    Contributeur du portail.

    Attributes:
        id: Identifiant unique (entier, attribue par le store).
        name: Nom du contributeur (non vide, 100 caracteres max).
        status: Statut du contributeur.
        phone_number: Numero de telephone optionnel.
        created_at: Date de creation.
        updated_at: Date de derniere modification.

    Example:
        >>> contributor = Contributor.create("Ada Lovelace")
        >>> contributor.status
        <ContributorStatus.NOT_SET: 'not_set'>
        >>> contributor.update_name("Ada King")
        >>> contributor.name
        'Ada King'
    """

    name: str
    id: Optional[int] = None
    status: ContributorStatus = ContributorStatus.NOT_SET
    phone_number: Optional[PhoneNumber] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    # Constantes
    MAX_NAME_LENGTH = 100

    @classmethod
    def create(
        cls,
        name: str,
        status: ContributorStatus | str = ContributorStatus.NOT_SET,
        phone_number: Optional[PhoneNumber] = None,
    ) -> "Contributor":
        """
        Factory pour creer un nouveau contributeur (sans ID).

        Args:
            name: Nom du contributeur.
            status: Statut (enum ou chaine).
            phone_number: Numero de telephone optionnel.

        Returns:
            Nouvelle instance Contributor validee.

        Raises:
            InvalidContributorNameError: Si le nom est vide ou trop long.
            InvalidContributorStatusError: Si le statut est inconnu.
        """
        return cls(
            name=cls._validate_name(name),
            status=ContributorStatus.from_string(status),
            phone_number=phone_number,
        )

    @classmethod
    def _validate_name(cls, name: str) -> str:
        """Valide et normalise un nom."""
        if name is None:
            raise InvalidContributorNameError(name, "le nom est requis")

        cleaned = str(name).strip()
        if not cleaned:
            raise InvalidContributorNameError(name, "le nom est vide")
        if len(cleaned) > cls.MAX_NAME_LENGTH:
            raise InvalidContributorNameError(
                name, f"{cls.MAX_NAME_LENGTH} caracteres maximum"
            )
        return cleaned

    def update_name(self, new_name: str) -> None:
        """
        Met a jour le nom.

        Args:
            new_name: Nouveau nom.

        Raises:
            InvalidContributorNameError: Si le nom est invalide.
        """
        self.name = self._validate_name(new_name)
        self.updated_at = datetime.now()

    def set_status(self, status: ContributorStatus | str) -> None:
        """Change le statut."""
        self.status = ContributorStatus.from_string(status)
        self.updated_at = datetime.now()

    def set_phone_number(self, phone_number: Optional[PhoneNumber]) -> None:
        """Remplace (ou retire) le numero de telephone."""
        self.phone_number = phone_number
        self.updated_at = datetime.now()

    @property
    def is_persisted(self) -> bool:
        """True si l'entite a recu un ID du store."""
        return self.id is not None

    def __eq__(self, other: object) -> bool:
        """Compare par ID (par identite si non persiste)."""
        if not isinstance(other, Contributor):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash base sur l'ID."""
        return hash(self.id) if self.id is not None else id(self)

    def __str__(self) -> str:
        return f"{self.name} ({self.status})"

    def __repr__(self) -> str:
        return f"Contributor(id={self.id}, name='{self.name}', status={self.status})"
