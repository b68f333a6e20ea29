"""
CreateContributorUseCase - Creation d'un contributeur.

Responsabilite unique:
----------------------
Construire l'entite Contributor depuis la commande, la persister
et retourner son DTO.

Dependances:
------------
- ContributorRepository: Persister le contributeur
"""

from dataclasses import dataclass
from typing import Optional

from portal.application.dto import ContributorDTO
from portal.application.result import Result
from portal.domain.entities.contributor import Contributor
from portal.domain.exceptions import DomainException
from portal.domain.ports.contributor_repository import ContributorRepository
from portal.domain.value_objects.phone_number import PhoneNumber


@dataclass(frozen=True)
class CreateContributorCommand:
    """
    Commande de creation.

    Attributes:
        name: Nom du contributeur.
        status: Statut (not_set, core_team, community).
        phone_number: Numero au format "<indicatif> <numero> [x<ext>]".
    """
    name: str
    status: str = "not_set"
    phone_number: Optional[str] = None


class CreateContributorUseCase:
    """
    Use case de creation de contributeur.

    Example:
        >>> use_case = CreateContributorUseCase(repository)
        >>> result = use_case.execute(CreateContributorCommand(name="Ada"))
        >>> result.value.id
        1
    """

    def __init__(self, repository: ContributorRepository):
        """
        Initialise le use case.

        Args:
            repository: Repository contributeurs.
        """
        self._repository = repository

    def execute(self, command: CreateContributorCommand) -> Result[ContributorDTO]:
        """
        Execute la creation.

        Args:
            command: Commande avec les donnees du contributeur.

        Returns:
            Result CREATED avec le DTO, ou INVALID si les donnees
            ne respectent pas les regles du domaine.
        """
        try:
            phone_number = (
                PhoneNumber.parse(command.phone_number)
                if command.phone_number else None
            )
            contributor = Contributor.create(
                name=command.name,
                status=command.status,
                phone_number=phone_number,
            )
        except DomainException as e:
            return Result.invalid(e.message)

        saved = self._repository.add(contributor)
        return Result.created(ContributorDTO.from_entity(saved))
