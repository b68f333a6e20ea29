"""
UpdateContributorUseCase - Renommage d'un contributeur.

Responsabilite unique:
----------------------
Charger le contributeur, appliquer le nouveau nom, persister
et retourner le DTO mis a jour.

Issues possibles:
-----------------
- OK: contributeur renomme
- NOT_FOUND: ID inconnu (a la lecture ou a l'ecriture)
- INVALID: nouveau nom refuse par le domaine
"""

from dataclasses import dataclass

from portal.application.dto import ContributorDTO
from portal.application.result import Result
from portal.domain.exceptions import ContributorNotFoundError, DomainException
from portal.domain.ports.contributor_repository import ContributorRepository


@dataclass(frozen=True)
class UpdateContributorCommand:
    """
    Commande "renommer le contributeur <id> en <nom>".

    Attributes:
        contributor_id: ID du contributeur a modifier.
        new_name: Nouveau nom.
    """
    contributor_id: int
    new_name: str


class UpdateContributorUseCase:
    """
    Use case de mise a jour de contributeur.

    Example:
        >>> use_case = UpdateContributorUseCase(repository)
        >>> result = use_case.execute(UpdateContributorCommand(1, "Ada King"))
        >>> result.value.name
        'Ada King'
    """

    def __init__(self, repository: ContributorRepository):
        """
        Initialise le use case.

        Args:
            repository: Repository contributeurs.
        """
        self._repository = repository

    def execute(self, command: UpdateContributorCommand) -> Result[ContributorDTO]:
        """
        Execute la mise a jour.

        Args:
            command: Commande avec l'ID et le nouveau nom.

        Returns:
            Result avec le DTO mis a jour.
        """
        try:
            contributor = self._repository.get_by_id(command.contributor_id)
            contributor.update_name(command.new_name)
            updated = self._repository.update(contributor)
        except ContributorNotFoundError as e:
            return Result.not_found(e.message)
        except DomainException as e:
            return Result.invalid(e.message)

        return Result.ok(ContributorDTO.from_entity(updated))
