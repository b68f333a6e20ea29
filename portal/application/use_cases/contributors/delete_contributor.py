"""
DeleteContributorUseCase - Suppression d'un contributeur.
"""

from dataclasses import dataclass

from portal.application.result import Result
from portal.domain.exceptions import ContributorNotFoundError
from portal.domain.ports.contributor_repository import ContributorRepository


@dataclass(frozen=True)
class DeleteContributorCommand:
    """Commande de suppression par ID."""
    contributor_id: int


class DeleteContributorUseCase:
    """Supprime le contributeur: NO_CONTENT, ou NOT_FOUND."""

    def __init__(self, repository: ContributorRepository):
        self._repository = repository

    def execute(self, command: DeleteContributorCommand) -> Result[None]:
        try:
            self._repository.delete(command.contributor_id)
        except ContributorNotFoundError as e:
            return Result.not_found(e.message)

        return Result.no_content()
