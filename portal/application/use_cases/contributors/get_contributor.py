"""
GetContributorUseCase - Lecture d'un contributeur par ID.
"""

from dataclasses import dataclass

from portal.application.dto import ContributorDTO
from portal.application.result import Result
from portal.domain.exceptions import ContributorNotFoundError
from portal.domain.ports.contributor_repository import ContributorRepository


@dataclass(frozen=True)
class GetContributorQuery:
    """Requete de lecture par ID."""
    contributor_id: int


class GetContributorUseCase:
    """Retourne le DTO du contributeur, ou NOT_FOUND."""

    def __init__(self, repository: ContributorRepository):
        self._repository = repository

    def execute(self, query: GetContributorQuery) -> Result[ContributorDTO]:
        """
        Execute la lecture.

        Returns:
            Result OK avec le DTO, ou NOT_FOUND si l'ID est inconnu.
        """
        try:
            contributor = self._repository.get_by_id(query.contributor_id)
        except ContributorNotFoundError as e:
            return Result.not_found(e.message)

        return Result.ok(ContributorDTO.from_entity(contributor))
