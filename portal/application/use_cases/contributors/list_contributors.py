"""
ListContributorsUseCase - Liste paginee des contributeurs.
"""

from dataclasses import dataclass
from typing import Optional

from portal.application.dto import ContributorDTO, PagedList
from portal.application.result import Result
from portal.domain.ports.contributor_repository import ContributorRepository


@dataclass(frozen=True)
class ListContributorsQuery:
    """
    Requete de liste.

    Attributes:
        skip: Nombre de contributeurs a sauter.
        take: Nombre maximum a retourner (None = tous).
    """
    skip: int = 0
    take: Optional[int] = None


class ListContributorsUseCase:
    """Liste les contributeurs tries par ID avec le total."""

    def __init__(self, repository: ContributorRepository):
        self._repository = repository

    def execute(
        self,
        query: ListContributorsQuery = ListContributorsQuery(),
    ) -> Result[PagedList[ContributorDTO]]:
        """Execute la liste (toujours OK, eventuellement vide)."""
        contributors = self._repository.list(skip=query.skip, take=query.take)
        total = self._repository.count()

        return Result.ok(PagedList(
            items=[ContributorDTO.from_entity(c) for c in contributors],
            total=total,
            skip=query.skip,
            take=query.take,
        ))
