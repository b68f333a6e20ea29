"""
Port ContributorRepository - Interface pour la persistance des contributeurs.

Ce port definit le contrat que doivent implementer les adapters
de persistance pour les contributeurs. Il suit le pattern Repository
de Domain-Driven Design, avec une interface explicite par entite.

"Non trouve" est un resultat distinct:
--------------------------------------
get_by_id, update et delete levent ContributorNotFoundError
au lieu de retourner None.

Usage:
------
    class GetContributorUseCase:
        def __init__(self, repository: ContributorRepository):
            self._repository = repository

        def execute(self, query: GetContributorQuery) -> Result[ContributorDTO]:
            try:
                contributor = self._repository.get_by_id(query.contributor_id)
            except ContributorNotFoundError:
                return Result.not_found(...)
            ...
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from portal.domain.entities.contributor import Contributor


class ContributorRepository(ABC):
    """
    Interface Repository pour les contributeurs.

    Implementee par SqlAlchemyContributorRepository
    et MemoryContributorRepository.
    """

    @abstractmethod
    def add(self, contributor: Contributor) -> Contributor:
        """Persiste un nouveau contributeur et lui attribue un ID."""
        ...

    @abstractmethod
    def get_by_id(self, contributor_id: int) -> Contributor:
        """
        Recupere un contributeur par son ID.

        Raises:
            ContributorNotFoundError: Si l'ID n'existe pas.
        """
        ...

    @abstractmethod
    def list(self, skip: int = 0, take: Optional[int] = None) -> List[Contributor]:
        """Liste les contributeurs tries par ID."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de contributeurs."""
        ...

    @abstractmethod
    def update(self, contributor: Contributor) -> Contributor:
        """
        Met a jour un contributeur existant.

        Raises:
            ContributorNotFoundError: Si l'ID n'existe pas.
        """
        ...

    @abstractmethod
    def delete(self, contributor_id: int) -> None:
        """
        Supprime un contributeur (suppression definitive).

        Raises:
            ContributorNotFoundError: Si l'ID n'existe pas.
        """
        ...
