"""
MemoryContributorRepository - Implementation in-memory du repository.

Responsabilite unique:
----------------------
Stocker les contributeurs en memoire (dev/tests).
En production, utiliser SqlAlchemyContributorRepository.
"""

from dataclasses import replace
from itertools import count
from threading import Lock
from typing import List, Optional

from portal.domain.entities.contributor import Contributor
from portal.domain.exceptions import ContributorNotFoundError
from portal.domain.ports.contributor_repository import ContributorRepository


class MemoryContributorRepository(ContributorRepository):
    """
    Implementation in-memory du ContributorRepository.

    Thread-safe avec verrou. Les IDs sont auto-incrementes a partir de 1.
    Le store garde des copies: modifier une entite retournee ne change
    rien tant que update() n'est pas appele.
    """

    def __init__(self):
        """Initialise le repository."""
        self._contributors: dict[int, Contributor] = {}
        self._ids = count(1)
        self._lock = Lock()

    def add(self, contributor: Contributor) -> Contributor:
        """Ajoute un contributeur et lui attribue un ID."""
        with self._lock:
            contributor.id = next(self._ids)
            self._contributors[contributor.id] = replace(contributor)
            return contributor

    def get_by_id(self, contributor_id: int) -> Contributor:
        """Recupere un contributeur par son ID."""
        with self._lock:
            return replace(self._get(contributor_id))

    def list(self, skip: int = 0, take: Optional[int] = None) -> List[Contributor]:
        """Liste les contributeurs tries par ID."""
        with self._lock:
            ordered = [self._contributors[k] for k in sorted(self._contributors)]
            end = None if take is None else skip + take
            return [replace(c) for c in ordered[skip:end]]

    def count(self) -> int:
        """Nombre de contributeurs."""
        with self._lock:
            return len(self._contributors)

    def update(self, contributor: Contributor) -> Contributor:
        """Remplace le contributeur stocke."""
        with self._lock:
            self._get(contributor.id)
            self._contributors[contributor.id] = replace(contributor)
            return contributor

    def delete(self, contributor_id: int) -> None:
        """Supprime un contributeur."""
        with self._lock:
            self._get(contributor_id)
            del self._contributors[contributor_id]

    def clear(self) -> None:
        """Vide le repository (pour tests)."""
        with self._lock:
            self._contributors.clear()

    def _get(self, contributor_id: Optional[int]) -> Contributor:
        contributor = self._contributors.get(contributor_id)
        if contributor is None:
            raise ContributorNotFoundError(contributor_id)
        return contributor
