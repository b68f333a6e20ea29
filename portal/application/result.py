"""
Result - Type de retour des use cases.

Responsabilite unique:
----------------------
Representer l'issue d'une operation applicative sans passer par None
ni par des exceptions: succes (avec valeur), ressource non trouvee,
ou donnees invalides (avec messages d'erreur).

La couche presentation traduit le statut en code HTTP.

Usage:
------
    result = use_case.execute(GetContributorQuery(contributor_id=1))
    if result.status is ResultStatus.NOT_FOUND:
        ...
    dto = result.value
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class ResultStatus(Enum):
    """Statuts possibles d'un Result."""

    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


_SUCCESS_STATUSES = (ResultStatus.OK, ResultStatus.CREATED, ResultStatus.NO_CONTENT)


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Issue d'un use case.

    Attributes:
        status: Statut de l'operation.
        value: Valeur retournee (succes uniquement).
        errors: Messages d'erreur (echec uniquement).

    Example:
        >>> Result.ok(42).is_success
        True
        >>> Result.not_found("Contributeur 7 non trouve").errors
        ['Contributeur 7 non trouve']
    """

    status: ResultStatus
    value: Optional[T] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Factory pour succes."""
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def created(cls, value: T) -> "Result[T]":
        """Factory pour une creation reussie."""
        return cls(status=ResultStatus.CREATED, value=value)

    @classmethod
    def no_content(cls) -> "Result[T]":
        """Factory pour un succes sans valeur (suppression)."""
        return cls(status=ResultStatus.NO_CONTENT)

    @classmethod
    def not_found(cls, *errors: str) -> "Result[T]":
        """Factory pour ressource absente."""
        return cls(status=ResultStatus.NOT_FOUND, errors=list(errors))

    @classmethod
    def invalid(cls, *errors: str) -> "Result[T]":
        """Factory pour donnees invalides."""
        return cls(status=ResultStatus.INVALID, errors=list(errors))

    @property
    def is_success(self) -> bool:
        """True si l'operation a reussi."""
        return self.status in _SUCCESS_STATUSES
