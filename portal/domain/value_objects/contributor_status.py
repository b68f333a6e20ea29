"""
Value Object pour le statut d'un contributeur.
"""

from enum import Enum
from typing import Any

from portal.domain.exceptions import InvalidContributorStatusError


class ContributorStatus(Enum):
    """
    Statuts possibles d'un contributeur.

    Example:
        >>> ContributorStatus.from_string("Core_Team")
        <ContributorStatus.CORE_TEAM: 'core_team'>
    """

    NOT_SET = "not_set"
    CORE_TEAM = "core_team"
    COMMUNITY = "community"

    @classmethod
    def from_string(cls, value: Any) -> "ContributorStatus":
        """
        Cree un statut depuis une chaine (insensible a la casse).

        Args:
            value: Chaine ou ContributorStatus.

        Returns:
            ContributorStatus correspondant.

        Raises:
            InvalidContributorStatusError: Si la valeur est inconnue.
        """
        if isinstance(value, cls):
            return value

        if value is None:
            raise InvalidContributorStatusError(value)

        normalized = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        for status in cls:
            if status.value == normalized:
                return status

        raise InvalidContributorStatusError(value)

    def __str__(self) -> str:
        return self.value
