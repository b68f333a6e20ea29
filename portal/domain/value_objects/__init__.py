"""
Value Objects du domaine.

Les Value Objects sont des objets immuables qui encapsulent
des valeurs avec leur logique de validation.

Caracteristiques:
    - Immuables (frozen dataclasses, enums)
    - Valides par construction
    - Comparaison par valeur
    - Aucun identifiant propre
"""

from portal.domain.value_objects.contributor_status import ContributorStatus
from portal.domain.value_objects.phone_number import PhoneNumber

__all__ = [
    "ContributorStatus",
    "PhoneNumber",
]
