"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites du domaine (Contributor, Product)
    - value_objects/: Objets valeur immuables (ContributorStatus, PhoneNumber)
    - ports/: Contrats des repositories
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Testable sans infrastructure
"""

from portal.domain.exceptions import (
    ContributorNotFoundError,
    DomainException,
    EntityNotFoundError,
    InvalidContributorNameError,
    InvalidContributorStatusError,
    InvalidPhoneNumberError,
    InvalidPriceError,
    InvalidProductNameError,
    ProductNotFoundError,
)

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ContributorNotFoundError",
    "ProductNotFoundError",
    "InvalidContributorNameError",
    "InvalidContributorStatusError",
    "InvalidPhoneNumberError",
    "InvalidProductNameError",
    "InvalidPriceError",
]
