"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidContributorNameError(DomainException):
    """Leve quand le nom d'un contributeur est invalide."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        message = f"Nom de contributeur invalide: '{value}'."
        if reason:
            message += f" Raison: {reason}"
        super().__init__(message, code="INVALID_CONTRIBUTOR_NAME")
        self.invalid_value = value


class InvalidContributorStatusError(DomainException):
    """Leve quand un statut de contributeur est invalide."""

    VALID_STATUSES = ("not_set", "core_team", "community")

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Statut invalide: '{value}'. "
            f"Les statuts valides sont: {', '.join(self.VALID_STATUSES)}",
            code="INVALID_CONTRIBUTOR_STATUS"
        )
        self.invalid_value = value


class InvalidPhoneNumberError(DomainException):
    """Leve quand un numero de telephone est invalide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Numero de telephone invalide: '{value}'. "
            "L'indicatif, le numero et l'extension doivent etre numeriques.",
            code="INVALID_PHONE_NUMBER"
        )
        self.invalid_value = value


class InvalidProductNameError(DomainException):
    """Leve quand le nom d'un produit est invalide."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        message = f"Nom de produit invalide: '{value}'."
        if reason:
            message += f" Raison: {reason}"
        super().__init__(message, code="INVALID_PRODUCT_NAME")
        self.invalid_value = value


class InvalidPriceError(DomainException):
    """Leve quand un prix est invalide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Prix invalide: '{value}'. "
            "Le prix doit etre un nombre positif ou nul, "
            "d'au plus 10 chiffres dont 2 decimales.",
            code="INVALID_PRICE"
        )
        self.invalid_value = value


class EntityNotFoundError(DomainException):
    """Leve quand une entite n'est pas trouvee dans le store."""

    entity_name = "Entite"

    def __init__(self, entity_id: Any, code: str = "NOT_FOUND") -> None:
        super().__init__(
            f"{self.entity_name} non trouve(e): '{entity_id}'",
            code=code
        )
        self.entity_id = entity_id


class ContributorNotFoundError(EntityNotFoundError):
    """Leve quand un contributeur n'est pas trouve."""

    entity_name = "Contributeur"

    def __init__(self, contributor_id: Any) -> None:
        super().__init__(contributor_id, code="CONTRIBUTOR_NOT_FOUND")
        self.contributor_id = contributor_id


class ProductNotFoundError(EntityNotFoundError):
    """Leve quand un produit n'est pas trouve."""

    entity_name = "Produit"

    def __init__(self, product_id: Any) -> None:
        super().__init__(product_id, code="PRODUCT_NOT_FOUND")
        self.product_id = product_id
