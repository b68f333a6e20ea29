"""
Value Object pour le numero de telephone d'un contributeur.
"""

from dataclasses import dataclass
from typing import Optional

from portal.domain.exceptions import InvalidPhoneNumberError


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    """
    Numero de telephone decompose en indicatif, numero et extension.

    Attributes:
        country_code: Indicatif pays (chiffres, '+' initial tolere).
        number: Numero local (chiffres).
        extension: Extension optionnelle (chiffres).

    Example:
        >>> phone = PhoneNumber("+1", "5555551234")
        >>> str(phone)
        '+1 5555551234'
        >>> PhoneNumber("+1", "5555551234", "42").extension
        '42'
    """

    country_code: str
    number: str
    extension: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalise et valide le numero apres initialisation."""
        country_code = str(self.country_code or "").strip().lstrip("+")
        number = str(self.number or "").strip().replace(" ", "").replace("-", "")
        extension = str(self.extension).strip() if self.extension else None

        if not country_code.isdigit() or not number.isdigit():
            raise InvalidPhoneNumberError(f"{self.country_code} {self.number}")
        if extension is not None and not extension.isdigit():
            raise InvalidPhoneNumberError(extension)

        # frozen: passer par object.__setattr__ pour normaliser
        object.__setattr__(self, "country_code", f"+{country_code}")
        object.__setattr__(self, "number", number)
        object.__setattr__(self, "extension", extension or None)

    @classmethod
    def parse(cls, text: str) -> "PhoneNumber":
        """
        Cree un PhoneNumber depuis sa forme texte.

        Format attendu: "<indicatif> <numero> [x<extension>]".

        Args:
            text: Numero au format texte, ex: "+33 612345678 x12".

        Returns:
            PhoneNumber valide.

        Raises:
            InvalidPhoneNumberError: Si le format n'est pas reconnu.
        """
        if not text or not str(text).strip():
            raise InvalidPhoneNumberError(text)

        main, _, extension = str(text).strip().lower().partition("x")
        parts = main.split(None, 1)
        if len(parts) != 2:
            raise InvalidPhoneNumberError(text)

        return cls(parts[0], parts[1], extension.strip() or None)

    def __str__(self) -> str:
        text = f"{self.country_code} {self.number}"
        if self.extension:
            text += f" x{self.extension}"
        return text
