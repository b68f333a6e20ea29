"""
Tests unitaires pour les Value Objects.
"""

import dataclasses

import pytest

from portal.domain.exceptions import (
    InvalidContributorStatusError,
    InvalidPhoneNumberError,
)
from portal.domain.value_objects import ContributorStatus, PhoneNumber


class TestContributorStatus:
    """Tests pour ContributorStatus."""

    @pytest.mark.parametrize("value,expected", [
        ("not_set", ContributorStatus.NOT_SET),
        ("CORE_TEAM", ContributorStatus.CORE_TEAM),
        ("core-team", ContributorStatus.CORE_TEAM),
        ("Core Team", ContributorStatus.CORE_TEAM),
        (" community ", ContributorStatus.COMMUNITY),
    ])
    def test_from_string(self, value, expected):
        """from_string est insensible a la casse et aux separateurs."""
        assert ContributorStatus.from_string(value) is expected

    def test_from_string_passthrough(self):
        """Un ContributorStatus est retourne tel quel."""
        status = ContributorStatus.COMMUNITY
        assert ContributorStatus.from_string(status) is status

    @pytest.mark.parametrize("value", ["admin", "", None])
    def test_from_string_invalid(self, value):
        """Valeur inconnue -> InvalidContributorStatusError."""
        with pytest.raises(InvalidContributorStatusError):
            ContributorStatus.from_string(value)

    def test_str(self):
        assert str(ContributorStatus.CORE_TEAM) == "core_team"


class TestPhoneNumber:
    """Tests pour PhoneNumber."""

    def test_normalizes_country_code(self):
        """L'indicatif est prefixe par '+'."""
        phone = PhoneNumber("33", "612345678")

        assert phone.country_code == "+33"
        assert str(phone) == "+33 612345678"

    def test_extension_in_str(self):
        phone = PhoneNumber("+1", "5555551234", "42")

        assert str(phone) == "+1 5555551234 x42"

    def test_parse_round_trip(self):
        """parse(str(phone)) redonne le meme numero."""
        phone = PhoneNumber("+1", "5555551234", "42")

        assert PhoneNumber.parse(str(phone)) == phone

    def test_parse_number_with_spaces(self):
        """Les espaces du numero local sont retires."""
        phone = PhoneNumber.parse("+33 6 12 34 56 78")

        assert phone.number == "612345678"

    @pytest.mark.parametrize("text", ["", "612345678", "+33 abc", "+33 612 xab"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidPhoneNumberError):
            PhoneNumber.parse(text)

    def test_is_immutable(self, sample_phone):
        """Un PhoneNumber est immuable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_phone.number = "000"
