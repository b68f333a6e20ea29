"""
Tests unitaires pour les exceptions du domaine.
"""

from portal.domain.exceptions import (
    ContributorNotFoundError,
    DomainException,
    EntityNotFoundError,
    InvalidContributorNameError,
    InvalidPriceError,
    ProductNotFoundError,
)


class TestDomainException:
    """Tests pour DomainException."""

    def test_default_code_is_class_name(self):
        exc = DomainException("boom")

        assert exc.code == "DomainException"
        assert str(exc) == "[DomainException] boom"

    def test_custom_code(self):
        exc = DomainException("boom", code="BOOM")

        assert exc.code == "BOOM"
        assert exc.message == "boom"


class TestSpecificExceptions:
    """Tests pour les exceptions specifiques."""

    def test_contributor_not_found(self):
        exc = ContributorNotFoundError(42)

        assert isinstance(exc, EntityNotFoundError)
        assert exc.contributor_id == 42
        assert exc.code == "CONTRIBUTOR_NOT_FOUND"
        assert "42" in exc.message

    def test_product_not_found(self):
        exc = ProductNotFoundError(7)

        assert isinstance(exc, EntityNotFoundError)
        assert exc.product_id == 7
        assert exc.code == "PRODUCT_NOT_FOUND"

    def test_invalid_name_with_reason(self):
        exc = InvalidContributorNameError("", "le nom est vide")

        assert exc.code == "INVALID_CONTRIBUTOR_NAME"
        assert "le nom est vide" in exc.message

    def test_invalid_price_keeps_value(self):
        exc = InvalidPriceError(-3)

        assert exc.invalid_value == -3
        assert isinstance(exc, DomainException)
