"""
Tests unitaires pour les entites du domaine.
"""

from decimal import Decimal

import pytest

from portal.domain.entities.contributor import Contributor
from portal.domain.entities.product import Product
from portal.domain.exceptions import (
    InvalidContributorNameError,
    InvalidContributorStatusError,
    InvalidPriceError,
    InvalidProductNameError,
)
from portal.domain.value_objects import ContributorStatus, PhoneNumber


class TestContributor:
    """Tests pour l'entite Contributor."""

    def test_create_defaults(self):
        """create() sans statut donne NOT_SET, sans ID ni telephone."""
        contributor = Contributor.create("Ada Lovelace")

        assert contributor.id is None
        assert contributor.name == "Ada Lovelace"
        assert contributor.status is ContributorStatus.NOT_SET
        assert contributor.phone_number is None
        assert not contributor.is_persisted

    def test_create_strips_name(self):
        """Le nom est normalise (espaces retires)."""
        contributor = Contributor.create("  Grace Hopper  ")

        assert contributor.name == "Grace Hopper"

    def test_create_accepts_status_string(self):
        """Le statut peut etre passe en chaine."""
        contributor = Contributor.create("Linus", status="community")

        assert contributor.status is ContributorStatus.COMMUNITY

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_create_rejects_blank_name(self, name):
        """Un nom vide est refuse."""
        with pytest.raises(InvalidContributorNameError):
            Contributor.create(name)

    def test_create_rejects_long_name(self):
        """Un nom de plus de 100 caracteres est refuse."""
        with pytest.raises(InvalidContributorNameError):
            Contributor.create("x" * 101)

    def test_create_rejects_unknown_status(self):
        """Un statut inconnu est refuse."""
        with pytest.raises(InvalidContributorStatusError):
            Contributor.create("Ada", status="emeritus")

    def test_update_name(self, persisted_contributor):
        """update_name remplace le nom et met a jour updated_at."""
        before = persisted_contributor.updated_at

        persisted_contributor.update_name("Ada King")

        assert persisted_contributor.name == "Ada King"
        assert persisted_contributor.updated_at >= before

    def test_update_name_invalid_keeps_old_name(self, persisted_contributor):
        """Un nom invalide laisse l'entite inchangee."""
        with pytest.raises(InvalidContributorNameError):
            persisted_contributor.update_name("  ")

        assert persisted_contributor.name == "Ada Lovelace"

    def test_set_status_and_phone(self, persisted_contributor):
        """set_status et set_phone_number modifient l'entite."""
        persisted_contributor.set_status("community")
        persisted_contributor.set_phone_number(None)

        assert persisted_contributor.status is ContributorStatus.COMMUNITY
        assert persisted_contributor.phone_number is None

    def test_equality_by_id(self):
        """Deux contributeurs avec le meme ID sont egaux."""
        a = Contributor(id=7, name="A")
        b = Contributor(id=7, name="B")

        assert a == b
        assert hash(a) == hash(b)

    def test_unsaved_contributors_not_equal(self):
        """Deux contributeurs sans ID ne sont egaux qu'a eux-memes."""
        a = Contributor.create("Same")
        b = Contributor.create("Same")

        assert a != b
        assert a == a


class TestProduct:
    """Tests pour l'entite Product."""

    def test_create_quantizes_price(self):
        """Le prix est arrondi a deux decimales."""
        product = Product.create("Souris", "19.999")

        assert product.price == Decimal("20.00")
        assert product.id is None

    def test_create_accepts_zero_price(self):
        """Un prix nul est valide."""
        assert Product.create("Sticker", 0).price == Decimal("0.00")

    @pytest.mark.parametrize("price", [-1, "abc", None, "NaN", True])
    def test_create_rejects_invalid_price(self, price):
        """Prix negatif ou non numerique refuse."""
        with pytest.raises(InvalidPriceError):
            Product.create("Souris", price)

    @pytest.mark.parametrize("price", [Decimal("1e30"), "1" * 40])
    def test_create_rejects_price_beyond_decimal_precision(self, price):
        """Un prix trop long pour etre arrondi est refuse (pas de crash)."""
        with pytest.raises(InvalidPriceError):
            Product.create("Souris", price)

    def test_max_price_bound(self):
        """Le prix est borne par la colonne Numeric(10, 2)."""
        assert Product.create("Serveur", Product.MAX_PRICE).price == Decimal("99999999.99")

        with pytest.raises(InvalidPriceError):
            Product.create("Serveur", "100000000")
        with pytest.raises(InvalidPriceError):
            Product.create("Serveur", "99999999.995")

    def test_change_price_beyond_bound_keeps_old_price(self, sample_product):
        with pytest.raises(InvalidPriceError):
            sample_product.change_price("1234567890123456.78")

        assert sample_product.price == Decimal("89.90")

    def test_create_rejects_blank_name(self):
        """Un nom vide est refuse."""
        with pytest.raises(InvalidProductNameError):
            Product.create(" ", 10)

    def test_rename_and_change_price(self, sample_product):
        """rename et change_price mettent a jour le produit."""
        sample_product.rename("Clavier sans fil")
        sample_product.change_price("59.5")

        assert sample_product.name == "Clavier sans fil"
        assert sample_product.price == Decimal("59.50")
