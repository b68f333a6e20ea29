"""
Tests d'integration pour les repositories SQLAlchemy (SQLite en memoire).
"""

from decimal import Decimal

import pytest

from portal.domain.entities.contributor import Contributor
from portal.domain.entities.product import Product
from portal.domain.exceptions import ContributorNotFoundError, ProductNotFoundError
from portal.domain.value_objects import ContributorStatus, PhoneNumber
from portal.infrastructure.persistence import (
    ContributorModel,
    SqlAlchemyContributorRepository,
    SqlAlchemyProductRepository,
    seed_database,
)


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def contributors(db_manager) -> SqlAlchemyContributorRepository:
    return SqlAlchemyContributorRepository(db_manager)


@pytest.fixture
def products(db_manager) -> SqlAlchemyProductRepository:
    return SqlAlchemyProductRepository(db_manager)


# ============================================================
# Tests contributeurs
# ============================================================


class TestSqlAlchemyContributorRepository:
    """Tests pour SqlAlchemyContributorRepository."""

    def test_add_assigns_id(self, contributors, sample_contributor):
        saved = contributors.add(sample_contributor)

        assert saved.id is not None
        assert contributors.count() == 1

    def test_round_trip_with_phone(self, contributors):
        """Statut et telephone (avec extension) sont relus a l'identique."""
        contributor = Contributor.create(
            "Grace Hopper",
            status=ContributorStatus.COMMUNITY,
            phone_number=PhoneNumber("1", "555 555 1234", "42"),
        )
        contributors.add(contributor)

        loaded = contributors.get_by_id(contributor.id)

        assert loaded.name == "Grace Hopper"
        assert loaded.status is ContributorStatus.COMMUNITY
        assert loaded.phone_number == PhoneNumber("+1", "5555551234", "42")

    def test_round_trip_without_phone(self, contributors):
        contributor = contributors.add(Contributor.create("Linus"))

        loaded = contributors.get_by_id(contributor.id)

        assert loaded.phone_number is None
        assert loaded.status is ContributorStatus.NOT_SET

    def test_get_unknown_raises(self, contributors):
        with pytest.raises(ContributorNotFoundError):
            contributors.get_by_id(404)

    def test_update(self, contributors, sample_contributor):
        contributors.add(sample_contributor)
        loaded = contributors.get_by_id(sample_contributor.id)
        loaded.update_name("Ada King")
        loaded.set_phone_number(None)

        contributors.update(loaded)

        reloaded = contributors.get_by_id(sample_contributor.id)
        assert reloaded.name == "Ada King"
        assert reloaded.phone_number is None

    def test_update_unknown_raises(self, contributors):
        with pytest.raises(ContributorNotFoundError):
            contributors.update(Contributor(id=77, name="Ghost"))

    def test_delete(self, contributors, sample_contributor):
        contributors.add(sample_contributor)

        contributors.delete(sample_contributor.id)

        assert contributors.count() == 0
        with pytest.raises(ContributorNotFoundError):
            contributors.delete(sample_contributor.id)

    def test_list_ordered_with_pagination(self, contributors):
        for name in ["A", "B", "C"]:
            contributors.add(Contributor.create(name))

        assert [c.name for c in contributors.list()] == ["A", "B", "C"]
        assert [c.name for c in contributors.list(skip=1, take=1)] == ["B"]


# ============================================================
# Tests produits
# ============================================================


class TestSqlAlchemyProductRepository:
    """Tests pour SqlAlchemyProductRepository."""

    def test_price_round_trip(self, products):
        product = products.add(Product.create("Livre", Decimal("29.99")))

        loaded = products.get_by_id(product.id)

        assert loaded.price == Decimal("29.99")
        assert isinstance(loaded.price, Decimal)

    def test_max_price_round_trip(self, products):
        """Le prix maximal accepte par le domaine tient dans la colonne."""
        product = products.add(Product.create("Serveur", Product.MAX_PRICE))

        assert products.get_by_id(product.id).price == Decimal("99999999.99")

    def test_update_and_delete(self, products, sample_product):
        products.add(sample_product)
        loaded = products.get_by_id(sample_product.id)
        loaded.rename("Clavier 60%")
        loaded.change_price(Decimal("75"))
        products.update(loaded)

        reloaded = products.get_by_id(sample_product.id)
        assert reloaded.name == "Clavier 60%"
        assert reloaded.price == Decimal("75.00")

        products.delete(sample_product.id)
        with pytest.raises(ProductNotFoundError):
            products.get_by_id(sample_product.id)


# ============================================================
# Tests transactions et seed
# ============================================================


class TestDatabaseManager:
    """Tests pour DatabaseManager."""

    def test_rollback_leaves_no_partial_state(self, db_manager, contributors):
        """Une exception dans la session annule toute la transaction."""
        with pytest.raises(RuntimeError):
            with db_manager.get_session() as session:
                session.add(ContributorModel(name="Partial", status="not_set"))
                session.flush()
                raise RuntimeError("boom")

        assert contributors.count() == 0

    def test_seed_only_when_empty(self, contributors, products):
        first = seed_database(contributors, products)
        second = seed_database(contributors, products)

        assert first == 3
        assert second == 0
        assert [c.name for c in contributors.list()] == ["Ardalis", "Snowfrog"]
        assert products.list()[0].price == Decimal("29.99")
