"""
Tests unitaires pour les repositories in-memory.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from portal.domain.entities.contributor import Contributor
from portal.domain.exceptions import ContributorNotFoundError, ProductNotFoundError


class TestMemoryContributorRepository:
    """Tests pour MemoryContributorRepository."""

    def test_add_assigns_incrementing_ids(self, contributor_repository):
        first = contributor_repository.add(Contributor.create("A"))
        second = contributor_repository.add(Contributor.create("B"))

        assert (first.id, second.id) == (1, 2)
        assert contributor_repository.count() == 2

    def test_get_by_id_returns_copy(self, contributor_repository, sample_contributor):
        """Modifier l'entite lue ne modifie pas le store."""
        contributor_repository.add(sample_contributor)

        loaded = contributor_repository.get_by_id(sample_contributor.id)
        loaded.update_name("Changed")

        assert contributor_repository.get_by_id(sample_contributor.id).name == "Ada Lovelace"

    def test_get_by_id_unknown_raises(self, contributor_repository):
        with pytest.raises(ContributorNotFoundError):
            contributor_repository.get_by_id(123)

    def test_update_persists_changes(self, contributor_repository, sample_contributor):
        contributor_repository.add(sample_contributor)
        loaded = contributor_repository.get_by_id(sample_contributor.id)
        loaded.update_name("Ada King")

        contributor_repository.update(loaded)

        assert contributor_repository.get_by_id(loaded.id).name == "Ada King"

    def test_update_unknown_raises(self, contributor_repository):
        with pytest.raises(ContributorNotFoundError):
            contributor_repository.update(Contributor(id=9, name="Ghost"))

    def test_delete(self, contributor_repository, sample_contributor):
        contributor_repository.add(sample_contributor)

        contributor_repository.delete(sample_contributor.id)

        assert contributor_repository.count() == 0
        with pytest.raises(ContributorNotFoundError):
            contributor_repository.delete(sample_contributor.id)

    def test_list_skip_take(self, contributor_repository):
        for name in ["A", "B", "C", "D"]:
            contributor_repository.add(Contributor.create(name))

        page = contributor_repository.list(skip=1, take=2)

        assert [c.name for c in page] == ["B", "C"]
        assert len(contributor_repository.list()) == 4

    def test_clear(self, contributor_repository, sample_contributor):
        contributor_repository.add(sample_contributor)

        contributor_repository.clear()

        assert contributor_repository.count() == 0

    def test_concurrent_adds_get_unique_ids(self, contributor_repository):
        """Les ajouts concurrents recoivent des IDs distincts."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            added = list(pool.map(
                lambda i: contributor_repository.add(Contributor.create(f"C{i}")),
                range(50),
            ))

        assert len({c.id for c in added}) == 50
        assert contributor_repository.count() == 50


class TestMemoryProductRepository:
    """Tests pour MemoryProductRepository."""

    def test_crud(self, product_repository, sample_product):
        product_repository.add(sample_product)
        loaded = product_repository.get_by_id(sample_product.id)
        loaded.change_price(10)
        product_repository.update(loaded)

        assert product_repository.get_by_id(sample_product.id).price == loaded.price

        product_repository.delete(sample_product.id)
        with pytest.raises(ProductNotFoundError):
            product_repository.get_by_id(sample_product.id)

    def test_clear(self, product_repository, sample_product):
        product_repository.add(sample_product)

        product_repository.clear()

        assert product_repository.count() == 0
        assert product_repository.list() == []
