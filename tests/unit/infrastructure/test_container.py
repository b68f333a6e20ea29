"""
Tests unitaires pour le Container d'injection de dependances.
"""

from unittest.mock import MagicMock

from portal.infrastructure.adapters import (
    MemoryContributorRepository,
    MemoryProductRepository,
)
from portal.infrastructure.container import Container
from portal.infrastructure.persistence.sqlalchemy_contributor_repository import (
    SqlAlchemyContributorRepository,
)
from portal.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


class TestContainer:
    """Tests pour Container."""

    def test_create_in_memory(self) -> None:
        """Le conteneur in-memory n'a pas de DatabaseManager."""
        container = Container.create_in_memory()

        assert isinstance(container.contributor_repository, MemoryContributorRepository)
        assert isinstance(container.product_repository, MemoryProductRepository)
        assert container.db_manager is None

    def test_create_with_db_manager(self) -> None:
        """Les adapters SQLAlchemy partagent le DatabaseManager."""
        mock_db = MagicMock()

        container = Container.create(mock_db)

        assert isinstance(container.contributor_repository, SqlAlchemyContributorRepository)
        assert isinstance(container.product_repository, SqlAlchemyProductRepository)
        assert container.contributor_repository._db is mock_db
        assert container.product_repository._db is mock_db
        assert container.db_manager is mock_db

    def test_use_cases_share_repository(self) -> None:
        """Tous les use cases d'une entite utilisent le meme repository."""
        container = Container.create_in_memory()

        repo = container.contributor_repository
        assert container.create_contributor._repository is repo
        assert container.get_contributor._repository is repo
        assert container.list_contributors._repository is repo
        assert container.update_contributor._repository is repo
        assert container.delete_contributor._repository is repo
        assert container.get_product._repository is container.product_repository

    def test_create_from_database_url(self) -> None:
        container = Container.create_from_database_url("sqlite://")

        assert container.db_manager is not None
        assert container.db_manager.database_url == "sqlite://"
        container.db_manager.dispose()
