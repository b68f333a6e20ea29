"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte
les repositories et les use cases de l'architecture hexagonale.
"""

from dataclasses import dataclass
from typing import Optional

from portal.application.use_cases.contributors import (
    CreateContributorUseCase,
    DeleteContributorUseCase,
    GetContributorUseCase,
    ListContributorsUseCase,
    UpdateContributorUseCase,
)
from portal.application.use_cases.products import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from portal.domain.ports.contributor_repository import ContributorRepository
from portal.domain.ports.product_repository import ProductRepository
from portal.infrastructure.adapters import (
    MemoryContributorRepository,
    MemoryProductRepository,
)
from portal.infrastructure.persistence.database import DatabaseManager
from portal.infrastructure.persistence.sqlalchemy_contributor_repository import (
    SqlAlchemyContributorRepository,
)
from portal.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Expose les repositories et un use case par operation.

    Example:
        >>> db = DatabaseManager("sqlite://")
        >>> container = Container.create(db)
        >>> result = container.get_contributor.execute(GetContributorQuery(1))
    """

    # Repositories
    contributor_repository: ContributorRepository
    product_repository: ProductRepository

    # Use Cases - contributeurs
    create_contributor: CreateContributorUseCase
    get_contributor: GetContributorUseCase
    list_contributors: ListContributorsUseCase
    update_contributor: UpdateContributorUseCase
    delete_contributor: DeleteContributorUseCase

    # Use Cases - produits
    create_product: CreateProductUseCase
    get_product: GetProductUseCase
    list_products: ListProductsUseCase
    update_product: UpdateProductUseCase
    delete_product: DeleteProductUseCase

    # Infrastructure (None pour le conteneur in-memory)
    db_manager: Optional[DatabaseManager] = None

    @classmethod
    def from_repositories(
        cls,
        contributor_repository: ContributorRepository,
        product_repository: ProductRepository,
        db_manager: Optional[DatabaseManager] = None,
    ) -> "Container":
        """
        Construit les use cases autour de repositories donnes.

        Args:
            contributor_repository: Repository contributeurs.
            product_repository: Repository produits.
            db_manager: DatabaseManager associe (optionnel).

        Returns:
            Container configure.
        """
        return cls(
            contributor_repository=contributor_repository,
            product_repository=product_repository,
            create_contributor=CreateContributorUseCase(contributor_repository),
            get_contributor=GetContributorUseCase(contributor_repository),
            list_contributors=ListContributorsUseCase(contributor_repository),
            update_contributor=UpdateContributorUseCase(contributor_repository),
            delete_contributor=DeleteContributorUseCase(contributor_repository),
            create_product=CreateProductUseCase(product_repository),
            get_product=GetProductUseCase(product_repository),
            list_products=ListProductsUseCase(product_repository),
            update_product=UpdateProductUseCase(product_repository),
            delete_product=DeleteProductUseCase(product_repository),
            db_manager=db_manager,
        )

    @classmethod
    def create(cls, db_manager: DatabaseManager) -> "Container":
        """
        Factory avec les adapters SQLAlchemy.

        Args:
            db_manager: Instance de DatabaseManager.
        """
        return cls.from_repositories(
            contributor_repository=SqlAlchemyContributorRepository(db_manager),
            product_repository=SqlAlchemyProductRepository(db_manager),
            db_manager=db_manager,
        )

    @classmethod
    def create_in_memory(cls) -> "Container":
        """Factory avec les adapters in-memory (dev/tests)."""
        return cls.from_repositories(
            contributor_repository=MemoryContributorRepository(),
            product_repository=MemoryProductRepository(),
        )

    @classmethod
    def create_from_database_url(cls, database_url: str) -> "Container":
        """
        Cree un conteneur depuis une URL de base de donnees.

        Args:
            database_url: Chaine de connexion SQLAlchemy.
        """
        return cls.create(DatabaseManager(database_url))
