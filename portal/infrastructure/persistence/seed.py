"""
Donnees de demonstration.

Insere quelques contributeurs et produits au demarrage quand
les tables sont vides (SEED_DATA=true). Passe par les repositories
pour appliquer les memes regles que l'API.
"""

from decimal import Decimal

from portal.domain.entities.contributor import Contributor
from portal.domain.entities.product import Product
from portal.domain.ports.contributor_repository import ContributorRepository
from portal.domain.ports.product_repository import ProductRepository
from portal.domain.value_objects.contributor_status import ContributorStatus
from portal.domain.value_objects.phone_number import PhoneNumber
from portal.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _demo_contributors() -> list[Contributor]:
    return [
        Contributor.create(
            "Ardalis",
            status=ContributorStatus.CORE_TEAM,
            phone_number=PhoneNumber("+1", "5555551234"),
        ),
        Contributor.create("Snowfrog", status=ContributorStatus.COMMUNITY),
    ]


def _demo_products() -> list[Product]:
    return [
        Product.create("Clean Architecture Handbook", Decimal("29.99")),
    ]


def seed_database(
    contributors: ContributorRepository,
    products: ProductRepository,
) -> int:
    """
    Peuple les repositories vides.

    Args:
        contributors: Repository contributeurs.
        products: Repository produits.

    Returns:
        Nombre d'entites inserees (0 si deja peuple).
    """
    inserted = 0

    if contributors.count() == 0:
        for contributor in _demo_contributors():
            contributors.add(contributor)
            inserted += 1

    if products.count() == 0:
        for product in _demo_products():
            products.add(product)
            inserted += 1

    if inserted:
        logger.info("database_seeded", inserted=inserted)
    return inserted
