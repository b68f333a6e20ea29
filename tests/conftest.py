"""
Configuration et fixtures pytest.
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from portal.domain.entities.contributor import Contributor
from portal.domain.entities.product import Product
from portal.domain.value_objects import ContributorStatus, PhoneNumber
from portal.infrastructure.adapters import (
    MemoryContributorRepository,
    MemoryProductRepository,
)
from portal.infrastructure.config import Settings
from portal.infrastructure.persistence.database import DatabaseManager

# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITIES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_phone() -> PhoneNumber:
    """Numero de telephone valide."""
    return PhoneNumber("+33", "612345678")


@pytest.fixture
def sample_contributor(sample_phone: PhoneNumber) -> Contributor:
    """Contributeur non persiste."""
    return Contributor.create(
        "Ada Lovelace",
        status=ContributorStatus.CORE_TEAM,
        phone_number=sample_phone,
    )


@pytest.fixture
def persisted_contributor(sample_phone: PhoneNumber) -> Contributor:
    """Contributeur avec ID (comme retourne par un repository)."""
    return Contributor(
        id=1,
        name="Ada Lovelace",
        status=ContributorStatus.CORE_TEAM,
        phone_number=sample_phone,
    )


@pytest.fixture
def sample_product() -> Product:
    """Produit non persiste."""
    return Product.create("Clavier mecanique", Decimal("89.90"))


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - INFRASTRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def contributor_repository() -> MemoryContributorRepository:
    """Repository contributeurs en memoire."""
    return MemoryContributorRepository()


@pytest.fixture
def product_repository() -> MemoryProductRepository:
    """Repository produits en memoire."""
    return MemoryProductRepository()


@pytest.fixture
def db_manager():
    """Base SQLite en memoire avec tables creees."""
    db = DatabaseManager("sqlite://")
    db.create_tables()
    yield db
    db.drop_tables()
    db.dispose()


@pytest.fixture
def test_settings() -> Settings:
    """Settings de test (SQLite en memoire, sans seed)."""
    return Settings(
        database_url="sqlite://",
        seed_data=False,
        log_level="WARNING",
    )
