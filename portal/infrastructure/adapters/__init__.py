"""
Adapters in-memory.

Implementations des ports du domaine sans base de donnees,
pour le developpement et les tests:
- MemoryContributorRepository
- MemoryProductRepository
"""

from portal.infrastructure.adapters.memory_contributor_repository import (
    MemoryContributorRepository,
)
from portal.infrastructure.adapters.memory_product_repository import (
    MemoryProductRepository,
)

__all__ = [
    "MemoryContributorRepository",
    "MemoryProductRepository",
]
