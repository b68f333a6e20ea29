"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - use_cases/: Cas d'utilisation (contributeurs, produits)
    - dto: Data Transfer Objects
    - result: Type de retour des use cases

Principes:
    - Depend uniquement du domaine
    - Utilise les ports definis par le domaine
"""

from portal.application.dto import ContributorDTO, PagedList, ProductDTO
from portal.application.result import Result, ResultStatus

__all__ = [
    "ContributorDTO",
    "ProductDTO",
    "PagedList",
    "Result",
    "ResultStatus",
]
