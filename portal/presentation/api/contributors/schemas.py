"""
Contributors Schemas - Modeles Pydantic pour les endpoints contributors.

Responsabilite unique:
----------------------
Definir les schemas de requete/reponse pour la gestion des contributeurs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ContributorResponse(BaseModel):
    """Representation d'un contributeur."""

    id: int
    name: str
    status: str
    phone_number: Optional[str] = None


class ContributorListResponse(BaseModel):
    """Liste paginee de contributeurs."""

    items: list[ContributorResponse]
    total: int
    page: int
    page_size: int
    pages: int


class CreateContributorRequest(BaseModel):
    """Requete de creation de contributeur."""

    name: str = Field(..., min_length=1, max_length=100, description="Nom du contributeur")
    status: str = Field(default="not_set", description="Statut (not_set, core_team, community)")
    phone_number: Optional[str] = Field(
        default=None,
        description="Telephone: '<indicatif> <numero> [x<extension>]'",
        examples=["+33 612345678"],
    )


class UpdateContributorRequest(BaseModel):
    """Requete de renommage d'un contributeur."""

    name: str = Field(..., min_length=1, max_length=100, description="Nouveau nom")
