"""
Contributors Router - Endpoints CRUD pour les contributeurs.

Responsabilite unique:
----------------------
Recevoir la requete, deleguer a un use case, traduire le Result
en reponse HTTP.

Endpoints:
----------
- GET /contributors: Lister les contributeurs (pagine)
- GET /contributors/{id}: Recuperer un contributeur
- POST /contributors: Creer un contributeur
- PUT /contributors/{id}: Renommer un contributeur
- DELETE /contributors/{id}: Supprimer un contributeur
"""

from math import ceil

from fastapi import APIRouter, Depends, Query, status

from portal.application.dto import ContributorDTO
from portal.application.use_cases.contributors import (
    CreateContributorCommand,
    DeleteContributorCommand,
    GetContributorQuery,
    ListContributorsQuery,
    UpdateContributorCommand,
)
from portal.infrastructure.container import Container
from portal.infrastructure.logging import get_logger
from portal.presentation.api.contributors.schemas import (
    ContributorListResponse,
    ContributorResponse,
    CreateContributorRequest,
    UpdateContributorRequest,
)
from portal.presentation.api.dependencies import get_container
from portal.presentation.api.errors import raise_for_result

logger = get_logger(__name__)

router = APIRouter(prefix="/contributors", tags=["Contributors"])


def _dto_to_response(dto: ContributorDTO) -> ContributorResponse:
    """Convertit un ContributorDTO en ContributorResponse."""
    return ContributorResponse(
        id=dto.id,
        name=dto.name,
        status=dto.status,
        phone_number=dto.phone_number,
    )


# ============ Endpoints ============

@router.get(
    "",
    response_model=ContributorListResponse,
    summary="Lister les contributeurs",
    description="Retourne les contributeurs avec pagination.",
)
def list_contributors(
    page: int = Query(1, ge=1, description="Numero de page"),
    page_size: int = Query(20, ge=1, le=100, description="Taille de page"),
    container: Container = Depends(get_container),
):
    """
    Liste les contributeurs avec pagination.
    """
    result = container.list_contributors.execute(ListContributorsQuery(
        skip=(page - 1) * page_size,
        take=page_size,
    ))
    raise_for_result(result)

    paged = result.value
    return ContributorListResponse(
        items=[_dto_to_response(dto) for dto in paged.items],
        total=paged.total,
        page=page,
        page_size=page_size,
        pages=ceil(paged.total / page_size),
    )


@router.get(
    "/{contributor_id}",
    response_model=ContributorResponse,
    summary="Recuperer un contributeur",
    description="Retourne un contributeur par son ID (404 si inconnu).",
)
def get_contributor(
    contributor_id: int,
    container: Container = Depends(get_container),
):
    """
    Recupere un contributeur par son ID.
    """
    result = container.get_contributor.execute(GetContributorQuery(contributor_id))
    raise_for_result(result)

    return _dto_to_response(result.value)


@router.post(
    "",
    response_model=ContributorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creer un contributeur",
)
def create_contributor(
    data: CreateContributorRequest,
    container: Container = Depends(get_container),
):
    """
    Cree un nouveau contributeur.
    """
    result = container.create_contributor.execute(CreateContributorCommand(
        name=data.name,
        status=data.status,
        phone_number=data.phone_number,
    ))
    raise_for_result(result)

    logger.info("contributor_created", contributor_id=result.value.id)

    return _dto_to_response(result.value)


@router.put(
    "/{contributor_id}",
    response_model=ContributorResponse,
    summary="Renommer un contributeur",
)
def update_contributor(
    contributor_id: int,
    data: UpdateContributorRequest,
    container: Container = Depends(get_container),
):
    """
    Met a jour le nom d'un contributeur.
    """
    result = container.update_contributor.execute(UpdateContributorCommand(
        contributor_id=contributor_id,
        new_name=data.name,
    ))
    raise_for_result(result)

    logger.info("contributor_updated", contributor_id=contributor_id)

    return _dto_to_response(result.value)


@router.delete(
    "/{contributor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Supprimer un contributeur",
)
def delete_contributor(
    contributor_id: int,
    container: Container = Depends(get_container),
):
    """
    Supprime un contributeur.
    """
    result = container.delete_contributor.execute(
        DeleteContributorCommand(contributor_id)
    )
    raise_for_result(result)

    logger.info("contributor_deleted", contributor_id=contributor_id)
