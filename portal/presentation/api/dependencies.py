"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir le conteneur (repositories, use cases) aux endpoints.
Le conteneur est cree par create_app() et stocke dans app.state.

Usage:
------
    @router.get("/{contributor_id}")
    def get_contributor(contributor_id: int, container: Container = Depends(get_container)):
        return container.get_contributor.execute(...)
"""

from fastapi import Request

from portal.infrastructure.container import Container


def get_container(request: Request) -> Container:
    """Retourne le Container de l'application."""
    return request.app.state.container
