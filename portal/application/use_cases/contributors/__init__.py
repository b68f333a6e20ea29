"""
Use Cases des contributeurs.

Chaque use case a une responsabilite unique:
- CreateContributorUseCase: Creer un contributeur
- GetContributorUseCase: Lire un contributeur par ID
- ListContributorsUseCase: Lister les contributeurs (pagine)
- UpdateContributorUseCase: Renommer un contributeur
- DeleteContributorUseCase: Supprimer un contributeur

Pattern Command:
----------------
Chaque use case recoit une commande (ou requete) immuable
et retourne un Result. Les dependances sont injectees via le constructeur.
"""

from portal.application.use_cases.contributors.create_contributor import (
    CreateContributorCommand,
    CreateContributorUseCase,
)
from portal.application.use_cases.contributors.delete_contributor import (
    DeleteContributorCommand,
    DeleteContributorUseCase,
)
from portal.application.use_cases.contributors.get_contributor import (
    GetContributorQuery,
    GetContributorUseCase,
)
from portal.application.use_cases.contributors.list_contributors import (
    ListContributorsQuery,
    ListContributorsUseCase,
)
from portal.application.use_cases.contributors.update_contributor import (
    UpdateContributorCommand,
    UpdateContributorUseCase,
)

__all__ = [
    "CreateContributorCommand",
    "CreateContributorUseCase",
    "GetContributorQuery",
    "GetContributorUseCase",
    "ListContributorsQuery",
    "ListContributorsUseCase",
    "UpdateContributorCommand",
    "UpdateContributorUseCase",
    "DeleteContributorCommand",
    "DeleteContributorUseCase",
]
