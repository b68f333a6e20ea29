"""
API REST - FastAPI.

Presentation layer: chaque endpoint delegue a un use case
et traduit le Result en reponse HTTP.

Routers disponibles:
--------------------
- contributors: CRUD contributeurs
- products: CRUD produits

Usage:
------
    uvicorn portal.presentation.api.main:app --reload
"""
