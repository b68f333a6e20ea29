"""
Presentation Layer - Points d'entree de l'application.

Ce module contient:
    - api/: API REST FastAPI (routers, schemas, dependances, erreurs)
"""
