"""
Infrastructure Layer - Adapters vers le monde exterieur.

Ce module contient:
    - persistence/: SQLAlchemy (DatabaseManager, modeles, repositories)
    - adapters/: Repositories in-memory
    - config/: Settings pydantic
    - logging/: Logging structure (structlog)
    - container: Injection de dependances
"""
