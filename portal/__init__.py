"""
Contributor Portal - Architecture Clean / Hexagonale

Structure:
    - domain/: Coeur metier (entites, value objects, ports)
    - application/: Use cases, commandes, DTOs et Result
    - infrastructure/: Adapters (SQLAlchemy, memoire, config, logging)
    - presentation/: API REST (FastAPI)
"""

__version__ = "1.0.0"
