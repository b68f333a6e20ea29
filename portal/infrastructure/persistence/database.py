"""
DatabaseManager - Gestion de la connexion a la base de donnees.

Ce module fait partie de la couche Infrastructure (Adapters). Il encapsule
le moteur SQLAlchemy et fournit des sessions transactionnelles aux
repositories.

Transactions:
-------------
get_session() est un context manager:
- commit automatique si le bloc se termine sans exception
- rollback automatique sinon (aucun etat partiel visible)

Connection Pooling:
-------------------
Pour les bases serveur (PostgreSQL, SQL Server...):
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min (evite timeout)
- pool_pre_ping=True: Verification avant utilisation

SQLite:
-------
- check_same_thread=False (endpoints executes dans le threadpool)
- base en memoire: StaticPool (une seule connexion partagee)
"""
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from portal.infrastructure.logging import get_logger
from portal.infrastructure.persistence.models import Base

logger = get_logger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./portal.db"


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base de donnees.

    Attributes:
        engine: Moteur SQLAlchemy.
        SessionLocal: Factory de sessions configuree.

    Example:
        >>> db = DatabaseManager("sqlite://")
        >>> db.create_tables()
        >>> with db.get_session() as session:
        ...     session.query(ContributorModel).count()
        0
    """

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or DEFAULT_DATABASE_URL
        self.engine = create_engine(
            self.database_url,
            **self._engine_options(self.database_url),
        )
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    @staticmethod
    def _engine_options(database_url: str) -> Dict[str, Any]:
        """Options du moteur selon le backend."""
        url = make_url(database_url)

        if url.get_backend_name() == "sqlite":
            options: Dict[str, Any] = {
                "connect_args": {"check_same_thread": False},
                "echo": False,
            }
            if url.database in (None, "", ":memory:"):
                options["poolclass"] = StaticPool
            return options

        return {
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
            "pool_timeout": 30,
            "pool_recycle": 1800,
            "echo": False,
        }

    def create_tables(self) -> None:
        """Cree toutes les tables si elles n'existent pas."""
        Base.metadata.create_all(self.engine)
        logger.info("database_tables_ready", backend=self.engine.url.get_backend_name())

    def drop_tables(self) -> None:
        """Supprime toutes les tables (tests uniquement)."""
        Base.metadata.drop_all(self.engine)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self.engine.dispose()
