"""
Synchronous SQLAlchemy engine and session management.

Small counterpart of an application's data-access layer: enough to run
filtered statements against a database, including the in-memory SQLite
database used by the test suite.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from rich.console import Console
from sqlalchemy import Engine, MetaData, create_engine, text
from sqlalchemy.exc import DisconnectionError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from scopefilters.config import is_memory_url, settings
from scopefilters.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# Rich console for output
console = Console(stderr=True)


class DatabaseManager:
    """
    Database manager for synchronous SQLAlchemy operations.

    Features:
    - Thread-safe, idempotent initialization
    - StaticPool for in-memory SQLite so every session sees one database
    - Session context manager with rollback on error
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self._url = url or settings.database_url
        self._echo = settings.database_echo if echo is None else echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._is_initialized: bool = False
        self._lock = threading.RLock()

    def initialize(self) -> None:
        """
        Initialize the engine and session factory.

        Safe to call multiple times; later calls are no-ops.
        """
        with self._lock:
            if self._is_initialized:
                return

            try:
                self._create_engine()
                self._session_factory = sessionmaker(
                    bind=self._engine,
                    autoflush=False,
                    expire_on_commit=False,
                )
                self._test_connection()
                self._is_initialized = True
                logger.info(f"Database initialized ({self._engine.dialect.name})")

            except Exception as e:
                console.print(f"[red]Database initialization failed:[/red] {e}")
                self._cleanup_resources()
                raise

    def _create_engine(self) -> None:
        engine_kwargs: Dict[str, Any] = {"url": self._url, "echo": self._echo}

        if is_memory_url(self._url):
            engine_kwargs.update(
                {
                    "poolclass": StaticPool,
                    "connect_args": {"check_same_thread": False},
                }
            )

        self._engine = create_engine(**engine_kwargs)

    def _test_connection(self) -> None:
        with self._engine.connect() as conn:
            if conn.execute(text("SELECT 1")).scalar_one() != 1:
                raise RuntimeError("Database connection test failed")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with rollback on error and guaranteed close.

        Raises:
            DatabaseError: If the manager is not initialized
        """
        if not self._is_initialized or not self._session_factory:
            raise DatabaseError("Database not initialized. Call initialize() first.")

        session = self._session_factory()

        try:
            yield session

        except (DisconnectionError, OperationalError):
            session.rollback()
            logger.warning("Database connection error, session rolled back")
            raise

        except SQLAlchemyError:
            session.rollback()
            raise

        except Exception:
            session.rollback()
            raise

        finally:
            session.close()

    def create_all(self, metadata: MetaData) -> None:
        """Create every table in ``metadata``. Safe to call repeatedly."""
        if not self._engine:
            raise DatabaseError("Database engine not initialized")

        try:
            metadata.create_all(bind=self._engine)
        except Exception as e:
            console.print(f"[red]Failed to create database tables:[/red] {e}")
            raise

    def scalars(self, statement: Any) -> list:
        """Execute ``statement`` in a fresh session and return all scalars."""
        with self.get_session() as session:
            return list(session.scalars(statement).all())

    def close(self) -> None:
        """Dispose of the engine. Safe to call multiple times."""
        with self._lock:
            if not self._is_initialized:
                return

            self._cleanup_resources()

    def _cleanup_resources(self) -> None:
        if self._engine:
            self._engine.dispose()
            self._engine = None

        self._session_factory = None
        self._is_initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if database is initialized and ready for use."""
        return self._is_initialized

    @property
    def engine(self) -> Optional[Engine]:
        """Get the SQLAlchemy engine (for advanced use cases)."""
        return self._engine

    @property
    def url(self) -> str:
        return self._url
