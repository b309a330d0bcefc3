#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.matching import MatchingService
from database.repositories import SqlMatchingDataSource
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self):
        config = get_config()
        self.engine = create_engine(
            config.database.url,
            pool_pre_ping=True,  # Verify connections before using
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from _db_manager.get_session()


def get_matching_service(db: Session = Depends(get_db)) -> MatchingService:
    """
    FastAPI dependency that builds a MatchingService over a fresh session.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(service: MatchingService = Depends(get_matching_service)):
            ...
    """
    return MatchingService(SqlMatchingDataSource(db), get_config().matching)
