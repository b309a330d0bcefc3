import contextlib
import logging

from database.database import SessionLocal
from database.repositories.source import SqlMatchingDataSource

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def matching_uow(session_factory=SessionLocal):
    """Per-unit-of-work read scope for one ranking call.

    Yields a SqlMatchingDataSource bound to a fresh Session so every call
    sees its own snapshot. Rolls back on exception, always closes.

    Usage:
        with matching_uow() as source:
            outcome = MatchingService(source).rank_volunteers_for_event(event_id)
    """
    session = session_factory()
    try:
        yield SqlMatchingDataSource(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
