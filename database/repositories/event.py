from typing import List, Optional

from sqlalchemy import select

from database.models import EventRow
from database.repositories.base import BaseRepository


class EventRepository(BaseRepository):
    def get_by_id(self, event_id: str) -> Optional[EventRow]:
        stmt = select(EventRow).where(EventRow.id == event_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_all(self) -> List[EventRow]:
        stmt = select(EventRow).order_by(EventRow.event_date, EventRow.id)
        return self.db.execute(stmt).scalars().all()
