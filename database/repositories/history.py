from typing import List

from sqlalchemy import select

from database.models import VolunteerHistoryRow
from database.repositories.base import BaseRepository


class VolunteerHistoryRepository(BaseRepository):
    def get_by_user_id(self, user_id: str) -> List[VolunteerHistoryRow]:
        """All pairings for a volunteer, every status included."""
        stmt = select(VolunteerHistoryRow).where(
            VolunteerHistoryRow.user_id == user_id
        ).order_by(VolunteerHistoryRow.registration_date)
        return self.db.execute(stmt).scalars().all()
