from typing import List, Optional

from sqlalchemy import select

from database.models import VolunteerProfileRow
from database.repositories.base import BaseRepository


class VolunteerRepository(BaseRepository):
    def get_by_user_id(self, user_id: str) -> Optional[VolunteerProfileRow]:
        stmt = select(VolunteerProfileRow).where(VolunteerProfileRow.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_all(self) -> List[VolunteerProfileRow]:
        # Stable order so per-event ties resolve the same way on every call
        stmt = select(VolunteerProfileRow).order_by(
            VolunteerProfileRow.created_at, VolunteerProfileRow.id
        )
        return self.db.execute(stmt).scalars().all()
