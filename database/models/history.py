import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Index, func

from .base import Base


class VolunteerHistoryRow(Base):
    """
    A volunteer/event pairing (assignment) and its participation status.

    Any row, whatever its status, makes the pair ineligible for matching.
    """
    __tablename__ = 'volunteer_history'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(Text, nullable=False)
    event_id = Column(Text, ForeignKey('event_details.id', ondelete='CASCADE'), nullable=False)

    participant_status = Column(Text, nullable=False, default='pending')  # pending|confirmed|cancelled|no-show
    registration_date = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_volunteer_history_user', 'user_id'),
        Index('idx_volunteer_history_event', 'event_id'),
    )
