import uuid

from sqlalchemy import Column, Text, TIMESTAMP, JSON, Index, func

from .base import Base


class EventRow(Base):
    __tablename__ = 'event_details'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))

    event_name = Column(Text, nullable=False)
    description = Column(Text)
    location = Column(Text, nullable=False)  # free text, e.g. "Houston, TX 77002"
    required_skills = Column(JSON, nullable=False, default=list)
    urgency = Column(Text, nullable=False, default='medium')  # low|medium|high|urgent
    event_date = Column(TIMESTAMP(timezone=False), nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_event_details_date', 'event_date'),
    )
