import uuid

from sqlalchemy import Column, Text, TIMESTAMP, JSON, Index, func

from .base import Base


class VolunteerProfileRow(Base):
    """
    Volunteer profile as stored by profile management.

    The matcher only reads it: skills and availability are JSON lists of
    strings, availability dates in YYYY-MM-DD form.
    """
    __tablename__ = 'volunteer_profile'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(Text, nullable=False, unique=True)  # volunteer identifier

    full_name = Column(Text, nullable=False)
    address1 = Column(Text)
    address2 = Column(Text)
    city = Column(Text)
    state = Column(Text)  # two-letter region code
    zip_code = Column(Text)

    skills = Column(JSON, nullable=False, default=list)
    preferences = Column(Text)
    availability = Column(JSON, nullable=False, default=list)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_volunteer_profile_state', 'state'),
        Index('idx_volunteer_profile_zip', 'zip_code'),
    )
