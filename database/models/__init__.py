from .base import Base
from .volunteer import VolunteerProfileRow
from .event import EventRow
from .history import VolunteerHistoryRow

__all__ = [
    'Base',
    'VolunteerProfileRow',
    'EventRow',
    'VolunteerHistoryRow',
]
