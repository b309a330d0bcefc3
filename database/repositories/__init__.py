from database.repositories.base import BaseRepository
from database.repositories.volunteer import VolunteerRepository
from database.repositories.event import EventRepository
from database.repositories.history import VolunteerHistoryRepository
from database.repositories.source import SqlMatchingDataSource

__all__ = [
    'BaseRepository',
    'VolunteerRepository',
    'EventRepository',
    'VolunteerHistoryRepository',
    'SqlMatchingDataSource',
]
