from sqlalchemy.orm import Session


class BaseRepository:
    """Read-side repository bound to a caller-owned session.

    Transactions belong to the unit of work (database.uow), never to a
    repository.
    """

    def __init__(self, db: Session):
        self.db = db
