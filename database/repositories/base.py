from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories of one unit of work share its Session; the unit of work commits."""

    def __init__(self, db: Session):
        self.db = db
