import uuid

from sqlalchemy.orm import declarative_base

from core.utils import utc_now

Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


def now_utc():
    return utc_now()
