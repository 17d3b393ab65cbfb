import logging
from typing import Optional

from tenacity import retry, stop_after_attempt, wait_fixed

from database.database import create_tables, get_engine, init_engine

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(url: Optional[str] = None, echo: bool = False):
    logger.info("Initializing database...")
    try:
        engine = init_engine(url, echo=echo) if url else get_engine()
        create_tables(engine)
        logger.info("Tables created or verified.")
        return engine
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise
