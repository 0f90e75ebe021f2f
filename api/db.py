# db.py
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from config import Settings

logger = logging.getLogger(__name__)

SPORTS_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS sports (
        sport VARCHAR(255) NOT NULL PRIMARY KEY,
        recommended_foods TEXT,
        avoid_foods TEXT
    )
"""


def build_db_url(settings: Settings):
    """
    SPORTS_DB_URL wins when set; otherwise the URL is assembled from the
    DB_* parts. A database name is required either way.
    """
    if settings.db_url:
        return settings.db_url

    if not settings.db_name:
        raise RuntimeError("SPORTS_DB_URL or DB_NAME must be set")

    return URL.create(
        settings.db_driver,
        username=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def create_db_engine(url, **engine_kwargs) -> Engine:
    """
    One shared connection for the whole process. Checkout waits for it with
    no timeout. In-memory SQLite gets a StaticPool so every request sees the
    same database.
    """
    url = make_url(url)

    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        options = {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    else:
        options = {
            "pool_pre_ping": True,
            "pool_size": 1,
            "max_overflow": 0,
            "pool_timeout": None,
        }
    options.update(engine_kwargs)
    return create_engine(url, **options)


def check_connection(engine: Engine, fail_fast: bool = False) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Error connecting to database %s", engine.url.render_as_string(hide_password=True))
        if fail_fast:
            raise
        return False

    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return True


def init_schema(engine: Engine):
    with engine.begin() as conn:
        conn.execute(text(SPORTS_TABLE_DDL))
