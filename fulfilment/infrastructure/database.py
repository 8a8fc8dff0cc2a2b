from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from fulfilment import config
from .orm import Base


def get_engine(database_url: str = config.DATABASE_URL):
    """Create database engine."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Writers wait on each other's locks instead of failing immediately.
        connect_args["timeout"] = config.DB_BUSY_TIMEOUT
    return create_engine(database_url, echo=config.DB_ECHO, connect_args=connect_args)


def get_session_factory(engine):
    """Create session factory."""
    return sessionmaker(bind=engine)


def init_db(database_url: str = config.DATABASE_URL):
    """Initialize database."""
    engine = get_engine(database_url)
    Base.metadata.create_all(engine)
    return engine
