from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from marketplace.core.config import settings
import logging

logger = logging.getLogger("database")


def build_engine(database_url: str, echo: bool = False):
    """Create an engine suited to the configured database"""
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across FastAPI worker threads
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_size=10,                    # Base connections
        max_overflow=20,                 # Additional connections under load
        pool_pre_ping=True,              # Validate connections
        pool_recycle=3600,               # Recycle every hour
        echo=echo,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


@event.listens_for(engine, "connect")
def receive_connect(dbapi_connection, connection_record):
    logger.debug("DB connection established")


# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all models
Base = declarative_base()
