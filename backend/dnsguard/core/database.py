"""
Database configuration for the record store read by the validation engine
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import DatabaseSettings, get_settings
from .logging_config import get_logger

logger = get_logger(__name__)

# Create base class for models
Base = declarative_base()

# Metadata for table creation
metadata = Base.metadata


class Database:
    """Database connection manager"""

    def __init__(self, settings: Optional[DatabaseSettings] = None):
        self.settings = settings
        self.engine = None
        self.session_factory = None
        self._initialized = False

    def _initialize_engine(self):
        """Initialize database engine and session maker"""
        if not self._initialized:
            db_settings = self.settings or get_settings().database

            connect_args = {}
            if db_settings.url.startswith("sqlite"):
                # Sessions may be handed to worker threads by the caller
                connect_args["check_same_thread"] = False

            self.engine = create_engine(
                db_settings.url,
                echo=db_settings.echo,
                connect_args=connect_args,
            )
            self.session_factory = sessionmaker(
                bind=self.engine, expire_on_commit=False
            )
            self._initialized = True
            logger.info(f"Record store engine initialized for {self.engine.url.render_as_string(hide_password=True)}")

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Get database session"""
        self._initialize_engine()

        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    def create_all(self):
        """Create every table known to the model metadata"""
        self._initialize_engine()
        metadata.create_all(self.engine)

    def close(self):
        """Close database connection"""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.session_factory = None
            self._initialized = False
            logger.info("Database connection closed")
