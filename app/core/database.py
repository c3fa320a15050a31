import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Process-wide engine, created once at import and disposed in close_db()
if settings.DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False}
    )
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,
        max_overflow=20
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database at application startup.

    Schema is normally managed with "alembic upgrade head". Set
    AUTO_CREATE_TABLES=true to create missing tables directly (local runs).
    """
    from app.models import job  # noqa: F401  register models on Base.metadata

    if settings.AUTO_CREATE_TABLES:
        logger.info("Creating missing tables")
        Base.metadata.create_all(bind=engine)


def close_db():
    """Release pooled connections at application shutdown."""
    engine.dispose()
