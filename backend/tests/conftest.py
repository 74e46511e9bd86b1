"""
Pytest configuration and fixtures
"""
import pytest
from sqlalchemy.orm import Session, sessionmaker

import portfolio.models  # noqa: F401  register all models with Base.metadata
from portfolio.core.database import Base, create_db_engine


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database with foreign keys enforced"""
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Session:
    """Create a database session for testing"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
