from sqlmodel import create_engine, SQLModel, Session
from config import DATABASE_URL, DB_ECHO

# Create engine
engine = create_engine(DATABASE_URL, echo=DB_ECHO)


def create_db_and_tables():
    """Create all tables in the database"""
    SQLModel.metadata.create_all(engine)


def get_session():
    """Get database session - used as FastAPI dependency"""
    with Session(engine) as session:
        yield session
