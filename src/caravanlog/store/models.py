"""SQLAlchemy models for the SQLite-backed entry store."""

from sqlalchemy import Column, Date, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

# Session-scoped store: the database lives in memory and dies with the process.
IN_MEMORY_URL = "sqlite://"


class EntryRow(Base):
    """Weighbridge entry row.

    Numbers are kept as text so the exact decimal form survives the round
    trip; the net weight has no column because it is always derived.
    """

    __tablename__ = "entries"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    plate_number = Column(String, nullable=False)
    with_load_kg = Column(String, nullable=False)
    without_load_kg = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    price = Column(String, nullable=False)
    check_number = Column(String, nullable=False, default="")


def create_session_factory() -> sessionmaker[Session]:
    """Create a session factory bound to a fresh in-memory SQLite database."""
    # One shared connection, otherwise every checkout would see an empty database.
    engine = create_engine(
        IN_MEMORY_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
