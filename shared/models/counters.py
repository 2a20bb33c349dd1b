from sqlalchemy import Column, Integer, String
from shared.core.database import Base


class Counter(Base):
    """Named monotonic sequences backing the public ``<entity>_id`` columns."""
    __tablename__ = "counters"

    name = Column(String(100), primary_key=True)
    seq = Column(Integer, nullable=False, default=0)
