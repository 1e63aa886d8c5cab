from sqlalchemy import Column, Integer, Boolean, DateTime
from devicehub.db.models.device import utcnow
from devicehub.db.session import Base

RELAY_ID = 1


class RelayState(Base):
    """Global relay switch. Only the row with id RELAY_ID is ever written."""
    __tablename__ = "relay_state"

    id = Column(Integer, primary_key=True, default=RELAY_ID)
    is_on = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
