from datetime import datetime, timezone
from sqlalchemy import CheckConstraint, Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from devicehub.db.session import Base

DEVICE_STATUSES = ("on", "off")
LOG_ACTIONS = ("ON", "OFF")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Device(Base):
    __tablename__ = "devices"
    __table_args__ = (
        CheckConstraint("status IN ('on', 'off')", name="ck_devices_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    device_name = Column(String, nullable=False)
    enroll_id = Column(String, unique=True, nullable=False, index=True)
    status = Column(String, nullable=False, default="off")
    last_value = Column(DateTime(timezone=True), nullable=True)  # Time of the last on/off transition
    created_at = Column(DateTime(timezone=True), default=utcnow)

    logs = relationship("DeviceLog", back_populates="device")


class DeviceLog(Base):
    """Audit entry written once per transition. Rows are never updated or deleted."""
    __tablename__ = "device_logs"
    __table_args__ = (
        CheckConstraint("action IN ('ON', 'OFF')", name="ck_device_logs_action"),
    )

    id = Column(Integer, primary_key=True, index=True)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False, index=True)
    action = Column(String, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    device = relationship("Device", back_populates="logs")
