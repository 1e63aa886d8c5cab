import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from devicehub.core.exceptions import DeviceConflictError
from devicehub.db.models.device import Device, DeviceLog, utcnow

logger = logging.getLogger(__name__)

async def get_device_by_id(db: AsyncSession, device_id: int) -> Device | None:
    result = await db.execute(select(Device).filter(Device.id == device_id))
    return result.scalars().first()

async def get_device_by_enroll_id(db: AsyncSession, enroll_id: str) -> Device | None:
    result = await db.execute(select(Device).filter(Device.enroll_id == enroll_id))
    return result.scalars().first()

async def upsert_device(db: AsyncSession, enroll_id: str, device_name: str, status: str | None = None) -> tuple[Device, bool]:
    """
    Creates the device, or updates name/status of the one already holding enroll_id.
    Without a status a new device starts "off" and an existing one keeps its status.
    Returns the row and True if it was inserted, False if it was updated.
    """
    device = await get_device_by_enroll_id(db, enroll_id)
    created = device is None

    if created:
        device = Device(enroll_id=enroll_id, device_name=device_name, status=status or "off")
        db.add(device)
    else:
        device.device_name = device_name
        if status is not None:
            device.status = status
        device.last_value = utcnow()

    try:
        await db.commit()
    except IntegrityError:
        # Another request inserted the same enroll_id between our select and commit
        await db.rollback()
        logger.warning("Conflicto al registrar enroll_id=%s", enroll_id)
        raise DeviceConflictError()

    await db.refresh(device)
    return device, created

async def set_device_status(db: AsyncSession, device: Device, status: str) -> Device:
    """
    Moves the device to status ("on"/"off") and appends the matching log entry.
    Both writes go out in a single commit.
    """
    now = utcnow()
    device.status = status
    device.last_value = now
    db.add(DeviceLog(device_id=device.id, action=status.upper(), timestamp=now))

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    await db.refresh(device)
    logger.info("Dispositivo %s -> %s", device.id, status)
    return device
