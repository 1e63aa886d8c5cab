from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from devicehub.db.models.device import DeviceLog

async def list_recent_logs(db: AsyncSession, device_id: int, limit: int = 10) -> list[DeviceLog]:
    """Newest entries first. id breaks ties between entries written in the same clock tick."""
    query = (
        select(DeviceLog)
        .where(DeviceLog.device_id == device_id)
        .order_by(DeviceLog.timestamp.desc(), DeviceLog.id.desc())
        .limit(limit)
    )
    result = await db.execute(query)
    return list(result.scalars().all())
