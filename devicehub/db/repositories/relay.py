import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from devicehub.db.models.relay import RelayState, RELAY_ID

logger = logging.getLogger(__name__)

async def _set_relay(db: AsyncSession, is_on: bool) -> None:
    relay = await db.get(RelayState, RELAY_ID)
    if relay is None:
        if not is_on:
            # A missing row already reads as off
            return
        db.add(RelayState(id=RELAY_ID, is_on=True))
        try:
            await db.commit()
        except IntegrityError:
            # Row was created by a concurrent request; fall through and update it
            await db.rollback()
            relay = await db.get(RelayState, RELAY_ID)
        else:
            logger.info("Relé encendido")
            return

    relay.is_on = is_on
    await db.commit()
    logger.info("Relé %s", "encendido" if is_on else "apagado")

async def turn_on_relay(db: AsyncSession) -> None:
    await _set_relay(db, True)

async def turn_off_relay(db: AsyncSession) -> None:
    await _set_relay(db, False)

async def get_relay_status(db: AsyncSession) -> bool:
    relay = await db.get(RelayState, RELAY_ID)
    return bool(relay and relay.is_on)
