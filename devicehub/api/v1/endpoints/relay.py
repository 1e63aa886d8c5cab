from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from devicehub.db.repositories.relay import get_relay_status, turn_off_relay, turn_on_relay
from devicehub.db.session import get_db
from devicehub.schemas.relay import RelayChanged, RelayStatus

router = APIRouter()

@router.post("/turn-on", response_model=RelayChanged)
async def turn_on(db: AsyncSession = Depends(get_db)):
    await turn_on_relay(db)
    return {"message": "Relé encendido.", "status": True}

@router.post("/turn-off", response_model=RelayChanged)
async def turn_off(db: AsyncSession = Depends(get_db)):
    await turn_off_relay(db)
    return {"message": "Relé apagado.", "status": False}

@router.get("/status", response_model=RelayStatus)
async def relay_status(db: AsyncSession = Depends(get_db)):
    return {"status": await get_relay_status(db)}
