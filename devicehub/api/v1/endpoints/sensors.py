# Static readings served to the dashboard while real sensors are not wired in.
from datetime import datetime, timezone
from fastapi import APIRouter

router = APIRouter()

@router.get("/temperature")
async def temperature():
    return {"valor": "10°C", "timestamp": datetime.now(timezone.utc).isoformat()}

@router.get("/velocidad")
async def velocidad():
    return {"nomnre": "kenia ", "apellido": "cortez"}

@router.get("/Tiempo")
async def tiempo():
    return {"Hora": "2:00pm", "ciudad": "gomez palacio"}
