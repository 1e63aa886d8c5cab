import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from devicehub.api.deps import get_current_device
from devicehub.core.config import settings
from devicehub.core.exceptions import DeviceNotFoundError
from devicehub.core.security import create_access_token
from devicehub.db.models.device import Device
from devicehub.db.repositories.device import get_device_by_enroll_id, set_device_status, upsert_device
from devicehub.db.repositories.device_log import list_recent_logs
from devicehub.db.session import get_db
from devicehub.schemas.device import (
    DeviceLogin,
    DeviceLogRead,
    DeviceRead,
    DeviceRegister,
    DeviceRegistered,
    DeviceStatusRead,
    DeviceToken,
    Message,
)

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register-device", response_model=DeviceRegistered, status_code=status.HTTP_201_CREATED)
async def register_device(data: DeviceRegister, response: Response, db: AsyncSession = Depends(get_db)):
    """
    Registers a device, or updates it if enroll_id is already known.
    - **201**: new device
    - **200**: existing device updated
    """
    device, created = await upsert_device(db, data.enroll_id, data.device_name, data.status)

    if created:
        logger.info("Dispositivo registrado: id=%s enroll_id=%s", device.id, device.enroll_id)
        message = "Dispositivo registrado."
    else:
        logger.info("Dispositivo actualizado: id=%s enroll_id=%s", device.id, device.enroll_id)
        response.status_code = status.HTTP_200_OK
        message = "Dispositivo actualizado."

    return {"message": message, "device": DeviceRead.model_validate(device)}

@router.post("/login-device", response_model=DeviceToken)
async def login_device(data: DeviceLogin, db: AsyncSession = Depends(get_db)):
    device = await get_device_by_enroll_id(db, data.enroll_id)
    if not device:
        logger.info("Login fallido, enroll_id desconocido: %s", data.enroll_id)
        raise DeviceNotFoundError()

    token = create_access_token(device.id, device.enroll_id)
    logger.info("Login del dispositivo %s", device.id)
    return {"device_name": device.device_name, "enroll_id": device.enroll_id, "token": token}

@router.get("/device-status", response_model=DeviceStatusRead)
async def device_status(device: Device = Depends(get_current_device)):
    return device

@router.post("/turn-on-device", response_model=Message)
async def turn_on_device(device: Device = Depends(get_current_device), db: AsyncSession = Depends(get_db)):
    await set_device_status(db, device, "on")
    return {"message": "Dispositivo encendido."}

@router.post("/turn-off-device", response_model=Message)
async def turn_off_device(device: Device = Depends(get_current_device), db: AsyncSession = Depends(get_db)):
    await set_device_status(db, device, "off")
    return {"message": "Dispositivo apagado."}

@router.get("/device", response_model=list[DeviceLogRead])
async def device_logs(device: Device = Depends(get_current_device), db: AsyncSession = Depends(get_db)):
    """Latest transitions of the authenticated device, newest first."""
    return await list_recent_logs(db, device.id, settings.DEVICE_LOG_LIMIT)
