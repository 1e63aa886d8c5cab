import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from devicehub.core.exceptions import AuthMissingError, DeviceNotFoundError, InvalidTokenError
from devicehub.core.security import TokenData, decode_access_token
from devicehub.db.models.device import Device
from devicehub.db.repositories.device import get_device_by_id
from devicehub.db.session import get_db

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported as 401 by us, not 403 by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)

async def get_token_data(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None:
        raise AuthMissingError()
    try:
        return decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Token rechazado: %s", e.message)
        raise

async def get_current_device(
    token: TokenData = Depends(get_token_data),
    db: AsyncSession = Depends(get_db),
) -> Device:
    """Device the bearer token was issued to. Handlers only ever see their own device."""
    device = await get_device_by_id(db, token.id)
    if not device:
        raise DeviceNotFoundError()
    if device.enroll_id != token.enroll_id:
        raise InvalidTokenError()
    return device
