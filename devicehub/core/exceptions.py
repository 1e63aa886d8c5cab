"""
Application errors. Every subclass carries the HTTP status it maps to;
the handlers in devicehub.main turn them into {"message": ...} responses.
"""

from fastapi import status


class DeviceHubError(Exception):
    """Base exception for all application errors."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Solicitud inválida"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DeviceNotFoundError(DeviceHubError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Dispositivo no encontrado"


class DeviceConflictError(DeviceHubError):
    """Raised when an enroll_id is already taken by another device."""
    status_code = status.HTTP_409_CONFLICT
    message = "Ya existe un dispositivo con ese enroll_id"


class AuthMissingError(DeviceHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token no proporcionado"


class InvalidTokenError(DeviceHubError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Token inválido"


class TokenExpiredError(InvalidTokenError):
    message = "Token expirado"
