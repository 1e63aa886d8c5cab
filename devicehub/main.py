from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from devicehub.core.config import settings
from devicehub.core.exceptions import AuthMissingError, DeviceHubError
from devicehub.api.v1.endpoints.device import router as device_router
from devicehub.api.v1.endpoints.relay import router as relay_router
from devicehub.api.v1.endpoints.sensors import router as sensors_router
from devicehub.db.session import create_tables
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    logger.info("%s v%s iniciado. Tablas de la base de datos creadas.", settings.PROJECT_NAME, settings.VERSION)
    yield
    logger.info("Apagando %s", settings.PROJECT_NAME)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(device_router, tags=["devices"])
app.include_router(relay_router, tags=["relay"])
app.include_router(sensors_router, tags=["sensors"])

@app.exception_handler(DeviceHubError)
async def devicehub_error_handler(request: Request, exc: DeviceHubError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthMissingError) else None
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Solicitud inválida"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Error de base de datos en %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Error interno del servidor"},
    )

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Error no controlado en %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Error interno del servidor"},
    )

@app.get("/health", tags=["system"])
async def health_check():
    return {"status": "healthy", "app": settings.PROJECT_NAME, "version": settings.VERSION}
