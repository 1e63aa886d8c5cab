import uvicorn
from devicehub.core.config import settings

if __name__ == "__main__":
    uvicorn.run("devicehub.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
