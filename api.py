import uvicorn

from config import ApplicationConfig
from auth_service.api.app import create_app

# Raises ConfigError at import when JWT_SECRET is missing
app = create_app(ApplicationConfig)

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
