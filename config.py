import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 3000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", os.environ.get("ADMIN_API_KEY"))

    # Session tokens. No default secret: the app refuses to start without one.
    JWT_SECRET = data.get("JWT_SECRET", os.environ.get("JWT_SECRET"))
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    SESSION_TOKEN_TTL_HOURS = data.get("SESSION_TOKEN_TTL_HOURS", 24)

    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 10)
    PASSWORD_RESET_TTL_MINUTES = data.get("PASSWORD_RESET_TTL_MINUTES", 60)
    EMAIL_VERIFICATION_TTL_HOURS = data.get("EMAIL_VERIFICATION_TTL_HOURS", 24)

    # Email delivery. Empty EMAIL_API_URL falls back to the logging sender.
    EMAIL_API_URL = data.get("EMAIL_API_URL", "")
    EMAIL_API_KEY = data.get("EMAIL_API_KEY", os.environ.get("EMAIL_API_KEY", ""))
    EMAIL_FROM = data.get("EMAIL_FROM", "no-reply@localhost")
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
