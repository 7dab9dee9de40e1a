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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./travel_identity.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5177"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ACCESS_TOKEN_TTL_MINUTES = int(data.get("ACCESS_TOKEN_TTL_MINUTES", 60))
    PASSWORD_RESET_TOKEN_TTL_MINUTES = int(data.get("PASSWORD_RESET_TOKEN_TTL_MINUTES", 60))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:5177")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    MAIL_ENABLED = bool(data.get("MAIL_ENABLED", False))
    MAIL_SERVER = data.get("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(data.get("MAIL_PORT", 587))
    MAIL_USERNAME = data.get("MAIL_USERNAME", "")
    MAIL_PASSWORD = data.get("MAIL_PASSWORD", "")
    MAIL_FROM = data.get("MAIL_FROM", "support@travel-app.example.com")
    MAIL_FROM_NAME = data.get("MAIL_FROM_NAME", "Travel App Support")
    MAIL_STARTTLS = bool(data.get("MAIL_STARTTLS", True))
    MAIL_SSL_TLS = bool(data.get("MAIL_SSL_TLS", False))
