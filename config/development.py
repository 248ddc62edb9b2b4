import os

from config.config import BACKEND_URL, FRONTEND_PORT, PORT, PROXY_TIMEOUT, STATIC_DIR, TOKEN_TTL_HOURS, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev_jwt_secret_change_me")

DB_CONFIG = db_config("devpassword")

DEBUG = bool(int(os.getenv("DEBUG", "1")))

# Apply schema.sql and seed demo rows on startup (idempotent).
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
