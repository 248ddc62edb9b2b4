import os

from config.config import BACKEND_URL, FRONTEND_PORT, PORT, PROXY_TIMEOUT, STATIC_DIR, TOKEN_TTL_HOURS, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config("")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
