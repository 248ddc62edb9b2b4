from config.config import BACKEND_URL, FRONTEND_PORT, PORT, PROXY_TIMEOUT, STATIC_DIR, TOKEN_TTL_HOURS, db_config

SECRET_KEY = "test-secret"

DB_CONFIG = db_config("12345")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
