"""Settings shared by every environment module."""
import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]

TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "8"))
PORT = int(os.getenv("PORT", "3000"))

# Proxy (frontend) process
BACKEND_URL = os.getenv("BACKEND_URL", "http://backend:3000")
FRONTEND_PORT = int(os.getenv("FRONTEND_PORT", "8080"))
STATIC_DIR = os.getenv("STATIC_DIR", str(ROOT_DIR / "public"))
PROXY_TIMEOUT = float(os.getenv("PROXY_TIMEOUT", "30"))


def db_config(default_password: str) -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "school_demo"),
    }
