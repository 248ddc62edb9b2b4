from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_demo.school_demo.database.bootstrap import ensure_seed_rows
from src.school_demo.school_demo.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    ensure_seed_rows(conn)
    print(f"OK: Seeded empty tables -> {conn.config.describe()}")


if __name__ == "__main__":
    main()
