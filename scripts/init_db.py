from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_engine.attendance_engine.database.bootstrap import apply_schema
from src.attendance_engine.attendance_engine.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    count = apply_schema(DatabaseConnection.get_instance(config))
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} ({count} statements)")


if __name__ == "__main__":
    main()
