from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema
from .directory.repository import DirectoryProvider

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_container(directory: DirectoryProvider) -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    store = getattr(settings, "SESSION_STORE", "memory")
    db_config = getattr(settings, "DB_CONFIG", None)

    container = build_container(
        directory=directory,
        db_config=db_config,
        store=store,
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", 5)),
        session_hours=float(getattr(settings, "SESSION_DURATION_HOURS", 24)),
        session_location=getattr(settings, "SESSION_LOCATION", "Main Office Entrance"),
    )

    if store == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)

    logger.info("Attendance engine ready (settings=%s, store=%s)", settings_module, store)
    return container
