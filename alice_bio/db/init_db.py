import logging
from typing import List, Optional

from sqlalchemy import Table
from sqlalchemy.engine import Engine

from alice_bio.core.config import settings
from alice_bio.db.base import Base, User
from alice_bio.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def users_are_external() -> bool:
    return bool(settings.AUTH_USERS_SCHEMA)


def managed_tables() -> List[Table]:
    tables = list(Base.metadata.sorted_tables)
    if users_are_external():
        tables = [t for t in tables if t is not User.__table__]
    return tables


def init_db(bind: Optional[Engine] = None) -> None:
    bind = bind if bind is not None else default_engine
    tables = managed_tables()
    Base.metadata.create_all(bind=bind, tables=tables)
    logger.info("Schema ready on %s: %s", bind.url.render_as_string(hide_password=True),
                ", ".join(t.name for t in tables))
