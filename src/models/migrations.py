from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.util.exc import CommandError

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def upgrade_db(revision: str = "head", database_url: str | None = None) -> None:
    config = Config(str(ALEMBIC_INI))
    if database_url:
        config.set_main_option("sqlalchemy.url", database_url)
    try:
        command.upgrade(config, revision)
    except CommandError as exc:
        raise RuntimeError(
            f"Catalog schema migration to '{revision}' failed: {exc}"
        ) from exc
