# infra/db/base.py
from __future__ import annotations
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine
import logging

from infra.path import default_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def default_db_url() -> str:
    return f"sqlite:///{default_db_path().as_posix()}"


def build_session_factory(db_url: str | None = None, *, echo: bool = False) -> sessionmaker:
    """
    Session factory for reading WBS snapshots.
    Defaults to the SQLite file under the per-user data directory.
    """
    db_url = db_url or default_db_url()
    logger.info("Using database at: %s", db_url)

    engine = create_engine(db_url, echo=echo, future=True)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
