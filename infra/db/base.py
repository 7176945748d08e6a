# infra/db/base.py
from __future__ import annotations
import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

DB_URL_ENV = "TASKGRAPH_DB_URL"

Base = declarative_base()


def database_url() -> str:
    """TASKGRAPH_DB_URL if set, else the SQLite file in the per-user data dir."""
    configured = os.getenv(DB_URL_ENV, "").strip()
    if configured:
        return configured
    return f"sqlite:///{default_db_path().as_posix()}"


def make_engine(db_url: str | None = None) -> Engine:
    url = db_url or database_url()
    logger.info("Using database at: %s", url)
    return create_engine(url, echo=False, future=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
