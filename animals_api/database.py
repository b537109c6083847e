import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from fastapi import Request

logger = logging.getLogger(__name__)

Base = declarative_base()


class StartupError(Exception):
    """Store connection could not be established at boot."""


def _log_sql(conn, clauseelement, multiparams, params, execution_options):
    logger.debug(f"Executing SQL: {str(clauseelement)}")
    logger.debug(f"With params: {params}")


def make_engine(db_url: str, sql_echo: bool = False) -> Engine:
    engine = create_engine(db_url, echo=False, future=True)
    if sql_echo:
        event.listen(engine, "before_execute", _log_sql)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)


def connect(db_url: str, sql_echo: bool = False) -> Engine:
    """Create the process-wide engine and prove it can reach the database."""
    try:
        engine = make_engine(db_url, sql_echo)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, ImportError) as e:
        raise StartupError(f"Error connecting to the database: {e}") from e
    logger.info("Connected to the database")
    return engine


def create_tables(engine: Engine):
    from animals_api import models  # noqa: F401 registers tables on Base.metadata
    Base.metadata.create_all(bind=engine)


# Dependency
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
