"""SQLAlchemy engine, session, dependency e creazione schema."""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import get_database_url

logger = logging.getLogger(__name__)

DATABASE_URL = get_database_url()

# SQLite: la sessione può essere usata dal threadpool di FastAPI.
if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
    )

    @event.listens_for(engine, "connect")
    def _sqlite_on_connect(dbapi_conn, connection_record):
        # pysqlite non emette BEGIN prima delle SELECT: lo gestiamo noi (evento "begin").
        dbapi_conn.isolation_level = None
        # WAL: un lettore in transazione non blocca i commit degli altri e
        # continua a vedere il proprio snapshot.
        dbapi_conn.execute("PRAGMA journal_mode=WAL")

    @event.listens_for(engine, "begin")
    def _sqlite_on_begin(conn):
        conn.exec_driver_sql("BEGIN")
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,
        echo=False,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Crea le tabelle se assenti (idempotente, nessuna migrazione).
    I modelli devono essere importati prima per registrare i metadata.
    """
    from app.models import card, team_member  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato su %s", engine.url.render_as_string(hide_password=True))
