"""Store handle and the open-time migration gate.

A store is one SQLite file whose ``PRAGMA user_version`` records the schema
version that wrote it. Opening a store compares that number with
``SCHEMA_VERSION``:

* 0 and no tables: create every table, seed (optionally) and stamp the
  version, all in one transaction;
* lower: add missing tables/indices and stamp the version, no seeding;
* equal: nothing;
* higher, or 0 with tables already present: refuse to touch the file.
"""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from typing import Iterator, NamedTuple

from sqlalchemy import Engine, create_engine, event, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DatabaseError
from sqlalchemy.orm import Session, sessionmaker

from dece.core.config import settings, sqlite_url
from dece.core.errors import (
    SchemaVersionMismatchError,
    StoreCorruptedError,
    TransactionAbortedError,
)
from dece.core.structured_logging import build_log_context
from dece.db.base import Base
from dece.db.registry import SCHEMA_VERSION
from dece.services.seed_service import SeedPlan, seed_database

logger = logging.getLogger(__name__)


def _install_sqlite_hooks(engine: Engine) -> None:
    """Enforce foreign keys and let DDL share the surrounding transaction."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Disable pysqlite's own transaction handling; BEGIN is emitted below
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def read_user_version(conn: Connection) -> int:
    return int(conn.exec_driver_sql("PRAGMA user_version").scalar() or 0)


def write_user_version(conn: Connection, version: int) -> None:
    conn.exec_driver_sql(f"PRAGMA user_version = {int(version)}")


class Store:
    """
    Explicit handle to one open store.

    Use ``transaction()`` for a unit of work that commits on success and
    rolls back on any exception, or ``session()`` for manual control.
    """

    def __init__(self, path: str):
        self.path = path
        self.engine = create_engine(sqlite_url(path))
        _install_sqlite_hooks(self.engine)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    def session(self) -> Session:
        return self.SessionLocal()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        db = self.session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def schema_version(self) -> int:
        with self.engine.connect() as conn:
            return read_user_version(conn)

    def close(self) -> None:
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"Store(path={self.path!r})"


class Opened(NamedTuple):
    store: Store
    was_created: bool


def _probe(store: Store) -> tuple[int, list[str]]:
    try:
        with store.engine.connect() as conn:
            return read_user_version(conn), inspect(conn).get_table_names()
    except DatabaseError as exc:
        raise StoreCorruptedError(
            f"Cannot read store at {store.path}: {exc.orig or exc}"
        ) from exc


def _create(
    store: Store, *, seed: bool, plan: SeedPlan | None, rng: random.Random | None
) -> None:
    log_context = build_log_context(
        store_path=store.path, schema_version=SCHEMA_VERSION, operation="create"
    )
    try:
        with store.engine.begin() as conn:
            Base.metadata.create_all(conn)
            if seed:
                with Session(bind=conn, autoflush=False) as db:
                    report = seed_database(db, plan or SeedPlan.from_settings(), rng=rng)
                logger.info(
                    "Seeded new store with %d rows",
                    report.total,
                    extra=log_context,
                )
            write_user_version(conn, SCHEMA_VERSION)
    except Exception as exc:
        logger.exception("Store creation rolled back", extra=log_context)
        raise TransactionAbortedError(
            f"Store creation failed and was rolled back: {exc}"
        ) from exc
    logger.info("Created store", extra=log_context)


def _upgrade(store: Store, found: int) -> None:
    log_context = build_log_context(
        store_path=store.path, schema_version=SCHEMA_VERSION, operation="upgrade"
    )
    try:
        with store.engine.begin() as conn:
            Base.metadata.create_all(conn, checkfirst=True)
            write_user_version(conn, SCHEMA_VERSION)
    except Exception as exc:
        logger.exception("Store upgrade rolled back", extra=log_context)
        raise TransactionAbortedError(
            f"Upgrade from schema version {found} failed and was rolled back: {exc}"
        ) from exc
    logger.info("Upgraded store from version %d", found, extra=log_context)


def open_store(
    path: str | None = None,
    *,
    seed: bool | None = None,
    plan: SeedPlan | None = None,
    rng: random.Random | None = None,
) -> Opened:
    """
    Open (creating if needed) the store at ``path``.

    ``seed`` defaults to ``settings.SEED_ON_CREATE`` and only matters when the
    store is created by this call. Returns the handle and whether the store
    was created.
    """
    store = Store(path or settings.DATABASE_PATH)
    try:
        found, tables = _probe(store)

        if found > SCHEMA_VERSION:
            raise SchemaVersionMismatchError(found, SCHEMA_VERSION)

        if found == 0:
            if tables:
                raise SchemaVersionMismatchError(
                    found,
                    SCHEMA_VERSION,
                    reason=(
                        f"{store.path} has tables but no schema version; "
                        "it was not written by this application"
                    ),
                )
            _create(
                store,
                seed=settings.SEED_ON_CREATE if seed is None else seed,
                plan=plan,
                rng=rng,
            )
            return Opened(store, True)

        if found < SCHEMA_VERSION:
            _upgrade(store, found)
    except Exception:
        store.close()
        raise

    logger.debug(
        "Opened store",
        extra=build_log_context(
            store_path=store.path, schema_version=SCHEMA_VERSION, operation="open"
        ),
    )
    return Opened(store, False)


def initialize(path: str | None = None, **kwargs) -> Store:
    """Open the store and return just the handle."""
    return open_store(path, **kwargs).store
