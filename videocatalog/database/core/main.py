# videocatalog/database/core/main.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from videocatalog.common.settings import DBConfig, get_settings

_settings = get_settings()


def app_schema(db: DBConfig) -> Optional[str]:
    """Schema the catalog tables live in; None means the default (public)."""
    schema = (db.schema_name or "").strip()
    if not schema or schema.lower() == "public":
        return None
    return schema


CATALOG_SCHEMA = app_schema(_settings.db)


class Base(DeclarativeBase):
    metadata = MetaData(
        schema=CATALOG_SCHEMA,
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "pk": "pk_%(table_name)s",
        },
    )


def build_engine(db: DBConfig) -> Engine:
    eng = create_engine(
        db.effective_url,
        echo=db.echo,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_pre_ping=db.pool_pre_ping,
        pool_recycle=db.pool_recycle,
    )
    schema = app_schema(db)
    if schema:
        # catalog schema first; public stays visible for pgcrypto
        @event.listens_for(eng, "connect")
        def _set_search_path(dbapi_conn, _record):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    return eng


engine = build_engine(_settings.db)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
