# tests/database/test_core_schema.py
from __future__ import annotations

import pytest

from videocatalog.common.settings import DBConfig
from videocatalog.database.core.main import Base, app_schema


@pytest.mark.parametrize("schema,expected", [
    ("catalog", "catalog"),
    ("  media ", "media"),
    ("public", None),
    ("PUBLIC", None),
    ("", None),
])
def test_app_schema(schema, expected):
    assert app_schema(DBConfig(DB_SCHEMA=schema)) == expected


def test_tables_live_in_configured_schema():
    tables = Base.metadata.tables
    for name in ("category", "genre", "cast_member", "video"):
        assert f"catalog.{name}" in tables
