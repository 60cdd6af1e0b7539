"""
Shared fixtures: in-memory lookup tables and fresh enum contexts.
"""

import logging
from typing import Any

import pytest

from enum_overlay import (
    EnumContext,
    EnumEntry,
    create_context,
    reset_settings,
)


class DictEnumTable:
    """Minimal lookup table backed by two dicts."""
    
    def __init__(self, name: str, entries: list[EnumEntry]):
        self.__name__ = name
        self.entries = list(entries)
        self._by_id = {entry.id: entry for entry in entries}
        self._by_key = {entry.key: entry for entry in entries}
    
    def find_by_id(self, raw_code: Any) -> EnumEntry | None:
        try:
            return self._by_id.get(raw_code)
        except TypeError:
            return None
    
    def map_to_value(self, key: Any) -> Any | None:
        if isinstance(key, str):
            entry = self._by_key.get(key)
            return entry.id if entry else None
        entry = self.find_by_id(key)
        return entry.name if entry else None
    
    def __repr__(self) -> str:
        return f"<{self.__name__}>"


def make_table(name: str, *rows: tuple[Any, str, str]) -> DictEnumTable:
    return DictEnumTable(
        name, [EnumEntry(id=raw, key=key, name=label) for raw, key, label in rows]
    )


@pytest.fixture
def sex_table():
    return make_table("Sex", (1, "male", "Male"), (2, "female", "Female"))


@pytest.fixture
def gender_table():
    return make_table(
        "Gender", (10, "man", "Man"), (20, "woman", "Woman"), (30, "other", "Other")
    )


@pytest.fixture
def status_table():
    return make_table("Status", (0, "draft", "Draft"), (1, "published", "Published"))


@pytest.fixture
def context(sex_table, status_table) -> EnumContext:
    return create_context(tables={"Sex": sex_table, "Status": status_table})


@pytest.fixture(autouse=True)
def clean_settings():
    """Every test starts from default settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_package_logger():
    """Undo configure_logging so caplog sees enum_overlay records."""
    yield
    package_logger = logging.getLogger("enum_overlay")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def table_factory():
    """Build ad-hoc tables: table_factory("Color", (1, "red", "Red"), ...)."""
    return make_table
