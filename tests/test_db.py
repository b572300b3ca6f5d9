"""
Тесты запросов к таблице language_settings (без PostgreSQL).

Запуск: python -m pytest tests/test_db.py -v
"""

import sys
import os
import asyncio

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from db.models import create_tables
from db.queries import LanguageRepository


class FakeConnection:
    def __init__(self, rows: dict):
        self.rows = rows
        self.executed = []

    async def fetchrow(self, query, owner_id):
        language = self.rows.get(owner_id)
        return {"language": language} if owner_id in self.rows else None

    async def execute(self, query, *args):
        self.executed.append(query)
        if args:
            owner_id, language = args
            self.rows[owner_id] = language


class FakeAcquire:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, *exc):
        return False


class FakePool:
    def __init__(self):
        self.conn = FakeConnection({})

    def acquire(self):
        return FakeAcquire(self.conn)


def test_get_missing_language():
    repo = LanguageRepository(FakePool())
    assert asyncio.run(repo.get_language(1)) is None


def test_set_and_get_language():
    pool = FakePool()
    repo = LanguageRepository(pool)
    asyncio.run(repo.set_language(1, "de"))
    asyncio.run(repo.set_language(1, "en"))
    assert asyncio.run(repo.get_language(1)) == "en"
    assert "ON CONFLICT (owner_id)" in pool.conn.executed[-1]


def test_create_tables():
    pool = FakePool()
    asyncio.run(create_tables(pool))
    assert "CREATE TABLE IF NOT EXISTS language_settings" in pool.conn.executed[0]
