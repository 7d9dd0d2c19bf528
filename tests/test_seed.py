"""
示例数据写入测试

测试 app/db/seed.py：
- PostgreSQL 上写入后同步 SERIAL 序列
- SQLite 上不执行序列同步
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.db.seed import SERIAL_COLUMNS, seed_menu_fixture


def _mock_session(dialect_name: str) -> MagicMock:
    """空表、指定方言的模拟会话"""
    session = MagicMock()
    session.bind.dialect.name = dialect_name
    session.scalar = AsyncMock(return_value=0)
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_postgres_sequences_follow_seeded_keys():
    """显式主键写入后，序列要推进到 max(主键)，之后的 save() 才不会主键冲突"""
    session = _mock_session("postgresql")

    assert await seed_menu_fixture(session) is True

    statements = [str(call.args[0]) for call in session.execute.await_args_list]
    assert len(statements) == len(SERIAL_COLUMNS)
    for (table, column), sql in zip(SERIAL_COLUMNS, statements):
        assert f"pg_get_serial_sequence('{table}', '{column}')" in sql
        assert f"SELECT max({column}) FROM {table}" in sql
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_sqlite_skips_sequence_sync():
    session = _mock_session("sqlite")

    assert await seed_menu_fixture(session) is True

    session.execute.assert_not_awaited()
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_existing_data_is_left_alone():
    session = _mock_session("postgresql")
    session.scalar.return_value = 18

    assert await seed_menu_fixture(session) is False

    session.add_all.assert_not_called()
    session.execute.assert_not_awaited()
