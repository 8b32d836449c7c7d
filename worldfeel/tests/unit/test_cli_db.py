"""Tests for the database maintenance CLI."""

import random
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from worldfeel.cli_db import app, random_address, seed_submissions
from worldfeel.config.settings import settings
from worldfeel.core.emotion_table import EMOTIONS

runner = CliRunner()
NOW = datetime(2025, 8, 18, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_seed_submissions_spreads_rows_over_retention(memory_store):
    inserted = await seed_submissions(memory_store, 25, now=NOW, rng=random.Random(7))

    assert inserted == len(memory_store.records) == 25
    oldest_allowed = NOW - timedelta(hours=settings.RETENTION_HOURS)
    for record in memory_store.records:
        assert record.word in EMOTIONS
        assert oldest_allowed < record.created_at <= NOW
        assert record.expires_at == record.created_at + timedelta(hours=settings.RETENTION_HOURS)
        assert len(record.identity_hash) == 64
        assert record.device_token
    assert len({r.device_token for r in memory_store.records}) == 25


@pytest.mark.asyncio
async def test_seed_submissions_counts_only_inserted_rows(memory_store):
    memory_store.insert = AsyncMock(side_effect=[object(), None, object()])

    assert await seed_submissions(memory_store, 3, now=NOW, rng=random.Random(1)) == 2


def test_random_address_is_dotted_quad():
    octets = random_address(random.Random(3)).split(".")
    assert len(octets) == 4
    assert 1 <= int(octets[0]) <= 223
    assert all(0 <= int(o) <= 254 for o in octets[1:])


@pytest.mark.asyncio
async def test_delete_all_empties_the_store(memory_store):
    memory_store.add("joy", "a", NOW)
    memory_store.add("calm", "b", NOW - timedelta(days=2))

    assert await memory_store.delete_all() == 2
    assert memory_store.records == []


class TestCommands:
    def test_seed_command(self):
        with patch("worldfeel.cli_db._seed", AsyncMock(return_value=5)) as seed_mock:
            result = runner.invoke(app, ["seed", "5"])

        assert result.exit_code == 0
        assert "Seeded submissions: 5" in result.stdout
        seed_mock.assert_awaited_once_with(5)

    def test_seed_command_default_count(self):
        with patch("worldfeel.cli_db._seed", AsyncMock(return_value=20)) as seed_mock:
            result = runner.invoke(app, ["seed"])

        assert result.exit_code == 0
        seed_mock.assert_awaited_once_with(20)

    def test_clear_requires_confirmation(self):
        with patch("worldfeel.cli_db._clear", AsyncMock(return_value=3)) as clear_mock:
            result = runner.invoke(app, ["clear"])

        assert result.exit_code == 1
        clear_mock.assert_not_called()

    def test_clear_with_confirmation(self):
        with patch("worldfeel.cli_db._clear", AsyncMock(return_value=3)):
            result = runner.invoke(app, ["clear", "--yes"])

        assert result.exit_code == 0
        assert "Cleared submissions: 3" in result.stdout

    @pytest.mark.parametrize("args", [["seed", "3"], ["clear", "--yes"]])
    def test_refuses_in_production(self, mocker, args):
        mocker.patch("worldfeel.cli_db.settings.ENVIRONMENT", "production")
        seed_mock = mocker.patch("worldfeel.cli_db._seed", AsyncMock(return_value=3))
        clear_mock = mocker.patch("worldfeel.cli_db._clear", AsyncMock(return_value=3))

        result = runner.invoke(app, args)

        assert result.exit_code == 1
        seed_mock.assert_not_called()
        clear_mock.assert_not_called()

    def test_purge_expired_command(self):
        with patch("worldfeel.cli_db._purge", AsyncMock(return_value=4)):
            result = runner.invoke(app, ["purge-expired"])

        assert result.exit_code == 0
        assert "Purged expired submissions: 4" in result.stdout

    def test_check_command(self):
        with patch("worldfeel.cli_db._check", AsyncMock(return_value=True)):
            assert runner.invoke(app, ["check"]).exit_code == 0
        with patch("worldfeel.cli_db._check", AsyncMock(return_value=False)):
            assert runner.invoke(app, ["check"]).exit_code == 1
