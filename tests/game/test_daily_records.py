from __future__ import annotations

from datetime import date, datetime, timezone

from app.db.models.daily_challenge_records import DailyChallengeRecord
from app.game.sessions.clock import local_date, next_challenge_at
from app.game.sessions.service.daily_records import can_play_daily_challenge, update_daily_challenge_record
from tests.game.fake_game_db import FakeGameDb, FakeSession

UTC = timezone.utc
NOW = datetime(2026, 3, 10, 15, 30, tzinfo=UTC)


def record(**overrides) -> DailyChallengeRecord:
    values = {
        "username": "alice",
        "date_last_challenge": date(2026, 3, 9),
        "next_challenge_at": datetime(2026, 3, 10, 8, 0, tzinfo=UTC),
        "games_completed": 4,
        "streak": 2,
    }
    values.update(overrides)
    return DailyChallengeRecord(**values)


def test_next_challenge_at_is_tomorrow_at_reset_hour() -> None:
    assert next_challenge_at(NOW, tz_name="UTC", reset_hour=8) == datetime(2026, 3, 11, 8, 0, tzinfo=UTC)


def test_next_challenge_at_follows_local_calendar() -> None:
    late_utc = datetime(2026, 3, 10, 23, 30, tzinfo=UTC)

    assert local_date(late_utc, tz_name="Europe/Berlin") == date(2026, 3, 11)
    assert next_challenge_at(late_utc, tz_name="Europe/Berlin", reset_hour=8) == datetime(
        2026, 3, 12, 7, 0, tzinfo=UTC
    )


async def test_first_completed_run_creates_record(monkeypatch) -> None:
    db = FakeGameDb()
    db.install(monkeypatch)

    created = await update_daily_challenge_record(
        FakeSession(),
        username="alice",
        completed=True,
        is_admin=False,
        now_utc=NOW,
    )

    assert db.records["alice"] is created
    assert created.games_completed == 1
    assert created.streak == 1
    assert created.date_last_challenge == date(2026, 3, 10)
    assert created.next_challenge_at == datetime(2026, 3, 11, 8, 0, tzinfo=UTC)


async def test_first_failed_run_starts_from_zero(monkeypatch) -> None:
    db = FakeGameDb()
    db.install(monkeypatch)

    created = await update_daily_challenge_record(
        FakeSession(),
        username="alice",
        completed=False,
        is_admin=False,
        now_utc=NOW,
    )

    assert created.games_completed == 0
    assert created.streak == 0


async def test_completed_run_on_new_day_extends_streak(monkeypatch) -> None:
    db = FakeGameDb(records={"alice": record()})
    db.install(monkeypatch)
    session = FakeSession()

    updated = await update_daily_challenge_record(
        session,
        username="alice",
        completed=True,
        is_admin=False,
        now_utc=NOW,
    )

    assert updated.games_completed == 5
    assert updated.streak == 3
    assert updated.date_last_challenge == date(2026, 3, 10)
    assert updated.next_challenge_at == datetime(2026, 3, 11, 8, 0, tzinfo=UTC)
    assert session.flushes == 1


async def test_failed_run_resets_streak_only(monkeypatch) -> None:
    db = FakeGameDb(records={"alice": record()})
    db.install(monkeypatch)

    updated = await update_daily_challenge_record(
        FakeSession(),
        username="alice",
        completed=False,
        is_admin=False,
        now_utc=NOW,
    )

    assert updated.games_completed == 4
    assert updated.streak == 0


async def test_admin_replay_on_same_day_changes_nothing(monkeypatch) -> None:
    existing = record(date_last_challenge=date(2026, 3, 10), streak=5)
    db = FakeGameDb(records={"alice": existing})
    db.install(monkeypatch)

    for completed in (True, False):
        updated = await update_daily_challenge_record(
            FakeSession(),
            username="alice",
            completed=completed,
            is_admin=True,
            now_utc=NOW,
        )
        assert updated.games_completed == 4
        assert updated.streak == 5


async def test_same_day_completion_is_counted_once(monkeypatch) -> None:
    existing = record(date_last_challenge=date(2026, 3, 10), games_completed=5, streak=3)
    db = FakeGameDb(records={"alice": existing})
    db.install(monkeypatch)

    updated = await update_daily_challenge_record(
        FakeSession(),
        username="alice",
        completed=True,
        is_admin=False,
        now_utc=NOW,
    )
    assert updated.games_completed == 5
    assert updated.streak == 3

    updated = await update_daily_challenge_record(
        FakeSession(),
        username="alice",
        completed=False,
        is_admin=False,
        now_utc=NOW,
    )
    assert updated.games_completed == 5
    assert updated.streak == 0


async def test_can_play_daily_challenge(monkeypatch) -> None:
    db = FakeGameDb(
        records={
            "waiting": record(username="waiting", next_challenge_at=datetime(2026, 3, 11, 8, 0, tzinfo=UTC)),
            "ready": record(username="ready", next_challenge_at=datetime(2026, 3, 10, 8, 0, tzinfo=UTC)),
        }
    )
    db.install(monkeypatch)
    session = FakeSession()

    assert await can_play_daily_challenge(session, username="newcomer", is_admin=False, now_utc=NOW) is True
    assert await can_play_daily_challenge(session, username="ready", is_admin=False, now_utc=NOW) is True
    assert await can_play_daily_challenge(session, username="waiting", is_admin=False, now_utc=NOW) is False
    assert await can_play_daily_challenge(session, username="waiting", is_admin=True, now_utc=NOW) is True
