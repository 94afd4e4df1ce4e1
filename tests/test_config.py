import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults_describe_a_local_dev_setup(monkeypatch) -> None:
    monkeypatch.delenv("APP_ENV", raising=False)
    settings = Settings(_env_file=None)

    assert settings.is_dev is True
    assert settings.daily_total_rounds == 10
    assert settings.daily_starting_lives == 3
    assert settings.daily_reset_hour == 8
    assert "localhost" in settings.integration_allowed_hosts


def test_allowed_hosts_are_normalized(monkeypatch) -> None:
    monkeypatch.setenv("INTEGRATION_DB_ALLOWED_HOSTS", " CI-DB , localhost,,")

    assert Settings(_env_file=None).integration_allowed_hosts == frozenset({"ci-db", "localhost"})


@pytest.mark.parametrize(
    ("env_name", "value"),
    [
        ("APP_TIMEZONE", "Mars/Olympus_Mons"),
        ("BONUS_DIFFICULTY", "impossible"),
        ("DAILY_RESET_HOUR", "24"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, env_name: str, value: str) -> None:
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
