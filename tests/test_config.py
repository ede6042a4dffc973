import pytest

from glueops.core.config import (
    DELAY_MS_ENV,
    MAX_ATTEMPTS_ENV,
    PollSettings,
    ambient_account_id,
    ambient_region,
)


def test_poll_settings_defaults(monkeypatch):
    monkeypatch.delenv(MAX_ATTEMPTS_ENV, raising=False)
    monkeypatch.delenv(DELAY_MS_ENV, raising=False)

    assert PollSettings.from_env() == PollSettings(max_attempts=10, delay_ms=1000)


def test_poll_settings_env_override(monkeypatch):
    monkeypatch.setenv(MAX_ATTEMPTS_ENV, "3")
    monkeypatch.setenv(DELAY_MS_ENV, "0")

    assert PollSettings.from_env() == PollSettings(max_attempts=3, delay_ms=0)


@pytest.mark.parametrize(("attempts", "delay"), [("abc", "x"), ("0", "-5"), ("", " ")])
def test_poll_settings_invalid_values_fall_back(monkeypatch, attempts, delay):
    monkeypatch.setenv(MAX_ATTEMPTS_ENV, attempts)
    monkeypatch.setenv(DELAY_MS_ENV, delay)

    assert PollSettings.from_env() == PollSettings()


def test_ambient_region_and_account(monkeypatch):
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_ACCOUNT_ID", raising=False)
    assert ambient_region() == "us-east-1"
    assert ambient_account_id() is None

    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("AWS_ACCOUNT_ID", "111111111111")
    assert ambient_region() == "eu-west-1"
    assert ambient_account_id() == "111111111111"
