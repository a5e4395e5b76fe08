import pytest
import structlog
from notifier.utils.logging import add_context, clear_context, get_log_level


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("LOG_LEVEL", "ENV", "ENVIRONMENT", "PROTEAN_ENV"):
        monkeypatch.delenv(name, raising=False)


class TestLogLevel:
    @pytest.mark.parametrize(
        "environment, level",
        [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING")],
    )
    def test_level_follows_environment(self, monkeypatch, environment, level):
        monkeypatch.setenv("ENV", environment)
        assert get_log_level() == level

    def test_development_is_the_default(self):
        assert get_log_level() == "DEBUG"

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"

    def test_protean_env_is_honored(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "test")
        assert get_log_level() == "WARNING"


class TestContext:
    def test_bind_and_clear(self):
        add_context(notification_id="n-1", user_id="u-1")
        assert structlog.contextvars.get_contextvars() == {"notification_id": "n-1", "user_id": "u-1"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
