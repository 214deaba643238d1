"""
Tests for settings loading and application wiring.
"""

from app.config import Settings
from main import create_app


class TestSettingsFromEnv:
    """Test Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.auth.SECRET is None
        assert settings.auth.TOKEN_TTL_SECONDS == 3600
        assert settings.auth.BCRYPT_ROUNDS == 10
        assert settings.database.DATABASE_URL == "sqlite:///./bloglist.db"

    def test_environment_overrides(self):
        settings = Settings.from_env({
            "SECRET": "s3cret",
            "PORT": "8080",
            "DATABASE_URL": "sqlite:///./other.db",
            "LOG_LEVEL": "debug",
        })

        assert settings.auth.SECRET == "s3cret"
        assert settings.server.PORT == 8080
        assert settings.database.DATABASE_URL == "sqlite:///./other.db"
        assert settings.LOG_LEVEL == "DEBUG"

    def test_test_database_in_test_env(self):
        settings = Settings.from_env({
            "APP_ENV": "test",
            "DATABASE_URL": "sqlite:///./dev.db",
            "TEST_DATABASE_URL": "sqlite://",
        })

        assert settings.database.DATABASE_URL == "sqlite://"


class TestCreateApp:
    """Test application factory."""

    def test_state_is_built_from_settings(self, settings):
        app = create_app(settings)

        assert app.state.settings is settings
        assert app.state.token_service.ttl_seconds == settings.auth.TOKEN_TTL_SECONDS
        app.state.engine.dispose()

    def test_missing_secret_gets_random_one(self):
        settings = Settings.from_env({"DATABASE_URL": "sqlite://"})
        app = create_app(settings)

        assert settings.auth.SECRET is None
        assert app.state.settings.auth.SECRET
        token = app.state.token_service.issue({"username": "root", "id": "1"})
        assert app.state.token_service.verify(token) == {"username": "root", "id": "1"}
        app.state.engine.dispose()
