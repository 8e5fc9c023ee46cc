"""Tests for settings."""

from pathlib import Path

from movieapi.config import DEFAULT_DATABASE_URL, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "MOVIEAPI_DATABASE_URL",
            "MOVIEAPI_UPLOAD_DIR",
            "MOVIEAPI_STATIC_PATH",
            "MOVIEAPI_CORS_ORIGINS",
            "MOVIEAPI_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.upload_dir == Path("uploads")
        assert settings.static_path == "/StaticFiles"
        assert settings.cors_origins == ["*"]
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MOVIEAPI_DATABASE_URL", "postgresql://db/movies")
        monkeypatch.setenv("MOVIEAPI_UPLOAD_DIR", "/srv/posters")
        monkeypatch.setenv("MOVIEAPI_STATIC_PATH", "media/")
        monkeypatch.setenv("MOVIEAPI_CORS_ORIGINS", "http://a.test, http://b.test")
        monkeypatch.setenv("MOVIEAPI_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.database_url == "postgresql://db/movies"
        assert settings.upload_dir == Path("/srv/posters")
        assert settings.static_path == "/media"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"
