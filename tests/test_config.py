from pathlib import Path

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides: str) -> Settings:
    values = {
        "DATABASE_URL": "sqlite+aiosqlite:///./test.db",
        "CORS_ORIGINS": "http://localhost:5173",
    }
    values.update(overrides)
    return Settings(**values)


def test_cors_origin_list_supports_comma_separated_values() -> None:
    settings = _settings(CORS_ORIGINS="http://localhost:5173,http://localhost:3000")
    assert settings.cors_origin_list() == [
        "http://localhost:5173",
        "http://localhost:3000",
    ]


def test_cors_origin_list_normalizes_quotes_and_trailing_slashes() -> None:
    settings = _settings(CORS_ORIGINS="'http://localhost:5173/'")
    assert settings.cors_origin_list() == ["http://localhost:5173"]


def test_cors_origin_list_supports_json_array_format() -> None:
    settings = _settings(
        CORS_ORIGINS='["http://localhost:5173", "http://127.0.0.1:5173/"]'
    )
    assert settings.cors_origin_list() == [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


@pytest.mark.parametrize(
    "raw",
    [
        "postgres://u:p@db:5432/app",
        "postgresql://u:p@db:5432/app",
    ],
)
def test_database_url_is_pinned_to_asyncpg(raw: str) -> None:
    settings = _settings(DATABASE_URL=raw)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/app"


def test_database_url_with_explicit_driver_is_kept() -> None:
    settings = _settings(DATABASE_URL="sqlite+aiosqlite:///./other.db")
    assert settings.database_url == "sqlite+aiosqlite:///./other.db"


def test_log_level_is_upper_cased() -> None:
    assert _settings(LOG_LEVEL=" debug ").log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        _settings(LOG_LEVEL="chatty")


def test_default_page_limit_cannot_exceed_max() -> None:
    with pytest.raises(ValidationError):
        _settings(PAGINATION_DEFAULT_LIMIT="50", PAGINATION_MAX_LIMIT="20")


def test_sqlite_test_database_is_kept_out_of_the_working_tree() -> None:
    from app.db.session import engine

    if engine.url.get_backend_name() != "sqlite":
        pytest.skip("DATABASE_URL points at a server database")
    path = Path(engine.url.database)
    assert path.is_absolute()
    assert Path.cwd() not in path.parents
