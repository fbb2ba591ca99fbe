"""Tests for URL assembly in AppSettings."""

from sqlalchemy.engine import make_url

from app.core.config import AppSettings


def make_settings(**overrides):
    values = dict(
        _env_file=None,
        DATABASE_URL=None,
        DB_SERVER="db.internal",
        DB_DATABASE="shop",
        DB_USER="api",
        DB_PASSWORD="s3cret",
        DB_PORT=1444,
    )
    values.update(overrides)
    return AppSettings(**values)


class TestDatabaseUrl:

    def test_sql_server_url_from_parts(self):
        url = make_url(make_settings().database_url)

        assert url.drivername == "mssql+aioodbc"
        assert url.host == "db.internal"
        assert url.port == 1444
        assert url.database == "shop"
        assert url.username == "api"
        assert url.password == "s3cret"
        assert url.query["driver"] == "ODBC Driver 18 for SQL Server"

    def test_encryption_off_and_trusted_certificate_by_default(self):
        url = make_url(make_settings().database_url)

        assert url.query["Encrypt"] == "no"
        assert url.query["TrustServerCertificate"] == "yes"

    def test_encryption_flags(self):
        url = make_url(make_settings(DB_ENCRYPT=True, DB_TRUST_SERVER_CERTIFICATE=False).database_url)

        assert url.query["Encrypt"] == "yes"
        assert url.query["TrustServerCertificate"] == "no"

    def test_override_url_wins(self):
        settings = make_settings(DATABASE_URL="sqlite+aiosqlite:///./products.db")

        assert settings.database_url == "sqlite+aiosqlite:///./products.db"

    def test_env_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("DB_SERVER", "from-env")
        monkeypatch.setenv("PORT", "8080")

        settings = AppSettings(_env_file=None, DATABASE_URL=None)

        assert settings.PORT == 8080
        assert make_url(settings.database_url).host == "from-env"


class TestSyncDatabaseUrl:

    def test_sql_server_uses_pyodbc(self):
        url = make_url(make_settings().sync_database_url)

        assert url.drivername == "mssql+pyodbc"
        assert url.host == "db.internal"
        assert url.query["Encrypt"] == "no"

    def test_sqlite_drops_async_driver(self):
        settings = make_settings(DATABASE_URL="sqlite+aiosqlite:///./products.db")

        assert settings.sync_database_url == "sqlite:///./products.db"
