from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

# Async drivers and the synchronous driver used by one-off scripts
SYNC_DRIVERS = {
    "mssql+aioodbc": "mssql+pyodbc",
    "sqlite+aiosqlite": "sqlite",
}


class AppSettings(BaseSettings):
    PROJECT_NAME: str = "Products API"

    # Where uvicorn binds (exactly once)
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # SQL Server connection parts
    DB_SERVER: str = "localhost"
    DB_DATABASE: str = "products_db"
    DB_USER: str = "sa"
    DB_PASSWORD: str = ""
    DB_PORT: int = 1433
    DB_DRIVER: str = "ODBC Driver 18 for SQL Server"
    DB_ENCRYPT: bool = False
    DB_TRUST_SERVER_CERTIFICATE: bool = True

    # Full async URL, e.g. sqlite+aiosqlite:///./products.db. Wins over the DB_* parts.
    DATABASE_URL: Optional[str] = None

    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = False

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the store."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        url = URL.create(
            "mssql+aioodbc",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_SERVER,
            port=self.DB_PORT,
            database=self.DB_DATABASE,
            query={
                "driver": self.DB_DRIVER,
                "Encrypt": "yes" if self.DB_ENCRYPT else "no",
                "TrustServerCertificate": "yes" if self.DB_TRUST_SERVER_CERTIFICATE else "no",
            },
        )
        return url.render_as_string(hide_password=False)

    @property
    def sync_database_url(self) -> str:
        """
        Same URL with the async driver swapped for its synchronous one.
        Used by scripts that run outside the event loop (create_tables.py).
        """
        url = make_url(self.database_url)
        sync_driver = SYNC_DRIVERS.get(url.drivername)
        if sync_driver is None:
            return self.database_url
        return url.set(drivername=sync_driver).render_as_string(hide_password=False)


settings = AppSettings()
