from sqlmodel import SQLModel, create_engine

from app.core.config import settings
from app.core.logging import get_logger

# Import the model so SQLModel.metadata knows about the Products table
from app.schemas.products import Product

logger = get_logger(__name__)


def init_db():
    """
    Creates the Products table if it does not exist yet.

    The app runs on an async driver (+aioodbc, +aiosqlite), so this one-time
    script goes through the synchronous equivalent of the same URL.
    """
    engine = create_engine(settings.sync_database_url, echo=settings.DB_ECHO)

    logger.info("Creating the %s table from the model metadata...", Product.__tablename__)
    SQLModel.metadata.create_all(engine, tables=[Product.__table__])
    engine.dispose()

    logger.info("Products table is ready.")


if __name__ == "__main__":
    init_db()
