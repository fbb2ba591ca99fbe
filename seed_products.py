import asyncio

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.logging import get_logger
from app.crud.products import create_product, list_products
from app.db.database import ConnectionProvider, create_db_and_tables
from app.schemas.products import ProductCreate

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Laptop", "price": 75000, "qty": 5, "description": "High performance laptop"},
    {"name": "Mouse", "price": 850, "qty": 40, "description": "Wireless optical mouse"},
    {"name": "Keyboard", "price": 2200, "qty": 25},
    {"name": "Monitor", "price": 18500.5, "qty": 8, "description": "27 inch IPS display"},
]


async def seed(session):
    """Inserts the sample products unless the table already has rows."""
    existing = await list_products(session)
    if existing:
        logger.info("Products table already has %d rows. Skipping seed.", len(existing))
        return

    for data in SAMPLE_PRODUCTS:
        product = await create_product(session, ProductCreate(**data))
        logger.info("Inserted product %s (%s)", product.id, product.name)


async def main():
    provider = ConnectionProvider(settings)
    try:
        engine = await provider.get_connection()
        await create_db_and_tables(engine)

        async with AsyncSession(engine) as session:
            await seed(session)
    except SQLAlchemyError as e:
        logger.error("Seeding failed: %s", e)
        raise
    finally:
        await provider.dispose()

    logger.info("--- Product seed complete ---")


if __name__ == "__main__":
    asyncio.run(main())
