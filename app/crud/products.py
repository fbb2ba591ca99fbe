from typing import List, Optional

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.schemas.products import Product, ProductCreate

# Every function issues a single statement with bound parameters.


async def list_products(session: AsyncSession) -> List[Product]:
    """Retrieves every product in ascending id order."""
    statement = select(Product).order_by(Product.id)
    results = await session.exec(statement)
    return list(results.all())


async def get_product(session: AsyncSession, product_id: int) -> Optional[Product]:
    statement = select(Product).where(Product.id == product_id)
    results = await session.exec(statement)
    return results.first()


async def create_product(session: AsyncSession, product_in: ProductCreate) -> Product:
    """Inserts a new row and reads back the id the store assigned."""
    db_product = Product.model_validate(product_in)
    session.add(db_product)
    await session.commit()
    await session.refresh(db_product)
    return db_product


async def update_product(session: AsyncSession, product_id: int, product_in: ProductCreate) -> int:
    """
    Replaces name, price, qty and description of one product.
    Returns the row-affected count; 0 means the id does not exist.
    """
    statement = (
        update(Product)
        .where(Product.id == product_id)
        .values(
            name=product_in.name,
            price=product_in.price,
            qty=product_in.qty,
            description=product_in.description or "",
        )
    )
    result = await session.exec(statement)
    await session.commit()
    return result.rowcount


async def delete_product(session: AsyncSession, product_id: int) -> int:
    """Deletes one product by id and returns the row-affected count."""
    result = await session.exec(delete(Product).where(Product.id == product_id))
    await session.commit()
    return result.rowcount
