from decimal import Decimal
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

# Upper bound of the store's INT columns (id, qty)
SQL_INT_MAX = 2**31 - 1


class ProductBase(SQLModel):
    name: str = Field(min_length=1, max_length=100)
    # Stored as DECIMAL(10, 2); zero is a valid price, negatives are not
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    qty: int = Field(ge=0, le=SQL_INT_MAX)
    description: str = Field(default="", max_length=255)


# Model for the database table
class Product(ProductBase, table=True):
    __tablename__ = "Products"

    id: Optional[int] = Field(default=None, primary_key=True)


# Schema for CREATE and UPDATE (API input). Updates replace every mutable field.
class ProductCreate(ProductBase):
    description: Optional[str] = Field(default="", max_length=255)

    # Trim before the length bounds run, so they apply to the stored value
    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("description")
    @classmethod
    def default_description(cls, value: Optional[str]) -> str:
        return value or ""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptop",
                    "price": 75000,
                    "qty": 5,
                    "description": "High performance laptop",
                }
            ]
        }
    }


# Schema for READING data (API output). Price goes out as a JSON number.
class ProductRead(SQLModel):
    id: int
    name: str
    price: float
    qty: int
    description: str


class ProductCreated(SQLModel):
    message: str
    id: int
