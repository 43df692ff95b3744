"""Pydantic schemas for catalog products."""

from pydantic import BaseModel, Field


class ProductIn(BaseModel):
    """Body for creating or replacing a product."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., description="Unit price")
    image: str | None = Field(default=None, max_length=2048, description="Image URL or path")
    description: str | None = None
    popular: bool = False


class ProductOut(ProductIn):
    """Stored product, including its id."""

    id: int

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    """Result of a product mutation."""

    message: str
    product: ProductOut
