"""ORM model for catalog products."""

from sqlalchemy import Boolean, Column, Integer, Numeric, String, Text, false

from catalog_api.models.base import Base


class Product(Base):
    """Catalog entry. price is returned as float so it serializes as a JSON number."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False, index=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    image = Column(String(2048), nullable=True)
    description = Column(Text, nullable=True)
    popular = Column(Boolean, nullable=False, default=False, server_default=false())
