"""Product catalog: public listing, admin-only create/update/delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.api.auth import require_admin
from catalog_api.core.database import get_db
from catalog_api.core.errors import NotFound, StoreFailure
from catalog_api.models import Product
from catalog_api.schemas.auth import TokenClaims
from catalog_api.schemas.products import ProductIn, ProductOut, ProductResponse

logger = logging.getLogger(__name__)
router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


@router.get("", response_model=list[ProductOut])
def list_products(
    db: Annotated[Session, Depends(get_db)],
) -> list[ProductOut]:
    """Return every product, ordered by id."""
    try:
        products = db.query(Product).order_by(Product.id).all()
    except SQLAlchemyError as e:
        logger.exception("Listing products failed")
        raise StoreFailure() from e
    return [ProductOut.model_validate(p) for p in products]


@router.post("", response_model=ProductResponse)
def create_product(
    admin: Annotated[TokenClaims, Depends(require_admin)],
    body: ProductIn,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    """Add a product (admin only)."""
    product = Product(**body.model_dump())
    try:
        db.add(product)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Creating product failed")
        raise StoreFailure() from e
    logger.info("Product id=%s created by user id=%s", product.id, admin.id)
    return ProductResponse(message="Product added", product=ProductOut.model_validate(product))


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    admin: Annotated[TokenClaims, Depends(require_admin)],
    product_id: int,
    body: ProductIn,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    """Replace every field of an existing product (admin only). 404 if the id is unknown."""
    try:
        product = db.get(Product, product_id)
        if product is None:
            raise NotFound(PRODUCT_NOT_FOUND)
        for field, value in body.model_dump().items():
            setattr(product, field, value)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Updating product id=%s failed", product_id)
        raise StoreFailure() from e
    logger.info("Product id=%s updated by user id=%s", product.id, admin.id)
    return ProductResponse(message="Product updated", product=ProductOut.model_validate(product))


@router.delete("/{product_id}", response_model=ProductResponse)
def delete_product(
    admin: Annotated[TokenClaims, Depends(require_admin)],
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    """Delete a product (admin only) and return the removed row. 404 if the id is unknown."""
    try:
        product = db.get(Product, product_id)
        if product is None:
            raise NotFound(PRODUCT_NOT_FOUND)
        removed = ProductOut.model_validate(product)
        db.delete(product)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Deleting product id=%s failed", product_id)
        raise StoreFailure() from e
    logger.info("Product id=%s deleted by user id=%s", product_id, admin.id)
    return ProductResponse(message="Product deleted", product=removed)
