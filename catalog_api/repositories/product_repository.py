from sqlalchemy.orm import joinedload

from catalog_api.errors import NotFound
from catalog_api.extensions import db
from catalog_api.models.product import Product
from catalog_api.repositories.base import commit, paginate
from catalog_api.repositories.category_repository import get_category


def _ordered():
    return (
        db.select(Product)
        .options(joinedload(Product.category))
        .order_by(Product.name.asc(), Product.id.asc())
    )


def get_products():
    return db.session.execute(_ordered()).scalars().all()


def get_paginated_products(page, limit, max_limit):
    return paginate(_ordered(), page, limit, max_limit)


def get_product(product_id):
    return db.session.get(Product, product_id)


def _require_category(category_id):
    category = get_category(category_id)
    if category is None:
        raise NotFound("Category not found")
    return category


def create_product(dto):
    """Create a product under an existing category.

    Raises NotFound, and writes nothing, when ``dto.category_id`` does not exist.
    """
    category = _require_category(dto.category_id)
    product = Product.create_from_dto(dto, category)
    db.session.add(product)
    commit("creating the product")
    return product


def update_product(product, dto):
    if product.matches(dto):
        return product

    # Resolve the new category before touching the row
    if product.category_id != dto.category_id:
        product.category = _require_category(dto.category_id)

    product.name = dto.name
    product.description = dto.description
    product.price = dto.price
    commit("updating the product")
    return product


def delete_product(product):
    if product is None:
        return False
    db.session.delete(product)
    commit("deleting the product")
    return True
