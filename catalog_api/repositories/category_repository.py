from sqlalchemy.orm import selectinload

from catalog_api.extensions import db
from catalog_api.models.category import Category
from catalog_api.repositories.base import commit, paginate


def _ordered():
    return (
        db.select(Category)
        .options(selectinload(Category.products))
        .order_by(Category.name.asc(), Category.id.asc())
    )


def get_categories():
    return db.session.execute(_ordered()).scalars().all()


def get_paginated_categories(page, limit, max_limit):
    return paginate(_ordered(), page, limit, max_limit)


def get_category(category_id):
    return db.session.get(Category, category_id)


def create_category(dto):
    category = Category.create_from_dto(dto)
    db.session.add(category)
    commit("creating the category")
    return category


def update_category(category, dto):
    # Same data: skip the write
    if category.matches(dto):
        return category

    category.name = dto.name
    category.description = dto.description
    commit("updating the category")
    return category


def delete_category(category):
    if category is None:
        return False
    db.session.delete(category)
    commit("deleting the category")
    return True
