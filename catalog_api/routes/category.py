from flask import Blueprint

from catalog_api.errors import NotFound
from catalog_api.extensions import token_auth
from catalog_api.logger import logger
from catalog_api.repositories import category_repository
from catalog_api.responses import page_args, paginated, success
from catalog_api.schemas import CategoryDto, parse_payload

bp_category = Blueprint("bp_category", __name__, url_prefix="/api/categories")


def _not_found(func_name, category_id):
    logger.warning(f"[{func_name}] Category {category_id} not found")
    return NotFound("Category not found")


# List categories with their products, paginated
@bp_category.route("/get", methods=["GET"])
@token_auth.required
def get_all_categories():
    page, limit, max_limit = page_args()
    pagination = category_repository.get_paginated_categories(page, limit, max_limit)
    logger.info(
        f"[get_all_categories] Page {pagination.page} of {pagination.pages} "
        f"({pagination.total} categories)"
    )
    return paginated(
        pagination,
        bp_category.url_prefix + "/get",
        [c.to_dict() for c in pagination.items],
    )


@bp_category.route("/<int:category_id>/get", methods=["GET"])
@token_auth.required
def get_category_by_id(category_id):
    category = category_repository.get_category(category_id)
    if category is None:
        raise _not_found("get_category_by_id", category_id)
    return success("Found successfully", category.to_dict())


@bp_category.route("/create", methods=["POST"])
@token_auth.required
def create_category():
    dto = parse_payload(CategoryDto)
    category = category_repository.create_category(dto)
    logger.info(f"[create_category] Category created with ID: {category.id}")
    return success("Category created successfully", category.to_dict(include_products=False))


@bp_category.route("/<int:category_id>/update", methods=["PUT"])
@token_auth.required
def update_category(category_id):
    category = category_repository.get_category(category_id)
    if category is None:
        raise _not_found("update_category", category_id)

    dto = parse_payload(CategoryDto)
    category = category_repository.update_category(category, dto)
    logger.info(f"[update_category] Category {category_id} updated")
    return success("Category updated successfully", category.to_dict(include_products=False))


@bp_category.route("/<int:category_id>/delete", methods=["DELETE"])
@token_auth.required
def delete_category(category_id):
    category = category_repository.get_category(category_id)
    if not category_repository.delete_category(category):
        raise _not_found("delete_category", category_id)

    logger.info(f"[delete_category] Category {category_id} deleted with its products")
    return success("Category deleted successfully")
