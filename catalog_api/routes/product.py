from flask import Blueprint

from catalog_api.errors import NotFound
from catalog_api.extensions import token_auth
from catalog_api.logger import logger
from catalog_api.repositories import product_repository
from catalog_api.responses import page_args, paginated, success
from catalog_api.schemas import ProductDto, parse_payload

bp_product = Blueprint("bp_product", __name__, url_prefix="/api/products")


def _not_found(func_name, product_id):
    logger.warning(f"[{func_name}] Product {product_id} not found")
    return NotFound("Product not found")


# List products with their category, paginated
@bp_product.route("/get", methods=["GET"])
@token_auth.required
def get_all_products():
    page, limit, max_limit = page_args()
    pagination = product_repository.get_paginated_products(page, limit, max_limit)
    logger.info(
        f"[get_all_products] Page {pagination.page} of {pagination.pages} "
        f"({pagination.total} products)"
    )
    return paginated(
        pagination,
        bp_product.url_prefix + "/get",
        [p.to_dict() for p in pagination.items],
    )


@bp_product.route("/<int:product_id>/get", methods=["GET"])
@token_auth.required
def get_product_by_id(product_id):
    product = product_repository.get_product(product_id)
    if product is None:
        raise _not_found("get_product_by_id", product_id)
    return success("Found successfully", product.to_dict())


# A missing categoryId surfaces as NotFound from the repository
@bp_product.route("/create", methods=["POST"])
@token_auth.required
def create_product():
    dto = parse_payload(ProductDto)
    product = product_repository.create_product(dto)
    logger.info(f"[create_product] Product created with ID: {product.id} in category {product.category_id}")
    return success("Product created successfully", product.to_dict())


@bp_product.route("/<int:product_id>/update", methods=["PUT"])
@token_auth.required
def update_product(product_id):
    product = product_repository.get_product(product_id)
    if product is None:
        raise _not_found("update_product", product_id)

    dto = parse_payload(ProductDto)
    product = product_repository.update_product(product, dto)
    logger.info(f"[update_product] Product {product_id} updated")
    return success("Product updated successfully", product.to_dict())


@bp_product.route("/<int:product_id>/delete", methods=["DELETE"])
@token_auth.required
def delete_product(product_id):
    product = product_repository.get_product(product_id)
    if not product_repository.delete_product(product):
        raise _not_found("delete_product", product_id)

    logger.info(f"[delete_product] Product {product_id} deleted")
    return success("Product deleted successfully")
