import pytest
from pydantic import ValidationError

from catalog_api.schemas import CategoryDto, ProductDto


def test_category_dto_description_optional():
    dto = CategoryDto.model_validate({"name": "Audio"})
    assert dto.description is None


@pytest.mark.parametrize("payload", [
    {},
    {"name": ""},
    {"name": "   "},
    {"name": "x" * 129},
])
def test_category_dto_rejects_bad_name(payload):
    with pytest.raises(ValidationError):
        CategoryDto.model_validate(payload)


def test_product_dto_reads_camel_case_category_id():
    dto = ProductDto.model_validate({"name": "Mouse", "price": 9.99, "categoryId": 3})
    assert dto.category_id == 3
    assert dto.description is None


@pytest.mark.parametrize("payload", [
    {"name": "Mouse", "price": 9.99},
    {"name": "Mouse", "categoryId": 1},
    {"name": "Mouse", "price": -1, "categoryId": 1},
    {"name": "Mouse", "price": "free", "categoryId": 1},
    {"name": "Mouse", "price": float("inf"), "categoryId": 1},
    {"name": "Mouse", "price": float("nan"), "categoryId": 1},
])
def test_product_dto_rejects_invalid_payload(payload):
    with pytest.raises(ValidationError):
        ProductDto.model_validate(payload)
