from typing import Optional

from flask import request
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from catalog_api.errors import ValidationError


class CategoryDto(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Please provide a name")
        return value


class ProductDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=128)
    description: Optional[str] = None
    price: float = Field(ge=0, allow_inf_nan=False)
    category_id: int = Field(alias="categoryId")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Please provide a name")
        return value


def parse_payload(dto_class):
    """Validate the current request's JSON body into ``dto_class``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationError("Invalid request payload", errors=errors) from e
