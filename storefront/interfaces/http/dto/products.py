# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from storefront.domain.products.entities import MAX_PRICE, MAX_QUANTITY, Product
from storefront.domain.products.exceptions import UnknownProductFieldError

# Wire name -> domain field. Both spellings of the name are accepted.
_WIRE_FIELDS: dict[str, str] = {
    "productName": "name",
    "name": "name",
    "description": "description",
    "quantity": "quantity",
    "price": "price",
}


class ProductWriteDTO(BaseModel):
    """Body of POST and PUT: a complete product."""

    name: str = Field(
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("productName", "name"),
    )
    description: str | None = Field(None, max_length=10_000)
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    price: float = Field(ge=0, le=MAX_PRICE, allow_inf_nan=False)

    model_config = ConfigDict(extra="ignore")

    @field_validator("name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ProductPatchDTO(BaseModel):
    """Body of PATCH: any subset of the updatable fields."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    quantity: int | None = Field(None, ge=0, le=MAX_QUANTITY)
    price: float | None = Field(None, ge=0, le=MAX_PRICE, allow_inf_nan=False)

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "quantity", "price", mode="before")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value

    @classmethod
    def parse_changes(cls, body: dict[str, Any]) -> dict[str, Any]:
        unknown = [key for key in body if key not in _WIRE_FIELDS]
        if unknown:
            raise UnknownProductFieldError(unknown)
        mapped = {_WIRE_FIELDS[key]: value for key, value in body.items()}
        return cls.model_validate(mapped).model_dump(exclude_unset=True)


class ProductDTO(BaseModel):
    product_id: int = Field(serialization_alias="productId")
    product_name: str = Field(serialization_alias="productName")
    description: str | None
    quantity: int
    price: float

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        return cls(
            product_id=product.id,
            product_name=product.name,
            description=product.description,
            quantity=product.quantity,
            price=product.price,
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
