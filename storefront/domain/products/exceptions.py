# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.shared.errors import NotFoundError, ValidationError


class ProductNotFoundError(NotFoundError):
    code = "product_not_found"
    message = "Product not found"

    def __init__(self, product_id: int) -> None:
        super().__init__(context={"product_id": product_id})


class NoFieldsToUpdateError(ValidationError):
    code = "no_fields_to_update"
    message = "No fields to update"


class UnknownProductFieldError(ValidationError):
    code = "unknown_fields"
    message = "Unknown fields in update"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(context={"fields": sorted(fields)})
