# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Full (PUT) and partial (PATCH) product updates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storefront.domain.products.entities import UPDATABLE_FIELDS, Product
from storefront.domain.products.exceptions import (
    NoFieldsToUpdateError,
    ProductNotFoundError,
    UnknownProductFieldError,
)
from storefront.domain.products.repositories import ProductRepository
from storefront.shared.logging import logger


class ReplaceProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(
        self,
        product_id: int,
        *,
        name: str,
        description: str | None,
        quantity: int,
        price: float,
        actor_id: int | None = None,
    ) -> None:
        product = Product(
            id=product_id, name=name, description=description, quantity=quantity, price=price
        )
        if not self._products.replace(product):
            raise ProductNotFoundError(product_id)
        logger.info(f"products.replace: id={product_id} by user={actor_id}")


class PatchProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(
        self,
        product_id: int,
        changes: Mapping[str, Any],
        *,
        actor_id: int | None = None,
    ) -> None:
        if not changes:
            raise NoFieldsToUpdateError()
        unknown = [field for field in changes if field not in UPDATABLE_FIELDS]
        if unknown:
            raise UnknownProductFieldError(unknown)
        if not self._products.update_fields(product_id, dict(changes)):
            raise ProductNotFoundError(product_id)
        logger.info(
            f"products.patch: id={product_id} fields={sorted(changes)} by user={actor_id}"
        )
