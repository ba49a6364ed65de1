# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.products.exceptions import ProductNotFoundError
from storefront.domain.products.repositories import ProductRepository
from storefront.shared.logging import logger


class DeleteProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int, *, actor_id: int | None = None) -> None:
        if not self._products.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info(f"products.delete: id={product_id} by user={actor_id}")
