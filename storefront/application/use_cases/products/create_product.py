# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.products.entities import Product
from storefront.domain.products.repositories import ProductRepository
from storefront.shared.logging import logger


class CreateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(
        self,
        *,
        name: str,
        description: str | None,
        quantity: int,
        price: float,
        actor_id: int | None = None,
    ) -> Product:
        product = self._products.add(
            Product(id=0, name=name, description=description, quantity=quantity, price=price)
        )
        logger.info(f"products.create: id={product.id} by user={actor_id}")
        return product
