# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import delete, select, update

from storefront.domain.products.entities import MAX_ID, UPDATABLE_FIELDS
from storefront.domain.products.entities import Product as DomainProduct
from storefront.domain.products.repositories import ProductRepository
from storefront.infrastructure.db.models import Product
from storefront.infrastructure.db.session import Database


def _storable_id(product_id: int) -> bool:
    return 1 <= product_id <= MAX_ID


def _to_domain(row: Product) -> DomainProduct:
    return DomainProduct(
        id=row.id,
        name=row.name,
        description=row.description,
        quantity=int(row.quantity),
        price=float(row.price),
    )


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def list_all(self) -> Sequence[DomainProduct]:
        with self._db.session_scope() as session:
            rows = session.scalars(select(Product).order_by(Product.id.asc())).all()
            return [_to_domain(row) for row in rows]

    def find_by_id(self, product_id: int) -> DomainProduct | None:
        if not _storable_id(product_id):
            return None
        with self._db.session_scope() as session:
            row = session.get(Product, product_id)
            return _to_domain(row) if row else None

    def add(self, product: DomainProduct) -> DomainProduct:
        with self._db.session_scope() as session:
            row = Product(
                name=product.name,
                description=product.description,
                quantity=product.quantity,
                price=product.price,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def replace(self, product: DomainProduct) -> bool:
        return self.update_fields(
            product.id,
            {
                "name": product.name,
                "description": product.description,
                "quantity": product.quantity,
                "price": product.price,
            },
        )

    def update_fields(self, product_id: int, changes: Mapping[str, Any]) -> bool:
        if not _storable_id(product_id):
            return False
        values = {field: value for field, value in changes.items() if field in UPDATABLE_FIELDS}
        if not values:
            return self.find_by_id(product_id) is not None
        with self._db.session_scope() as session:
            result = session.execute(
                update(Product).where(Product.id == product_id).values(**values)
            )
            return bool(result.rowcount)

    def delete(self, product_id: int) -> bool:
        if not _storable_id(product_id):
            return False
        with self._db.session_scope() as session:
            result = session.execute(delete(Product).where(Product.id == product_id))
            return bool(result.rowcount)
