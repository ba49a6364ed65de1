# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import Product


class ProductRepository(Protocol):
    def list_all(self) -> Sequence[Product]: ...
    def find_by_id(self, product_id: int) -> Product | None: ...
    def add(self, product: Product) -> Product: ...
    def replace(self, product: Product) -> bool: ...
    def update_fields(self, product_id: int, changes: Mapping[str, Any]) -> bool: ...
    def delete(self, product_id: int) -> bool: ...
