# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

# Columns a partial update may touch; anything else is rejected before reaching storage.
UPDATABLE_FIELDS: frozenset[str] = frozenset({"name", "description", "quantity", "price"})

# Storage limits: ids and quantity are 32-bit integer columns, price is NUMERIC(12, 2).
MAX_ID = 2**31 - 1
MAX_QUANTITY = 2**31 - 1
MAX_PRICE = 9_999_999_999.99


@dataclass(slots=True, frozen=True)
class Product:

    id: int
    name: str
    description: str | None
    quantity: int
    price: float
