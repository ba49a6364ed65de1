# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import UPDATABLE_FIELDS, Product
from .exceptions import NoFieldsToUpdateError, ProductNotFoundError, UnknownProductFieldError

__all__ = [
    "UPDATABLE_FIELDS",
    "Product",
    "NoFieldsToUpdateError",
    "ProductNotFoundError",
    "UnknownProductFieldError",
]
