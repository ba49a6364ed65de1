# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.products.create_product import CreateProductUseCase
from storefront.application.use_cases.products.delete_product import DeleteProductUseCase
from storefront.application.use_cases.products.get_product import GetProductUseCase
from storefront.application.use_cases.products.list_products import ListProductsUseCase
from storefront.application.use_cases.products.update_product import (PatchProductUseCase,
                                                                      ReplaceProductUseCase)
from storefront.domain.products.exceptions import NoFieldsToUpdateError
from storefront.interfaces.http.auth_gate import AuthGate, current_claims
from storefront.interfaces.http.dto.products import (ProductDTO, ProductPatchDTO,
                                                     ProductWriteDTO)
from storefront.shared.errors import ValidationError as AppValidationError
from storefront.shared.errors.validation import raise_validation_error


def _json_object() -> dict[str, Any]:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise AppValidationError("Request body must be a JSON object")
    return body


def _parse_write_body() -> ProductWriteDTO:
    try:
        return ProductWriteDTO.model_validate(_json_object())
    except ValidationError as exc:
        raise_validation_error(exc)


class ProductsController:
    def __init__(
        self,
        *,
        auth_gate: AuthGate,
        list_use_case: ListProductsUseCase,
        get_use_case: GetProductUseCase,
        create_use_case: CreateProductUseCase,
        replace_use_case: ReplaceProductUseCase,
        patch_use_case: PatchProductUseCase,
        delete_use_case: DeleteProductUseCase,
    ) -> None:
        self._auth_gate = auth_gate
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._replace_use_case = replace_use_case
        self._patch_use_case = patch_use_case
        self._delete_use_case = delete_use_case

    def list_products(self) -> tuple[Response, int]:
        products = self._list_use_case.execute()
        return jsonify([ProductDTO.from_entity(p).to_json() for p in products]), 200

    def get_product(self, product_id: int) -> tuple[Response, int]:
        product = self._get_use_case.execute(product_id)
        return jsonify(ProductDTO.from_entity(product).to_json()), 200

    def create_product(self) -> tuple[Response, int]:
        dto = _parse_write_body()
        product = self._create_use_case.execute(
            name=dto.name,
            description=dto.description,
            quantity=dto.quantity,
            price=dto.price,
            actor_id=current_claims().user_id,
        )
        return jsonify({"message": "Product added", "productId": product.id}), 201

    def replace_product(self, product_id: int) -> tuple[Response, int]:
        dto = _parse_write_body()
        self._replace_use_case.execute(
            product_id,
            name=dto.name,
            description=dto.description,
            quantity=dto.quantity,
            price=dto.price,
            actor_id=current_claims().user_id,
        )
        return jsonify({"message": "Product updated"}), 200

    def patch_product(self, product_id: int) -> tuple[Response, int]:
        body = _json_object()
        if not body:
            raise NoFieldsToUpdateError()
        try:
            changes = ProductPatchDTO.parse_changes(body)
        except ValidationError as exc:
            raise_validation_error(exc, "Invalid field values")
        self._patch_use_case.execute(product_id, changes, actor_id=current_claims().user_id)
        return jsonify({"message": "Product updated successfully"}), 200

    def delete_product(self, product_id: int) -> tuple[Response, int]:
        self._delete_use_case.execute(product_id, actor_id=current_claims().user_id)
        return jsonify({"message": "Product deleted"}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/products")
        gate = self._auth_gate.required
        bp.add_url_rule("", view_func=gate(self.list_products), methods=["GET"])
        bp.add_url_rule("", view_func=gate(self.create_product), methods=["POST"])
        bp.add_url_rule("/<int:product_id>", view_func=gate(self.get_product), methods=["GET"])
        bp.add_url_rule("/<int:product_id>", view_func=gate(self.replace_product),
                        methods=["PUT"])
        bp.add_url_rule("/<int:product_id>", view_func=gate(self.patch_product),
                        methods=["PATCH"])
        bp.add_url_rule("/<int:product_id>", view_func=gate(self.delete_product),
                        methods=["DELETE"])
        return bp
