# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from storefront.application.services.password_hashing import WerkzeugPasswordHasher
from storefront.application.services.tokens import JwtTokenService
from storefront.application.use_cases.products.create_product import CreateProductUseCase
from storefront.application.use_cases.products.delete_product import DeleteProductUseCase
from storefront.application.use_cases.products.get_product import GetProductUseCase
from storefront.application.use_cases.products.list_products import ListProductsUseCase
from storefront.application.use_cases.products.update_product import (
    PatchProductUseCase, ReplaceProductUseCase)
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.infrastructure.db import Database
from storefront.infrastructure.repositories.products.sqlalchemy_product_repository import \
    SqlAlchemyProductRepository
from storefront.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from storefront.interfaces.http.auth_gate import AuthGate
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.interfaces.http.controllers.products_controller import ProductsController
from storefront.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.auth.jwt_secret,
            ttl=timedelta(seconds=self.config.auth.token_ttl_seconds),
            algorithm=self.config.auth.jwt_algorithm,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(verifier=self.token_service)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository(self.database)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    # Product use cases

    @cached_property
    def list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(products=self.product_repository)

    @cached_property
    def get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(products=self.product_repository)

    @cached_property
    def create_product_use_case(self) -> CreateProductUseCase:
        return CreateProductUseCase(products=self.product_repository)

    @cached_property
    def replace_product_use_case(self) -> ReplaceProductUseCase:
        return ReplaceProductUseCase(products=self.product_repository)

    @cached_property
    def patch_product_use_case(self) -> PatchProductUseCase:
        return PatchProductUseCase(products=self.product_repository)

    @cached_property
    def delete_product_use_case(self) -> DeleteProductUseCase:
        return DeleteProductUseCase(products=self.product_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self.config.security,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(
            auth_gate=self.auth_gate,
            list_use_case=self.list_products_use_case,
            get_use_case=self.get_product_use_case,
            create_use_case=self.create_product_use_case,
            replace_use_case=self.replace_product_use_case,
            patch_use_case=self.patch_product_use_case,
            delete_use_case=self.delete_product_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
