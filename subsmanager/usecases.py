"""Business rules for products, subscriptions and users."""

from __future__ import annotations

from bson import ObjectId

from .entities import Product, Subscription, SubscriptionWithProduct, User
from .repositories import ProductRepository, SubscriptionRepository, UserRepository


class UseCaseError(Exception):
    """A business rule rejected the operation."""


class ProductUseCase:
    """Operations on products."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._repo = product_repo

    def create_product(self, product: Product) -> None:
        if not product.validate_price():
            raise UseCaseError("invalid product price")
        if self._repo.get_by_name(product.name) is not None:
            raise UseCaseError("product with this name already exists")
        self._repo.create(product)

    def get_product_by_id(self, product_id: ObjectId) -> Product | None:
        return self._repo.get_by_id(product_id)

    def get_all_products(self) -> list[Product]:
        return self._repo.get_all()

    def get_active_products(self) -> list[Product]:
        return self._repo.get_active()

    def get_products_by_category(self, category: str) -> list[Product]:
        return self._repo.get_by_category(category)

    def update_product(self, product: Product) -> None:
        if not product.validate_price():
            raise UseCaseError("invalid product price")
        self._repo.update(product)

    def delete_product(self, product_id: ObjectId) -> None:
        self._repo.delete(product_id)

    def deactivate_product(self, product_id: ObjectId) -> None:
        product = self._repo.get_by_id(product_id)
        if product is None:
            raise UseCaseError("product not found")
        product.status = "inactive"
        self._repo.update(product)


class SubscriptionUseCase:
    """Operations on subscriptions."""

    def __init__(self, subscription_repo: SubscriptionRepository) -> None:
        self._repo = subscription_repo

    def get_all_subscriptions(self) -> list[SubscriptionWithProduct]:
        return self._repo.get_all()

    def get_subscriptions_by_user(self, user_id: ObjectId) -> list[SubscriptionWithProduct]:
        return self._repo.get_by_user_id(user_id)

    def create_subscription(self, subscription: Subscription) -> None:
        self._repo.create(subscription)


class UserUseCase:
    """Operations on users."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._repo = user_repo

    def create_user(self, user: User) -> None:
        if not user.validate_email():
            raise UseCaseError("invalid email format")
        if self._repo.get_by_email(user.email) is not None:
            raise UseCaseError("user with this email already exists")
        if self._repo.get_by_username(user.username) is not None:
            raise UseCaseError("user with this username already exists")
        user.set_password(user.password)
        self._repo.create(user)

    def get_user_by_id(self, user_id: ObjectId) -> User | None:
        return self._repo.get_by_id(user_id)

    def get_all_users(self) -> list[User]:
        return self._repo.get_all()

    def update_user(self, user: User) -> None:
        if not user.validate_email():
            raise UseCaseError("invalid email format")
        self._repo.update(user)

    def delete_user(self, user_id: ObjectId) -> None:
        self._repo.delete(user_id)

    def authenticate_user(self, email: str, password: str) -> User:
        """The user with these credentials; raises UseCaseError otherwise."""
        user = self._repo.get_by_email(email)
        if user is None:
            raise UseCaseError("user not found")
        if user.password != password:
            raise UseCaseError("invalid credentials")
        if not user.is_active():
            raise UseCaseError("user account is inactive")
        return user