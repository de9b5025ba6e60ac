"""Storage interfaces for the domain entities.

Lookups of a single record return None when nothing matches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bson import ObjectId

from .entities import Product, Subscription, SubscriptionWithProduct, User


class ProductRepository(ABC):
    """Storage of products."""

    @abstractmethod
    def create(self, product: Product) -> None:
        """Store a new product."""

    @abstractmethod
    def get_by_id(self, product_id: ObjectId) -> Product | None:
        """The product with this id."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """The product with this name."""

    @abstractmethod
    def get_by_category(self, category: str) -> list[Product]:
        """All products in a category."""

    @abstractmethod
    def get_all(self) -> list[Product]:
        """All products."""

    @abstractmethod
    def get_active(self) -> list[Product]:
        """All active products."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Save changes to a stored product."""

    @abstractmethod
    def delete(self, product_id: ObjectId) -> None:
        """Remove a product."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""


class SubscriptionRepository(ABC):
    """Storage of subscriptions."""

    @abstractmethod
    def create(self, subscription: Subscription) -> None:
        """Store a new subscription."""

    @abstractmethod
    def get_by_id(self, subscription_id: ObjectId) -> Subscription | None:
        """The subscription with this id."""

    @abstractmethod
    def get_by_user_id(self, user_id: ObjectId) -> list[SubscriptionWithProduct]:
        """A user's subscriptions with their products."""

    @abstractmethod
    def get_by_product_id(self, product_id: ObjectId) -> list[Subscription]:
        """All subscriptions to a product."""

    @abstractmethod
    def get_all(self) -> list[SubscriptionWithProduct]:
        """All subscriptions with their products."""

    @abstractmethod
    def get_active(self) -> list[SubscriptionWithProduct]:
        """Active subscriptions with their products."""

    @abstractmethod
    def get_expiring(self, days: int) -> list[SubscriptionWithProduct]:
        """Active subscriptions billed within the given number of days."""

    @abstractmethod
    def update(self, subscription: Subscription) -> None:
        """Save changes to a stored subscription."""

    @abstractmethod
    def delete(self, subscription_id: ObjectId) -> None:
        """Remove a subscription."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored subscriptions."""


class UserRepository(ABC):
    """Storage of users."""

    @abstractmethod
    def create(self, user: User) -> None:
        """Store a new user."""

    @abstractmethod
    def get_by_id(self, user_id: ObjectId) -> User | None:
        """The user with this id."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """The user with this e-mail address."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """The user with this username."""

    @abstractmethod
    def get_all(self) -> list[User]:
        """All users."""

    @abstractmethod
    def update(self, user: User) -> None:
        """Save changes to a stored user."""

    @abstractmethod
    def delete(self, user_id: ObjectId) -> None:
        """Remove a user."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""