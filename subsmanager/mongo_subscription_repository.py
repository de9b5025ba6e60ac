"""Subscription storage backed by a MongoDB collection."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from bson import ObjectId
from pymongo.database import Database

from .entities import Subscription, SubscriptionWithProduct
from .repositories import SubscriptionRepository

COLLECTION = "subscriptions"

_PROJECTION = {
    "id": "$_id",
    "user_id": 1,
    "product_id": 1,
    "product_name": "$product.name",
    "description": "$product.description",
    "price": "$product.price",
    "status": 1,
    "start_date": 1,
    "end_date": 1,
    "next_billing": 1,
    "created_at": 1,
}


def _with_product(match: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    """An aggregation pipeline joining subscriptions with their products."""
    pipeline: list[dict[str, Any]] = []
    if match is not None:
        pipeline.append({"$match": match})
    pipeline.extend(
        [
            {
                "$lookup": {
                    "from": "products",
                    "localField": "product_id",
                    "foreignField": "_id",
                    "as": "product",
                }
            },
            {"$unwind": "$product"},
            {"$project": dict(_PROJECTION)},
        ]
    )
    return pipeline


class MongoSubscriptionRepository(SubscriptionRepository):
    """Subscriptions kept in the ``subscriptions`` collection."""

    def __init__(self, db: Database) -> None:
        self._db = db
        self._collection = db[COLLECTION]

    def _aggregate(self, match: dict[str, Any] | None = None) -> list[SubscriptionWithProduct]:
        return [
            SubscriptionWithProduct.from_document(document)
            for document in self._collection.aggregate(_with_product(match))
        ]

    def create(self, subscription: Subscription) -> None:
        self._collection.insert_one(subscription.to_document())

    def get_by_id(self, subscription_id: ObjectId) -> Subscription | None:
        document = self._collection.find_one({"_id": subscription_id})
        return Subscription.from_document(document) if document is not None else None

    def get_all(self) -> list[SubscriptionWithProduct]:
        return self._aggregate()

    def get_by_user_id(self, user_id: ObjectId) -> list[SubscriptionWithProduct]:
        return self._aggregate({"user_id": user_id})

    def get_by_product_id(self, product_id: ObjectId) -> list[Subscription]:
        return [
            Subscription.from_document(document)
            for document in self._collection.find({"product_id": product_id})
        ]

    def get_active(self) -> list[SubscriptionWithProduct]:
        return self._aggregate({"status": "active"})

    def get_expiring(self, days: int) -> list[SubscriptionWithProduct]:
        threshold = datetime.now(timezone.utc) + timedelta(days=days)
        return self._aggregate({"status": "active", "next_billing": {"$lte": threshold}})

    def update(self, subscription: Subscription) -> None:
        changes = subscription.to_document()
        changes.pop("_id", None)
        self._collection.update_one({"_id": subscription.id}, {"$set": changes})

    def delete(self, subscription_id: ObjectId) -> None:
        self._collection.delete_one({"_id": subscription_id})

    def count(self) -> int:
        return self._collection.count_documents({})