"""Domain entities: products, subscriptions and users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from bson import ObjectId

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _json_time(value: datetime) -> str:
    moment = _as_utc(value).astimezone(timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    return text + "Z"


def _json_id(value: ObjectId | None) -> str:
    return str(value) if value is not None else "0" * 24


def _add_months(moment: datetime, months: int) -> datetime:
    """Add months, letting a day past the month's end roll into the next month."""
    index = moment.month - 1 + months
    first = moment.replace(year=moment.year + index // 12, month=index % 12 + 1, day=1)
    return first + timedelta(days=moment.day - 1)


@dataclass
class Product:
    """A product that can be subscribed to."""

    id: ObjectId | None = None
    name: str = ""
    description: str = ""
    price: float = 0.0
    billing_type: str = ""
    category: str = ""
    status: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def is_active(self) -> bool:
        return self.status == "active"

    def is_monthly(self) -> bool:
        return self.billing_type == "monthly"

    def is_yearly(self) -> bool:
        return self.billing_type == "yearly"

    def validate_price(self) -> bool:
        return self.price > 0

    def monthly_price(self) -> float:
        """The price per month; yearly prices are spread over twelve months."""
        if self.is_yearly():
            return self.price / 12
        return self.price

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document.update(
            name=self.name,
            description=self.description,
            price=self.price,
            billing_type=self.billing_type,
            category=self.category,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Product:
        return cls(
            id=document.get("_id"),
            name=document.get("name", ""),
            description=document.get("description", ""),
            price=float(document.get("price", 0.0)),
            billing_type=document.get("billing_type", ""),
            category=document.get("category", ""),
            status=document.get("status", ""),
            created_at=_as_utc(document.get("created_at")) or ZERO_TIME,
            updated_at=_as_utc(document.get("updated_at")) or ZERO_TIME,
        )


@dataclass
class Subscription:
    """A user's subscription to a product."""

    id: ObjectId | None = None
    user_id: ObjectId | None = None
    product_id: ObjectId | None = None
    status: str = ""
    start_date: datetime = ZERO_TIME
    end_date: datetime | None = None
    next_billing: datetime = ZERO_TIME
    price_at_start: float = 0.0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def is_active(self) -> bool:
        return self.status == "active"

    def is_cancelled(self) -> bool:
        return self.status == "cancelled"

    def is_expired(self) -> bool:
        if self.status == "expired":
            return True
        return self.end_date is not None and _as_utc(self.end_date) < _now()

    def cancel(self) -> None:
        """Mark the subscription cancelled, ending it now."""
        now = _now()
        self.status = "cancelled"
        self.end_date = now
        self.updated_at = now

    def renew(self) -> None:
        """Move the next billing date one month ahead if the subscription is active."""
        if self.is_active():
            self.next_billing = _add_months(self.next_billing, 1)
            self.updated_at = _now()

    def days_until_next_billing(self) -> int:
        """Whole days until the next billing, truncated toward zero."""
        remaining = _as_utc(self.next_billing) - _now()
        return int(remaining.total_seconds() / 86400)

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document.update(
            user_id=self.user_id,
            product_id=self.product_id,
            status=self.status,
            start_date=self.start_date,
        )
        if self.end_date is not None:
            document["end_date"] = self.end_date
        document.update(
            next_billing=self.next_billing,
            price_at_start=self.price_at_start,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Subscription:
        return cls(
            id=document.get("_id"),
            user_id=document.get("user_id"),
            product_id=document.get("product_id"),
            status=document.get("status", ""),
            start_date=_as_utc(document.get("start_date")) or ZERO_TIME,
            end_date=_as_utc(document.get("end_date")),
            next_billing=_as_utc(document.get("next_billing")) or ZERO_TIME,
            price_at_start=float(document.get("price_at_start", 0.0)),
            created_at=_as_utc(document.get("created_at")) or ZERO_TIME,
            updated_at=_as_utc(document.get("updated_at")) or ZERO_TIME,
        )


@dataclass
class SubscriptionWithProduct:
    """A subscription joined with the details of its product."""

    id: ObjectId | None = None
    user_id: ObjectId | None = None
    product_id: ObjectId | None = None
    product_name: str = ""
    description: str = ""
    price: float = 0.0
    status: str = ""
    start_date: datetime = ZERO_TIME
    end_date: datetime | None = None
    next_billing: datetime = ZERO_TIME
    created_at: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the record."""
        body: dict[str, Any] = {
            "id": _json_id(self.id),
            "user_id": _json_id(self.user_id),
            "product_id": _json_id(self.product_id),
            "product_name": self.product_name,
            "description": self.description,
            "price": self.price,
            "status": self.status,
            "start_date": _json_time(self.start_date),
        }
        if self.end_date is not None:
            body["end_date"] = _json_time(self.end_date)
        body["next_billing"] = _json_time(self.next_billing)
        body["created_at"] = _json_time(self.created_at)
        return body

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> SubscriptionWithProduct:
        return cls(
            id=document.get("id", document.get("_id")),
            user_id=document.get("user_id"),
            product_id=document.get("product_id"),
            product_name=document.get("product_name", ""),
            description=document.get("description", ""),
            price=float(document.get("price", 0.0)),
            status=document.get("status", ""),
            start_date=_as_utc(document.get("start_date")) or ZERO_TIME,
            end_date=_as_utc(document.get("end_date")),
            next_billing=_as_utc(document.get("next_billing")) or ZERO_TIME,
            created_at=_as_utc(document.get("created_at")) or ZERO_TIME,
        )


@dataclass
class User:
    """An account holder."""

    id: ObjectId | None = None
    username: str = ""
    password: str = ""
    email: str = ""
    status: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def is_active(self) -> bool:
        return self.status == "active"

    def set_password(self, password: str) -> None:
        """Store the password as given."""
        self.password = password

    def validate_email(self) -> bool:
        """Check that the address is present and at most 255 bytes long."""
        return 0 < len(self.email.encode("utf-8")) <= 255

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the user; the password is never included."""
        return {
            "id": _json_id(self.id),
            "username": self.username,
            "email": self.email,
            "status": self.status,
            "created_at": _json_time(self.created_at),
            "updated_at": _json_time(self.updated_at),
        }

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document.update(
            username=self.username,
            password=self.password,
            email=self.email,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> User:
        return cls(
            id=document.get("_id"),
            username=document.get("username", ""),
            password=document.get("password", ""),
            email=document.get("email", ""),
            status=document.get("status", ""),
            created_at=_as_utc(document.get("created_at")) or ZERO_TIME,
            updated_at=_as_utc(document.get("updated_at")) or ZERO_TIME,
        )