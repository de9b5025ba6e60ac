from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from subsmanager.entities import Product, Subscription, SubscriptionWithProduct, User

UTC = timezone.utc


def test_product_status_and_billing():
    product = Product(name="Music", price=9.9, billing_type="monthly", status="active")
    assert product.is_active()
    assert product.is_monthly()
    assert not product.is_yearly()
    assert not Product(status="inactive").is_active()


@pytest.mark.parametrize("price, valid", [(0.0, False), (-1.0, False), (0.01, True)])
def test_product_validate_price(price, valid):
    assert Product(price=price).validate_price() is valid


def test_product_monthly_price():
    assert Product(price=9.5, billing_type="monthly").monthly_price() == 9.5
    assert Product(price=120.0, billing_type="yearly").monthly_price() == pytest.approx(10.0)
    assert Product(price=7.0, billing_type="weekly").monthly_price() == 7.0


def test_product_document_round_trip():
    product = Product(
        id=ObjectId(),
        name="Video",
        description="Streaming",
        price=19.9,
        billing_type="yearly",
        category="entertainment",
        status="active",
        created_at=datetime(2024, 1, 2, tzinfo=UTC),
        updated_at=datetime(2024, 1, 3, tzinfo=UTC),
    )
    document = product.to_document()
    assert document["_id"] == product.id
    assert document["billing_type"] == "yearly"
    assert Product.from_document(document) == product


def test_product_document_omits_missing_id():
    assert "_id" not in Product(name="x").to_document()


def test_subscription_status_checks():
    assert Subscription(status="active").is_active()
    assert Subscription(status="cancelled").is_cancelled()
    assert Subscription(status="expired").is_expired()
    past = datetime.now(UTC) - timedelta(days=1)
    future = datetime.now(UTC) + timedelta(days=1)
    assert Subscription(status="active", end_date=past).is_expired()
    assert not Subscription(status="active", end_date=future).is_expired()
    assert not Subscription(status="active").is_expired()


def test_subscription_cancel():
    sub = Subscription(status="active")
    sub.cancel()
    assert sub.is_cancelled()
    assert sub.end_date is not None
    assert sub.end_date == sub.updated_at
    assert sub.end_date <= datetime.now(UTC)


def test_subscription_renew_adds_one_month():
    sub = Subscription(status="active", next_billing=datetime(2024, 1, 15, tzinfo=UTC))
    sub.renew()
    assert sub.next_billing == datetime(2024, 2, 15, tzinfo=UTC)


def test_subscription_renew_rolls_over_month_end():
    sub = Subscription(status="active", next_billing=datetime(2024, 1, 31, tzinfo=UTC))
    sub.renew()
    assert sub.next_billing == datetime(2024, 3, 2, tzinfo=UTC)


def test_subscription_renew_ignored_when_inactive():
    start = datetime(2024, 1, 15, tzinfo=UTC)
    sub = Subscription(status="cancelled", next_billing=start)
    sub.renew()
    assert sub.next_billing == start


def test_days_until_next_billing():
    ahead = Subscription(next_billing=datetime.now(UTC) + timedelta(days=10, hours=1))
    behind = Subscription(next_billing=datetime.now(UTC) - timedelta(days=2, hours=1))
    assert ahead.days_until_next_billing() == 10
    assert behind.days_until_next_billing() == -2


def test_subscription_document_round_trip_and_end_date():
    sub = Subscription(
        id=ObjectId(),
        user_id=ObjectId(),
        product_id=ObjectId(),
        status="active",
        start_date=datetime(2024, 1, 1, tzinfo=UTC),
        next_billing=datetime(2024, 2, 1, tzinfo=UTC),
        price_at_start=9.9,
    )
    document = sub.to_document()
    assert "end_date" not in document
    assert Subscription.from_document(document) == sub
    sub.end_date = datetime(2024, 6, 1, tzinfo=UTC)
    assert sub.to_document()["end_date"] == sub.end_date


def test_from_document_treats_naive_times_as_utc():
    sub = Subscription.from_document({"status": "active", "next_billing": datetime(2024, 2, 1)})
    assert sub.next_billing == datetime(2024, 2, 1, tzinfo=UTC)


def test_subscription_with_product_to_dict():
    sub_id, user_id, product_id = ObjectId(), ObjectId(), ObjectId()
    record = SubscriptionWithProduct(
        id=sub_id,
        user_id=user_id,
        product_id=product_id,
        product_name="Music",
        description="Songs",
        price=9.9,
        status="active",
        start_date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        next_billing=datetime(2024, 2, 2, 3, 4, 5, tzinfo=UTC),
        created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
    )
    body = record.to_dict()
    assert body["id"] == str(sub_id)
    assert body["user_id"] == str(user_id)
    assert body["product_name"] == "Music"
    assert body["start_date"] == "2024-01-02T03:04:05Z"
    assert "end_date" not in body


def test_subscription_with_product_zero_id_and_from_document():
    assert SubscriptionWithProduct().to_dict()["id"] == "0" * 24
    sub_id = ObjectId()
    record = SubscriptionWithProduct.from_document(
        {"_id": sub_id, "id": sub_id, "product_name": "Video", "price": 5, "status": "active"}
    )
    assert record.id == sub_id
    assert record.product_name == "Video"
    assert record.price == 5.0


def test_user_email_validation():
    assert User(email="someone@example.com").validate_email()
    assert not User(email="").validate_email()
    assert User(email="a" * 255).validate_email()
    assert not User(email="a" * 256).validate_email()
    assert not User(email="\u00e9" * 128).validate_email()


def test_user_active_and_set_password():
    password = "password"
    user = User(username="ana", status="active")
    user.set_password(password)
    assert user.password == password
    assert user.is_active()
    assert not User(status="blocked").is_active()


def test_user_to_dict_hides_password():
    password = "password"
    user = User(id=ObjectId(), username="ana", password=password, email="ana@example.com")
    body = user.to_dict()
    assert "password" not in body
    assert body["email"] == "ana@example.com"
    assert body["id"] == str(user.id)


def test_user_document_round_trip():
    password = "password"
    user = User(id=ObjectId(), username="ana", password=password, email="ana@example.com", status="active")
    document = user.to_document()
    assert document["password"] == password
    assert User.from_document(document) == user