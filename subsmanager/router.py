"""Route table of the HTTP API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flask import Flask

from .handlers import SubscriptionHandler


@dataclass
class AppHandlers:
    """The handlers the routes dispatch to."""

    subscription: SubscriptionHandler


def _not_implemented(message: str):
    def view(**_params: Any) -> tuple[dict[str, Any], int]:
        return {"message": message}, 501

    return view


def setup_routes(flask_app: Flask, app_handlers: AppHandlers) -> None:
    """Register every route on the Flask application."""

    def ping() -> tuple[dict[str, Any], int]:
        return {"message": "pong", "status": "healthy"}, 200

    flask_app.add_url_rule("/ping", endpoint="ping", view_func=ping, methods=["GET"])

    flask_app.add_url_rule(
        "/api/v1/subscriptions",
        endpoint="subscriptions.list",
        view_func=app_handlers.subscription.get_all_subscriptions,
        methods=["GET"],
    )

    flask_app.add_url_rule(
        "/api/v1/users",
        endpoint="users.list",
        view_func=_not_implemented("Users endpoint not implemented yet"),
        methods=["GET"],
    )
    flask_app.add_url_rule(
        "/api/v1/users/<user_id>/subscriptions",
        endpoint="users.subscriptions",
        view_func=_not_implemented("User subscriptions endpoint not implemented yet"),
        methods=["GET"],
    )

    flask_app.add_url_rule(
        "/api/v1/products",
        endpoint="products.list",
        view_func=_not_implemented("Products endpoint not implemented yet"),
        methods=["GET"],
    )