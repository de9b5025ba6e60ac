"""HTTP handlers for subscription endpoints."""

from __future__ import annotations

import logging
from typing import Any

from .response import error_response, success_response
from .usecases import SubscriptionUseCase

logger = logging.getLogger(__name__)


class SubscriptionHandler:
    """Turns subscription use cases into HTTP answers."""

    def __init__(self, subscription_use_case: SubscriptionUseCase) -> None:
        self._use_case = subscription_use_case

    def get_all_subscriptions(self) -> tuple[dict[str, Any], int]:
        """All subscriptions as a (body, status) pair."""
        try:
            subscriptions = self._use_case.get_all_subscriptions()
        except Exception as exc:  # any storage failure becomes a 500 answer
            logger.error("Failed to get subscriptions: %s", exc)
            return error_response(500, "Failed to get subscriptions", exc)
        return success_response(200, "Subscriptions retrieved successfully", subscriptions)