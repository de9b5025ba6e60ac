"""Application wiring and the HTTP server."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any

from flask import Flask
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from . import config as config_module
from . import database
from .config import Config
from .handlers import SubscriptionHandler
from .mongo_subscription_repository import MongoSubscriptionRepository
from .router import AppHandlers, setup_routes
from .usecases import SubscriptionUseCase

logger = logging.getLogger(__name__)


@dataclass
class App:
    """The application's configuration, database handles and handlers."""

    config: Config
    client: MongoClient
    db: Database
    handlers: AppHandlers

    @classmethod
    def create(cls, config: Config | None = None) -> App:
        """Connect to the database and build every dependency."""
        cfg = config if config is not None else config_module.load()
        logger.info("Configuration loaded")
        client, db = database.connect(database.ConnectionConfig.from_config(cfg))
        repository = MongoSubscriptionRepository(db)
        handler = SubscriptionHandler(SubscriptionUseCase(repository))
        return cls(config=cfg, client=client, db=db, handlers=AppHandlers(subscription=handler))

    def close(self) -> None:
        """Release the database connection."""
        database.close(self.client)

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class Server:
    """The HTTP server exposing the API."""

    def __init__(self, app: App) -> None:
        self._app = app
        self.address = ":" + app.config.server.port
        self._flask = Flask(__name__)
        setup_routes(self._flask, app.handlers)

    def start(self) -> None:
        """Serve requests on all interfaces until stopped."""
        logger.info("Server starting on %s", self.address)
        port = int(self._app.config.server.port)
        self._flask.run(host="0.0.0.0", port=port, debug=False)

    def handler(self) -> Flask:
        """The WSGI application, handy for tests."""
        return self._flask


def main(argv: list[str] | None = None) -> int:
    """Start the API server; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="subsmanager", description="Run the subscriptions API server.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        application = App.create()
    except (PyMongoError, ValueError) as exc:
        logger.critical("Failed to initialize application: %s", exc)
        return 1

    with application:
        try:
            Server(application).start()
        except (OSError, ValueError) as exc:
            logger.critical("Failed to start server: %s", exc)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())