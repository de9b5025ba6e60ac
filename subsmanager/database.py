"""MongoDB connection handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import DEFAULT_TIMEOUT, Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionConfig:
    """Where to connect and how long to wait for the server."""

    uri: str
    database: str
    timeout: timedelta = DEFAULT_TIMEOUT

    @classmethod
    def from_config(cls, config: Config) -> ConnectionConfig:
        """Take the database settings out of the application configuration."""
        return cls(
            uri=config.database.uri,
            database=config.database.name,
            timeout=config.database.timeout,
        )


def connect(config: ConnectionConfig) -> tuple[MongoClient, Database]:
    """Open a client, check the server answers, and return the client and database.

    Raises the driver's error when the server cannot be reached.
    """
    logger.info("Connecting to MongoDB at %s...", config.uri)
    timeout_ms = max(1, int(config.timeout.total_seconds() * 1000))
    try:
        client: MongoClient = MongoClient(config.uri, serverSelectionTimeoutMS=timeout_ms)
    except PyMongoError as exc:
        logger.error("Failed to connect to MongoDB: %s", exc)
        raise

    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        logger.error("Failed to ping MongoDB: %s", exc)
        client.close()
        raise

    database = client[config.database]
    logger.info("Connected to MongoDB database: %s", config.database)
    return client, database


def close(client: MongoClient) -> None:
    """Close the client's connections."""
    logger.info("Closing MongoDB connection...")
    try:
        client.close()
    except PyMongoError as exc:
        logger.error("Error closing MongoDB connection: %s", exc)
        raise
    logger.info("MongoDB connection closed successfully")