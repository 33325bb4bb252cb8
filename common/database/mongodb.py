"""
Async MongoDB connection manager.

Wraps a Motor client so services can be handed a plain
AsyncIOMotorDatabase and stay unaware of connection handling.

Example:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(uri="mongodb://localhost:27017", database_name="workspace")
    organizations = db.get_collection("organizations")

Singleton access:
    from common.database import set_main_database, get_main_database

    set_main_database(db)
    main_db = get_main_database()
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────
# Singleton database instance
# ─────────────────────────────────────────────────────────────────

_main_database: Optional["MongoDB"] = None


class MongoDB:
    """MongoDB connection manager backed by Motor."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None

    async def connect(self, uri: str, database_name: str) -> None:
        """
        Connect to MongoDB and verify the server is reachable.

        Args:
            uri: MongoDB connection string
            database_name: Name of the database to use
        """
        # Mask the URI for logging (hide credentials)
        masked_uri = uri.split("@")[-1] if "@" in uri else uri
        logger.info(f"Connecting to MongoDB: {masked_uri}")

        try:
            self._client = AsyncIOMotorClient(uri)
            self._database_name = database_name
            await self._client.admin.command("ping")
            logger.info(f"Successfully connected to MongoDB database: {database_name}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            self._client = None
            self._database_name = None
            raise

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None

    @property
    def is_connected(self) -> bool:
        """Check if a client is open."""
        return self._client is not None

    @property
    def database_name(self) -> Optional[str]:
        return self._database_name

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get the underlying Motor database instance."""
        if not self._client or not self._database_name:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]

    def get_collection(self, name: str):
        """
        Get a raw Motor collection.

        Args:
            name: Collection name

        Returns:
            AsyncIOMotorCollection instance
        """
        logger.debug(f"Getting collection: {name}")
        return self.db[name]


def set_main_database(db: "MongoDB") -> None:
    """Set the main database singleton from an existing MongoDB instance."""
    global _main_database
    _main_database = db
    logger.info("Main database singleton set")


def get_main_database() -> "MongoDB":
    """
    Get the main application database singleton.

    Raises:
        RuntimeError: If database not initialized
    """
    if _main_database is None:
        raise RuntimeError("Main database not initialized. Call set_main_database() first.")
    return _main_database
