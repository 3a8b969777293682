"""
MongoDB Database Handler for the people facade
One explicitly constructed client per process, no module-level instance
"""

from typing import Optional

import motor.motor_asyncio
from pymongo.errors import ConnectionFailure, PyMongoError

from config import (
    MONGODB_URI, MONGODB_DB_NAME, PEOPLE_COLLECTION,
    MONGODB_POOL_SIZE, MONGODB_MIN_POOL_SIZE, MONGODB_MAX_IDLE_TIME,
    MONGODB_CONNECT_TIMEOUT, MONGODB_SERVER_SELECTION_TIMEOUT
)
from core.utils import get_logger
from database.people import PeopleRepository

logger = get_logger(__name__)


class MongoDB:
    """MongoDB Database Manager"""

    def __init__(self, uri: str = MONGODB_URI, db_name: str = MONGODB_DB_NAME,
                 collection_name: str = PEOPLE_COLLECTION):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.client = None
        self.db = None
        self._people: Optional[PeopleRepository] = None
        self.is_connected = False

    async def connect(self):
        """Establish connection to MongoDB"""
        try:
            # Create client with connection pool
            self.client = motor.motor_asyncio.AsyncIOMotorClient(
                self.uri,
                maxPoolSize=MONGODB_POOL_SIZE,
                minPoolSize=MONGODB_MIN_POOL_SIZE,
                maxIdleTimeMS=MONGODB_MAX_IDLE_TIME,
                connectTimeoutMS=MONGODB_CONNECT_TIMEOUT,
                serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT
            )

            # Test connection
            await self.client.admin.command('ping')

            # Get database
            self.db = self.client[self.db_name]
            self._people = PeopleRepository(self.db[self.collection_name])

            # Create indexes
            await self._people.ensure_indexes()

            self.is_connected = True
            logger.info(f"✅ Connected to MongoDB: {self.db_name}")

        except ConnectionFailure as e:
            logger.error(f"❌ MongoDB connection failed: {e}")
            await self.disconnect()
            raise
        except PyMongoError as e:
            logger.error(f"❌ MongoDB error: {e}")
            await self.disconnect()
            raise

    async def disconnect(self):
        """Close database connection"""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            self._people = None
            if self.is_connected:
                self.is_connected = False
                logger.info("🔌 Disconnected from MongoDB")

    async def __aenter__(self) -> 'MongoDB':
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    @property
    def people(self) -> PeopleRepository:
        """People facade bound to the connected database"""
        if self._people is None:
            raise RuntimeError("MongoDB is not connected; call connect() first")
        return self._people

    # ============== HEALTH CHECK ==============

    async def ping(self) -> bool:
        """Check database connection"""
        if not self.client:
            return False
        try:
            await self.client.admin.command('ping')
            return True
        except PyMongoError:
            return False
