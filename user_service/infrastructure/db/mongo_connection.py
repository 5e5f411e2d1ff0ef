# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create a MongoDB client for the configured URI

    The client connects lazily, so building it does not require a running server.

    Args:
        settings: Application settings

    Returns:
        Motor client (pooled and safe to share across requests)
    """
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance

    Returns:
        MongoDB database instance
    """
    return client[settings.mongo_database_name]


def get_user_collection(database: AsyncIOMotorDatabase, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return database[settings.mongo_users_collection]
