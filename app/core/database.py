from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from app.core.config import settings
import structlog

logger = structlog.get_logger()


async def connect_to_mongo() -> AsyncIOMotorClient:
    """Open the shared client and verify the server answers before serving requests."""
    logger.info(
        "Connecting to MongoDB",
        database=settings.mongo_database,
        collection=settings.product_collection,
    )
    client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.info("MongoDB connected")
    return client


def get_collection(client: AsyncIOMotorClient) -> AsyncIOMotorCollection:
    return client[settings.mongo_database][settings.product_collection]


async def close_mongo_connection(client: AsyncIOMotorClient) -> None:
    client.close()
    logger.info("MongoDB connection closed")


async def get_product_collection(request: Request) -> AsyncIOMotorCollection:
    """FastAPI dependency for getting the product collection"""
    return request.app.state.product_collection


async def ping(collection: AsyncIOMotorCollection) -> bool:
    try:
        await collection.database.client.admin.command("ping")
        return True
    except Exception as e:
        logger.error("MongoDB ping failed", error=str(e))
        return False
