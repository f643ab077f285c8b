from typing import Any, Dict, Generic, TypeVar, Type, Optional, List
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel
from pymongo import ReturnDocument
import structlog

logger = structlog.get_logger()

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseDAO(Generic[ModelType]):
    """Document CRUD over a single collection.

    ``model`` must provide ``from_document`` to build an instance from a raw
    document. Ids are the hex form of ``ObjectId``; a malformed id raises
    ``bson.errors.InvalidId`` before the store is contacted.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def create(self, collection: AsyncIOMotorCollection, *, obj_in: Dict[str, Any]) -> ModelType:
        try:
            document = dict(obj_in)
            result = await collection.insert_one(document)
            document["_id"] = result.inserted_id
            logger.info(f"Created {self.model.__name__}", id=str(result.inserted_id))
            return self.model.from_document(document)
        except Exception as e:
            logger.error(f"Error creating {self.model.__name__}", error=str(e))
            raise

    async def get_by_id(self, collection: AsyncIOMotorCollection, id: str) -> Optional[ModelType]:
        try:
            document = await collection.find_one({"_id": ObjectId(id)})
            return self.model.from_document(document) if document else None
        except Exception as e:
            logger.error(f"Error getting {self.model.__name__} by id", id=id, error=str(e))
            raise

    async def get_multi(self, collection: AsyncIOMotorCollection) -> List[ModelType]:
        try:
            documents = await collection.find().to_list(length=None)
            return [self.model.from_document(document) for document in documents]
        except Exception as e:
            logger.error(f"Error getting multiple {self.model.__name__}", error=str(e))
            raise

    async def update(
        self, collection: AsyncIOMotorCollection, *, id: str, obj_in: Dict[str, Any]
    ) -> Optional[ModelType]:
        try:
            document = await collection.find_one_and_replace(
                {"_id": ObjectId(id)},
                dict(obj_in),
                return_document=ReturnDocument.AFTER,
            )
            if document:
                logger.info(f"Updated {self.model.__name__}", id=id)
                return self.model.from_document(document)
            return None
        except Exception as e:
            logger.error(f"Error updating {self.model.__name__}", id=id, error=str(e))
            raise

    async def delete(self, collection: AsyncIOMotorCollection, *, id: str) -> Optional[ModelType]:
        try:
            document = await collection.find_one_and_delete({"_id": ObjectId(id)})
            if document:
                logger.info(f"Deleted {self.model.__name__}", id=id)
                return self.model.from_document(document)
            return None
        except Exception as e:
            logger.error(f"Error deleting {self.model.__name__}", id=id, error=str(e))
            raise
