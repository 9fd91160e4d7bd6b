"""
MongoDB implementation of the document repository.

Documents are stored without their ``id`` field; MongoDB's ``_id``
ObjectId takes its place and is exposed back as a hex string.  Any
``PyMongoError`` is re-raised as ``RepositoryError`` so the services
only deal with one store exception.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Type

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from ..core.errors import RepositoryError
from .base import DocumentRepository, Filter, TDocument

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str, collection: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB %s on %s failed: %s", operation, collection, e)
        raise RepositoryError(f"{operation} failed: {e}") from e


def _object_id(id: Optional[str]) -> Optional[ObjectId]:
    """Return the ObjectId for ``id`` or ``None`` if it is not a valid one."""
    if id is None or not ObjectId.is_valid(id):
        return None
    return ObjectId(id)


class MongoRepository(DocumentRepository[TDocument]):
    """Repository backed by a single motor collection.

    Args:
        collection: The collection holding the documents.
        model_cls: Pydantic model used to load stored documents.
    """

    def __init__(self, collection: AsyncIOMotorCollection, model_cls: Type[TDocument]) -> None:
        self.collection = collection
        self.model_cls = model_cls

    @property
    def _name(self) -> str:
        return getattr(self.collection, "name", self.model_cls.__name__)

    def _load(self, raw: Dict[str, Any]) -> TDocument:
        data = dict(raw)
        oid = data.pop("_id", None)
        data["id"] = str(oid) if oid is not None else None
        return self.model_cls.model_validate(data)

    @staticmethod
    def _dump(document: TDocument) -> Dict[str, Any]:
        return document.model_dump(exclude={"id"})

    @staticmethod
    def _query(filter: Filter) -> Dict[str, Any]:
        query = dict(filter)
        if "id" in query:
            query["_id"] = _object_id(query.pop("id"))
        return query

    async def find_all(self) -> List[TDocument]:
        with _store_errors("find", self._name):
            rows = await self.collection.find({}).to_list(length=None)
        return [self._load(row) for row in rows]

    async def find_by_id(self, id: str) -> Optional[TDocument]:
        oid = _object_id(id)
        if oid is None:
            return None
        with _store_errors("find_one", self._name):
            row = await self.collection.find_one({"_id": oid})
        return self._load(row) if row else None

    async def find_by_filter(self, filter: Filter) -> Optional[TDocument]:
        with _store_errors("find_one", self._name):
            row = await self.collection.find_one(self._query(filter))
        return self._load(row) if row else None

    async def create(self, document: TDocument) -> TDocument:
        data = self._dump(document)
        with _store_errors("insert_one", self._name):
            inserted = await self.collection.insert_one(data)
        return document.model_copy(update={"id": str(inserted.inserted_id)})

    async def replace(self, id: str, document: TDocument) -> TDocument:
        oid = _object_id(id)
        if oid is None:
            raise RepositoryError(f"invalid document id {id!r}")
        with _store_errors("replace_one", self._name):
            await self.collection.replace_one({"_id": oid}, self._dump(document))
        return document.model_copy(update={"id": id})

    async def remove(self, id: str) -> None:
        oid = _object_id(id)
        if oid is None:
            logger.debug("Ignoring remove of invalid id %r on %s", id, self._name)
            return
        with _store_errors("delete_one", self._name):
            await self.collection.delete_one({"_id": oid})
