"""
Generic CRUD service over a document repository.

``EntityService`` implements create/get/get_all/update/delete once for
every document type.  Subclasses set ``entity_name`` and
``entity_plural``, which appear in the error messages, and may override
``_prepare`` to transform an entity before it is written.

Checks run in a fixed order: id, entity, existence, persistence.  A
failed input check returns immediately without touching the repository.

Error messages are matched on by existing clients and keep their
historical wording, including the update failure prefix
"could not be update the <entity>: ...".
"""

import logging
from typing import Generic, List, Optional

from ..core.errors import NotFoundError, PersistenceError, ValidationError
from ..core.result import Result
from ..repositories.base import DocumentRepository, TDocument

logger = logging.getLogger(__name__)

ID_REQUIRED = "id cannot be null or empty!"


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class EntityService(Generic[TDocument]):
    """CRUD operations returning ``Result`` values."""

    entity_name = "entity"
    entity_plural = "entities"

    def __init__(self, repository: DocumentRepository[TDocument]) -> None:
        self._repository = repository

    def _prepare(self, entity: TDocument) -> TDocument:
        """Hook applied to an entity right before it is persisted."""
        return entity

    def _null_entity(self) -> ValidationError:
        return ValidationError(f"{self.entity_name} cannot be null!")

    async def create(self, entity: Optional[TDocument]) -> Result[TDocument]:
        if entity is None:
            return Result.bad_request(self._null_entity())

        try:
            created = await self._repository.create(self._prepare(entity))
        except Exception as e:
            logger.exception("Creating %s failed", self.entity_name)
            error = PersistenceError.wrap(f"could not create the {self.entity_name} on database", e)
            return Result.internal_error(error, value=entity)

        logger.info("Created %s %s", self.entity_name, created.id)
        return Result.created(created)

    async def get(self, id: Optional[str]) -> Result[TDocument]:
        if is_blank(id):
            return Result.bad_request(ValidationError("parameter Id cannot be null or empty!"))

        try:
            entity = await self._repository.find_by_id(id)
        except Exception as e:
            logger.exception("Fetching %s %s failed", self.entity_name, id)
            return Result.internal_error(
                PersistenceError.wrap(f"could not get the {self.entity_name} from database", e)
            )

        if entity is None:
            return Result.not_found(NotFoundError(f"{self.entity_name} not found!"))
        return Result.ok(entity)

    async def get_all(self) -> Result[List[TDocument]]:
        try:
            entities = await self._repository.find_all()
        except Exception as e:
            logger.exception("Listing %s failed", self.entity_plural)
            return Result.internal_error(
                PersistenceError.wrap(f"could not list the {self.entity_plural} from database", e)
            )

        if not entities:
            return Result.no_content([], NotFoundError(f"there are no {self.entity_plural}!"))
        return Result.ok(list(entities))

    async def update(self, id: Optional[str], entity: Optional[TDocument]) -> Result[TDocument]:
        if is_blank(id):
            return Result.bad_request(ValidationError(ID_REQUIRED), value=entity)
        if entity is None:
            return Result.bad_request(self._null_entity())

        try:
            existing = await self._repository.find_by_id(id)
            if existing is None:
                return Result.not_found(
                    NotFoundError(f"{self.entity_name} to be updated was not found!"), value=entity
                )
            await self._repository.replace(id, self._prepare(entity))
        except Exception as e:
            logger.exception("Updating %s %s failed", self.entity_name, id)
            error = PersistenceError.wrap(f"could not be update the {self.entity_name}", e)
            return Result.internal_error(error, value=entity)

        logger.info("Updated %s %s", self.entity_name, id)
        return Result.no_content(entity)

    async def delete(self, id: Optional[str]) -> Result[bool]:
        if is_blank(id):
            return Result.bad_request(ValidationError(ID_REQUIRED), value=False)

        try:
            await self._repository.remove(id)
        except Exception as e:
            logger.exception("Deleting %s %s failed", self.entity_name, id)
            error = PersistenceError.wrap(f"could not delete the {self.entity_name} on database", e)
            return Result.internal_error(error, value=False)

        logger.info("Deleted %s %s", self.entity_name, id)
        return Result.no_content(True)
