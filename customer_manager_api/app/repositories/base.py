"""Abstract repository contract over a document type."""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from ..schemas.base import Document

TDocument = TypeVar("TDocument", bound=Document)

# Field-equality predicate: every key must equal its value in a matching
# document, e.g. ``{"username": "maria"}``.
Filter = Mapping[str, Any]


class DocumentRepository(ABC, Generic[TDocument]):
    """Asynchronous CRUD operations over one kind of document.

    Every operation may raise
    :class:`~customer_manager_api.app.core.errors.RepositoryError` when
    the store fails.  Lookups report a miss by returning ``None``.
    """

    @abstractmethod
    async def find_all(self) -> List[TDocument]:
        ...

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[TDocument]:
        ...

    @abstractmethod
    async def find_by_filter(self, filter: Filter) -> Optional[TDocument]:
        """Return the first document matching ``filter`` or ``None``."""

    @abstractmethod
    async def create(self, document: TDocument) -> TDocument:
        """Persist ``document`` and return the stored copy with its id."""

    @abstractmethod
    async def replace(self, id: str, document: TDocument) -> TDocument:
        """Replace the document stored under ``id`` and return the new copy."""

    @abstractmethod
    async def remove(self, id: str) -> None:
        ...
