"""
Document repositories.

``DocumentRepository`` is the storage contract the services depend on;
``MongoRepository`` implements it on top of a motor collection.  One
repository instance exists per document type.
"""

from .base import DocumentRepository, Filter
from .mongo import MongoRepository

__all__ = ["DocumentRepository", "Filter", "MongoRepository"]
