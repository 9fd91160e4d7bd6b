from unittest.mock import AsyncMock

import pytest

from customer_manager_api.app.core.config import Settings
from customer_manager_api.app.core.errors import RepositoryError
from customer_manager_api.app.core.security import hash_password
from customer_manager_api.app.repositories.base import DocumentRepository
from customer_manager_api.app.schemas.customer import Customer
from customer_manager_api.app.schemas.user import User

# Ids with fixed repository behaviour, used across the service tests:
# "123" makes lookups fail, "456" is missing (and fails on remove), "789" exists.
FAILING_ID = "123"
MISSING_ID = "456"
EXISTING_ID = "789"

USER_PASSWORD = "s3cret!"


@pytest.fixture
def settings():
    return Settings(secret="test-secret", token_expire_hours=12)


@pytest.fixture
def customer_success():
    return Customer(id=EXISTING_ID, name="Maria Souza", email="maria@example.com")


@pytest.fixture
def customer_failed():
    return Customer(name="Broken Record")


def _scripted_repository(existing, failing_name):
    """Build a repository mock that behaves according to the ids above.

    Writes of a document whose ``name`` is ``failing_name`` raise.
    """
    repository = AsyncMock(spec=DocumentRepository)

    async def create(document):
        if document.name == failing_name:
            raise RepositoryError("insert_one failed: connection reset")
        return document.model_copy(update={"id": EXISTING_ID})

    async def find_by_id(id):
        if id == FAILING_ID:
            raise RepositoryError("find_one failed: timeout")
        if id == EXISTING_ID:
            return existing
        return None

    async def replace(id, document):
        if document.name == failing_name:
            raise RepositoryError("replace_one failed: timeout")
        return document.model_copy(update={"id": id})

    async def remove(id):
        if id == MISSING_ID:
            raise RepositoryError("delete_one failed: timeout")

    repository.create.side_effect = create
    repository.find_by_id.side_effect = find_by_id
    repository.replace.side_effect = replace
    repository.remove.side_effect = remove
    repository.find_all.return_value = [existing]
    repository.find_by_filter.return_value = None
    return repository


@pytest.fixture
def customer_repository(customer_success, customer_failed):
    return _scripted_repository(customer_success, customer_failed.name)


@pytest.fixture
def stored_user():
    return User(id=EXISTING_ID, name="Maria", username="maria", password=hash_password(USER_PASSWORD))


@pytest.fixture
def user_repository(stored_user):
    repository = _scripted_repository(stored_user, "Broken Record")

    async def find_by_filter(filter):
        if filter.get("username") == stored_user.username:
            return stored_user
        return None

    repository.find_by_filter.side_effect = find_by_filter
    return repository
