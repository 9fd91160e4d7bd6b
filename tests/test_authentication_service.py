from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from types import SimpleNamespace

import jwt
import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from customer_manager_api.app.core.errors import NotFoundError, ValidationError
from customer_manager_api.app.repositories import MongoRepository
from customer_manager_api.app.schemas.auth import AuthenticateRequest
from customer_manager_api.app.schemas.user import User
from customer_manager_api.app.services import AuthenticationService, UserService

from .conftest import EXISTING_ID, USER_PASSWORD


@pytest.fixture
def service(user_repository, settings):
    return AuthenticationService(user_repository, settings)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_,message",
    [
        (None, "authentication request can't be null!"),
        (AuthenticateRequest(username="", password=USER_PASSWORD), "username can't be null!"),
        (AuthenticateRequest(username="maria", password=""), "password can't be null!"),
        (AuthenticateRequest(), "username can't be null!"),
    ],
)
async def test_invalid_request_returns_bad_request(service, user_repository, request_, message):
    result = await service.authenticate(request_)
    assert result.value is None
    assert result.status_code == HTTPStatus.BAD_REQUEST
    assert isinstance(result.error, ValidationError)
    assert result.error.message == message
    user_repository.find_by_filter.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_user_returns_not_found(service):
    result = await service.authenticate(AuthenticateRequest(username="nobody", password=USER_PASSWORD))
    assert result.value is None
    assert result.status_code == HTTPStatus.NOT_FOUND
    assert isinstance(result.error, NotFoundError)
    assert result.error.message == "invalid user or password!"


@pytest.mark.asyncio
async def test_wrong_password_returns_not_found(service):
    result = await service.authenticate(AuthenticateRequest(username="maria", password="wrong"))
    assert result.value is None
    assert result.status_code == HTTPStatus.NOT_FOUND
    assert result.error.message == "invalid user or password!"


@pytest.mark.asyncio
async def test_valid_credentials_return_token(service, settings):
    before = datetime.now(timezone.utc)
    result = await service.authenticate(AuthenticateRequest(username="maria", password=USER_PASSWORD))

    assert result.status_code == HTTPStatus.OK
    assert result.error is None
    assert result.value.user.id == EXISTING_ID
    assert result.value.user.username == "maria"
    assert "password" not in result.value.user.model_dump()

    token = result.value.token
    assert token.count(".") == 2
    claims = jwt.decode(token, settings.secret, algorithms=["HS256"])
    assert claims["id"] == EXISTING_ID
    expected_exp = before + timedelta(hours=12)
    assert abs(claims["exp"] - expected_exp.timestamp()) < 5


@pytest.mark.asyncio
async def test_token_is_signed_with_configured_secret(service):
    result = await service.authenticate(AuthenticateRequest(username="maria", password=USER_PASSWORD))
    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(result.value.token, "another-secret", algorithms=["HS256"])


@pytest.mark.asyncio
async def test_repository_failure_returns_internal_error(service, user_repository):
    user_repository.find_by_filter.side_effect = RuntimeError("server selection timeout")
    result = await service.authenticate(AuthenticateRequest(username="maria", password=USER_PASSWORD))
    assert result.value is None
    assert result.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert result.error.message == "could not authenticate: server selection timeout"


def test_generate_token_uses_given_issue_time(service, stored_user, settings):
    issued = datetime(2020, 1, 1, tzinfo=timezone.utc)
    token = service.generate_token(stored_user, now=issued)
    claims = jwt.decode(token, settings.secret, algorithms=["HS256"], options={"verify_exp": False, "verify_iat": False})
    assert claims["iat"] == int(issued.timestamp())
    assert claims["exp"] == int((issued + timedelta(hours=12)).timestamp())


class UniqueUsernameCollection:
    """In-memory users collection with a unique index on ``username``."""

    name = "users"

    def __init__(self):
        self.rows = []

    async def insert_one(self, data):
        if any(row["username"] == data["username"] for row in self.rows):
            raise DuplicateKeyError("E11000 duplicate key error collection: users index: username_1")
        row = dict(data, _id=ObjectId())
        self.rows.append(row)
        return SimpleNamespace(inserted_id=row["_id"])

    async def find_one(self, query):
        for row in self.rows:
            if all(row.get(key) == value for key, value in query.items()):
                return dict(row)
        return None


@pytest.mark.asyncio
async def test_duplicate_username_is_rejected_and_first_user_can_still_log_in(settings):
    repository = MongoRepository(UniqueUsernameCollection(), User)
    users = UserService(repository)

    first = await users.create(User(name="Maria", username="maria", password="first-pass"))
    second = await users.create(User(name="Maria Clone", username="maria", password="second-pass"))
    assert first.status_code == HTTPStatus.CREATED
    assert second.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    assert "duplicate key" in second.error.message

    service = AuthenticationService(repository, settings)
    result = await service.authenticate(AuthenticateRequest(username="maria", password="first-pass"))
    assert result.status_code == HTTPStatus.OK
    assert result.value.user.id == first.value.id

    result = await service.authenticate(AuthenticateRequest(username="maria", password="second-pass"))
    assert result.status_code == HTTPStatus.NOT_FOUND
