from unittest.mock import AsyncMock, MagicMock

import pytest

from customer_manager_api.app.core import db


@pytest.mark.asyncio
async def test_ensure_indexes_makes_usernames_unique(settings):
    users = MagicMock()
    users.create_index = AsyncMock()
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = users

    await db.ensure_indexes(client, settings)

    client.__getitem__.assert_called_with(settings.mongo_db_name)
    client.__getitem__.return_value.__getitem__.assert_called_with(settings.users_collection)
    users.create_index.assert_awaited_once_with("username", unique=True)
