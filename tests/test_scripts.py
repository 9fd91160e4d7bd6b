import sys
from unittest.mock import MagicMock

import pytest

import create_token
import reset_password
from customer_manager_api.app.core.security import decode_access_token, verify_password


@pytest.fixture
def mongo_users(monkeypatch):
    client = MagicMock()
    users = client.__getitem__.return_value.__getitem__.return_value
    users.update_one.return_value = MagicMock(matched_count=1)
    monkeypatch.setattr(reset_password, "MongoClient", lambda uri: client)
    return users


def test_reset_password_stores_new_hash(monkeypatch, mongo_users, capsys):
    monkeypatch.setattr(sys, "argv", ["reset_password.py", "--username", "maria", "--password", "n3w"])
    reset_password.main()

    query, update = mongo_users.update_one.call_args.args
    assert query == {"username": "maria"}
    assert verify_password("n3w", update["$set"]["password"])
    assert "Password updated for user: maria" in capsys.readouterr().out


def test_reset_password_unknown_user(monkeypatch, mongo_users):
    mongo_users.update_one.return_value = MagicMock(matched_count=0)
    monkeypatch.setattr(sys, "argv", ["reset_password.py", "--username", "ghost", "--password", "n3w"])
    with pytest.raises(SystemExit) as exc_info:
        reset_password.main()
    assert exc_info.value.code == 2


def test_create_token_prints_signed_token(monkeypatch, capsys):
    monkeypatch.setenv("SECRET", "script-secret")
    create_token.main(["65f1c0d2a8b4e3f1c2d3e4f5", "1"])
    token = capsys.readouterr().out.strip()
    claims = decode_access_token(token, "script-secret")
    assert claims["id"] == "65f1c0d2a8b4e3f1c2d3e4f5"
    assert claims["exp"] - claims["iat"] == 3600
