"""Tests for the ledger service client."""

from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from kakeibo.client import LedgerServiceClient
from kakeibo.exceptions import AuthenticationError, InputContractError, LedgerServiceError
from kakeibo.models.entry import NewEntry
from kakeibo.models.enums import EntryKind


def _response(status: int = 200, body=None, reason: str = "OK") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = status < 400
    resp.reason = reason
    if body is None:
        resp.json.side_effect = ValueError("no JSON")
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> LedgerServiceClient:
    return LedgerServiceClient(base_url="http://ledger.test/", timeout=5, session=session)


class TestLedgerServiceClient:
    def test_login_posts_credentials(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(body={"message": "ok"})
        client.login("alice", "alice_pass")
        session.request.assert_called_once_with(
            "POST",
            "http://ledger.test/api/login",
            timeout=5,
            json={"username": "alice", "password": "alice_pass"},
        )

    def test_list_entries(self, client: LedgerServiceClient, session: MagicMock, raw_listing):
        session.request.return_value = _response(body=raw_listing)
        entries = client.list_entries()
        assert [e.id for e in entries] == [1, 2, 3, 4, 5, 6]
        assert entries[0].owner_id == 7
        session.request.assert_called_once_with("GET", "http://ledger.test/api/transactions", timeout=5)

    def test_list_entries_rejects_non_array(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(body={"detail": "nope"})
        with pytest.raises(InputContractError):
            client.list_entries()

    def test_list_entries_rejects_non_json(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(body=None)
        with pytest.raises(LedgerServiceError, match="not JSON"):
            client.list_entries()

    def test_create_entry(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(
            body={"id": 42, "user_id": 1, "category": "給与", "amount": 3000, "date": "2025-06-01", "type": "income"}
        )
        new_entry = NewEntry(category="給与", amount=3000, date=date(2025, 6, 1), kind=EntryKind.INCOME)
        created = client.create_entry(new_entry)
        assert created is not None
        assert created.id == 42
        _, kwargs = session.request.call_args
        assert kwargs["json"]["type"] == "income"

    def test_create_entry_without_echo(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(body={"message": "created"})
        assert client.create_entry(NewEntry(category="食費", amount=100)) is None

    def test_delete_entry(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(body=None)
        client.delete_entry(5)
        session.request.assert_called_once_with("DELETE", "http://ledger.test/api/transactions/5", timeout=5)

    def test_unauthorized(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(401, body={"detail": "Not authenticated"}, reason="Unauthorized")
        with pytest.raises(AuthenticationError) as exc_info:
            client.list_entries()
        assert exc_info.value.status_code == 401
        assert "Not authenticated" in str(exc_info.value)

    def test_server_error_uses_reason(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(500, body=None, reason="Internal Server Error")
        with pytest.raises(LedgerServiceError, match="Internal Server Error"):
            client.delete_entry(1)

    def test_connection_error(self, client: LedgerServiceClient, session: MagicMock):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(LedgerServiceError, match="cannot reach"):
            client.list_entries()

    def test_logout(self, client: LedgerServiceClient, session: MagicMock):
        session.request.return_value = _response(body={"message": "bye"})
        client.logout()
        session.request.assert_called_once_with("POST", "http://ledger.test/api/logout", timeout=5, json={})
