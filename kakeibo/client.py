"""HTTP client for the remote ledger service."""

import logging

import requests

from kakeibo.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from kakeibo.exceptions import AuthenticationError, LedgerServiceError
from kakeibo.ingestion.snapshot import load_entries
from kakeibo.models.entry import LedgerEntry, NewEntry

logger = logging.getLogger(__name__)


class LedgerServiceClient:
    """Thin wrapper over the service's REST endpoints.

    The login cookie lives in the underlying ``requests.Session`` and is sent
    with every later call.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def login(self, username: str, password: str) -> None:
        self._request("POST", "/api/login", json={"username": username, "password": password})
        logger.info("Logged in as %s", username)

    def logout(self) -> None:
        self._request("POST", "/api/logout", json={})

    def list_entries(self) -> list[LedgerEntry]:
        """Fetch the full current entry set."""
        resp = self._request("GET", "/api/transactions")
        try:
            body = resp.json()
        except ValueError as exc:
            raise LedgerServiceError("transaction listing is not JSON", resp.status_code) from exc
        return load_entries(body)

    def create_entry(self, entry: NewEntry) -> LedgerEntry | None:
        """Create an entry. Returns it when the service echoes the stored row."""
        resp = self._request("POST", "/api/transactions", json=entry.to_payload())
        try:
            body = resp.json()
        except ValueError:
            return None
        if isinstance(body, dict) and "id" in body:
            return load_entries([body])[0]
        return None

    def delete_entry(self, entry_id: int) -> None:
        self._request("DELETE", f"/api/transactions/{entry_id}")

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise LedgerServiceError(f"cannot reach {url}: {exc}") from exc

        if resp.status_code in (401, 403):
            raise AuthenticationError(self._detail(resp, "authentication required"), resp.status_code)
        if not resp.ok:
            logger.warning("%s %s returned %s", method, url, resp.status_code)
            raise LedgerServiceError(self._detail(resp, resp.reason or "request failed"), resp.status_code)
        return resp

    @staticmethod
    def _detail(resp: requests.Response, default: str) -> str:
        """The service's ``detail`` message, if the error body carries one."""
        try:
            body = resp.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return default
