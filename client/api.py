import logging
from typing import Any, Dict, List, Optional

import httpx

log = logging.getLogger(__name__)

CONTACTS_PATH = "/api/contacts"


class ContactsApiError(Exception):
    """Non-2xx answer from the Contacts API."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ContactsClient:
    """
    Thin wrapper over the Contacts HTTP API.

    Args:
        base_url: Server root, e.g. "http://localhost:3000"
        http: Optional preconfigured httpx.Client (its base_url is used as-is)
    """

    def __init__(self, base_url: str = "http://localhost:3000", http: Optional[httpx.Client] = None, timeout: float = 10.0):
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        response = self._http.request(method, path, **kwargs)
        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            log.debug("%s %s -> %d %s", method, path, response.status_code, detail)
            raise ContactsApiError(response.status_code, str(detail))
        return response

    def list(self, q: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {}
        if q and q.strip():
            params["q"] = q.strip()
        return self._request("GET", CONTACTS_PATH, params=params).json()

    def get(self, contact_id: str) -> Dict[str, Any]:
        return self._request("GET", f"{CONTACTS_PATH}/{contact_id}").json()

    def create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", CONTACTS_PATH, json=body).json()

    def update(self, contact_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"{CONTACTS_PATH}/{contact_id}", json=body).json()

    def remove(self, contact_id: str) -> None:
        self._request("DELETE", f"{CONTACTS_PATH}/{contact_id}")

    def health(self) -> bool:
        try:
            self._request("GET", "/health")
        except ContactsApiError:
            return False
        return True
