"""HTTP client for the user-management API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from config import API_BASE_URL, API_TIMEOUT_SECONDS


class APIClient:
    def __init__(self, base_url: str = API_BASE_URL, timeout: int = API_TIMEOUT_SECONDS) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # -------------------- Users --------------------
    def list_users(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/users") or []

    def get_user(self, user_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/api/users/{user_id}")

    def create_user(self, name: str, email: str) -> Dict[str, Any]:
        return self._request("POST", "/api/users", json={"name": name, "email": email})

    def update_user(self, user_id: str, name: str, email: str) -> None:
        self._request("PUT", f"/api/users/{user_id}", json={"name": name, "email": email})

    def delete_user(self, user_id: str) -> None:
        self._request("DELETE", f"/api/users/{user_id}")

    # -------------------- Internal helpers --------------------
    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "Accept": "application/json"}

    def _request(self, method: str, path: str, json: Dict[str, Any] | None = None) -> Optional[Any]:
        res = requests.request(
            method,
            f"{self.base_url}{path}",
            json=json,
            headers=self._headers(),
            timeout=self.timeout,
        )
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"{method} {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else None


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or API_BASE_URL)
