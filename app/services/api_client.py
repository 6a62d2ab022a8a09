"""
HTTP client for the wedding gallery API.

Every call goes through GalleryApiClient.request, which sends JSON, decodes
the JSON reply and turns any non-2xx response into an ApiError carrying the
server's message and field errors. Nothing is retried.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call, normalized from the {message, errors?} error body."""

    def __init__(self, status_code: int, message: str, errors: Optional[list] = None):
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        super().__init__(f"API Error: {status_code} {message}")


class GalleryApiClient:

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            base_url: API root, used only when no client is supplied
            timeout: Request timeout in seconds
            client: Preconfigured httpx.Client (e.g. a FastAPI TestClient)
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GalleryApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, method: str, path: str, json: Any = None) -> Any:
        response = self._client.request(method, path, json=json)

        if response.is_error:
            message, errors = self._parse_error(response)
            logger.warning(f"{method} {path} failed: {response.status_code} {message}")
            raise ApiError(response.status_code, message, errors)

        return response.json()

    @staticmethod
    def _parse_error(response: httpx.Response) -> tuple[str, Optional[list]]:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase, None

        if isinstance(body, dict):
            message = body.get("message") or body.get("detail") or response.reason_phrase
            return str(message), body.get("errors")
        return response.text, None

    # Auth

    def admin_login(self, username: str, password: str) -> dict:
        return self.request("POST", "/api/admin/login", {"username": username, "password": password})

    def customer_login(self, username: str, password: str) -> dict:
        return self.request("POST", "/api/customer/login", {"username": username, "password": password})

    # Admin

    def list_customers(self) -> list[dict]:
        return self.request("GET", "/api/admin/customers")

    def create_customer(self, username: str, email: str, password: str) -> dict:
        return self.request("POST", "/api/admin/customers", {
            "username": username,
            "email": email,
            "password": password,
        })

    def update_customer(self, customer_id: int, **updates) -> dict:
        return self.request("PUT", f"/api/admin/customers/{customer_id}", updates)

    def deactivate_customer(self, customer_id: int) -> dict:
        return self.request("DELETE", f"/api/admin/customers/{customer_id}")

    def platform_stats(self) -> dict:
        return self.request("GET", "/api/admin/stats")

    # Customer

    def get_settings(self, customer_id: int) -> dict:
        return self.request("GET", f"/api/customer/{customer_id}/settings")

    def update_settings(self, customer_id: int, **updates) -> dict:
        return self.request("PUT", f"/api/customer/{customer_id}/settings", updates)

    def update_stats(self, customer_id: int, **updates) -> dict:
        return self.request("POST", f"/api/customer/{customer_id}/stats", updates)

    def get_profile(self, customer_id: int) -> dict:
        return self.request("GET", f"/api/customer/{customer_id}/profile")

    # Galleries

    def list_galleries(self, customer_id: int) -> list[dict]:
        return self.request("GET", f"/api/customer/{customer_id}/galleries")

    def create_gallery(self, customer_id: int, **fields) -> dict:
        return self.request("POST", f"/api/customer/{customer_id}/galleries", fields)

    def get_public_gallery(self, slug: str) -> dict:
        return self.request("GET", f"/api/gallery/{slug}")

    def get_gallery(self, gallery_id: int) -> dict:
        return self.request("GET", f"/api/galleries/{gallery_id}")

    def update_gallery(self, gallery_id: int, **updates) -> dict:
        return self.request("PUT", f"/api/galleries/{gallery_id}", updates)

    def delete_gallery(self, gallery_id: int) -> dict:
        return self.request("DELETE", f"/api/galleries/{gallery_id}")
