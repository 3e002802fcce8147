"""HTTP client for the identity manager API."""

import logging
from typing import Any

import httpx

from identity.core.config import get_settings
from identity.schemas.group import DescribeGroupsRequest
from identity.schemas.user import DescribeUsersRequest

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class IdentityClientError(Exception):
    """Error response returned by the identity manager API."""

    def __init__(self, status_code: int, code: str, message: str, details: Any = None):
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


def _list_params(request: DescribeUsersRequest | DescribeGroupsRequest) -> dict[str, Any]:
    params = request.model_dump(exclude_none=True, exclude_defaults=True)
    search_word = params.get("search_word")
    if isinstance(search_word, str):
        params["search_word"] = [search_word]
    return params


def _error_from_response(response: httpx.Response) -> dict[str, Any]:
    """Error object of an error response; non-JSON bodies become the message."""
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text or response.reason_phrase}
    if not isinstance(body, dict):
        return {}
    return body.get("error") or {}


class IdentityClient:
    """Thin wrapper over the users and groups endpoints.

    Args:
        base_url: Service URL (default: ``Settings.SERVICE_URL``).
        http: Pre-built ``httpx.Client`` to use instead of creating one.
    """

    def __init__(self, base_url: str | None = None, http: httpx.Client | None = None):
        settings = get_settings()
        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=base_url or settings.SERVICE_URL,
            timeout=settings.CLIENT_TIMEOUT,
        )

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "IdentityClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        response = self.http.request(method, f"{API_PREFIX}{path}", **kwargs)
        if response.is_error:
            error = _error_from_response(response)
            logger.warning(
                f"{method} {path} failed - status={response.status_code}, code={error.get('code')}"
            )
            raise IdentityClientError(
                response.status_code,
                error.get("code", "UNKNOWN_ERROR"),
                error.get("message", response.reason_phrase),
                error.get("details"),
            )
        return response.json()

    def describe_users(self, request: DescribeUsersRequest) -> tuple[list[dict], int]:
        body = self._request("GET", "/users", params=_list_params(request))
        return body["data"], body["meta"]["total_count"]

    def describe_groups(self, request: DescribeGroupsRequest) -> tuple[list[dict], int]:
        body = self._request("GET", "/groups", params=_list_params(request))
        return body["data"], body["meta"]["total_count"]

    def get_user(self, user_id: str) -> dict:
        return self._request("GET", f"/users/{user_id}")["data"]

    def create_user(self, username: str, email: str, password: str, **extra: Any) -> dict:
        payload = {"username": username, "email": email, "password": password, **extra}
        return self._request("POST", "/users", json=payload)["data"]

    def create_group(self, name: str, parent_group_id: str | None = None, **extra: Any) -> dict:
        payload = {"name": name, "parent_group_id": parent_group_id, **extra}
        return self._request("POST", "/groups", json=payload)["data"]

    def compare_password(self, user_id: str, password: str) -> bool:
        body = self._request(
            "POST", f"/users/{user_id}/password/compare", json={"password": password}
        )
        return body["data"]["ok"]

    def modify_password(self, user_id: str, password: str) -> str:
        body = self._request("PUT", f"/users/{user_id}/password", json={"password": password})
        return body["data"]["user_id"]

    def join_group(self, user_ids: list[str], group_ids: list[str]) -> dict:
        payload = {"user_id": user_ids, "group_id": group_ids}
        return self._request("POST", "/groups/join", json=payload)["data"]

    def leave_group(self, user_ids: list[str], group_ids: list[str]) -> dict:
        payload = {"user_id": user_ids, "group_id": group_ids}
        return self._request("POST", "/groups/leave", json=payload)["data"]

    def get_group_users(self, group_id: str) -> list[dict]:
        return self._request("GET", f"/groups/{group_id}/users")["data"]
