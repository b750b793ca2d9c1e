"""HTTP client for the comment board API."""

from typing import Any

import httpx
import logfire

from board.application.usecase.auth import GetCurrentUserResponse
from board.application.usecase.comment import (
    CommentNodeResponse,
    DeleteCommentResponse,
    GetCommentsResponse,
)


class BoardClientError(Exception):
    """Board API request failed."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Board API error {status_code}: {detail}")


class BoardClient:
    """Async client for reading and mutating the board.

    The token, when given, is sent as the auth_token cookie the API reads.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize board client.

        Args:
            base_url: API base URL, e.g. http://localhost:8000
            token: JWT for the acting user, or None for read-only use
            transport: Optional httpx transport (tests pass an ASGI transport)
            timeout: Request timeout in seconds
        """
        cookies = {"auth_token": token} if token else None
        self._client = httpx.AsyncClient(
            base_url=base_url,
            cookies=cookies,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "BoardClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_forest(self) -> GetCommentsResponse:
        """Fetch the whole board as a reply forest."""
        data = await self._request("GET", "/comments")
        return GetCommentsResponse.model_validate(data)

    async def create_comment(
        self, content: str, parent_id: str | None = None
    ) -> CommentNodeResponse:
        """Post a comment, or a reply when parent_id is given.

        Raises:
            BoardClientError: If the API rejects the request
        """
        data = await self._request(
            "POST", "/comments", json={"content": content, "parent_id": parent_id}
        )
        return CommentNodeResponse.model_validate(data)

    async def delete_comment(self, comment_id: str) -> DeleteCommentResponse:
        """Delete a comment and its replies.

        Raises:
            BoardClientError: If the API rejects the request
        """
        data = await self._request("DELETE", f"/comments/{comment_id}")
        return DeleteCommentResponse.model_validate(data)

    async def current_user(self) -> GetCurrentUserResponse | None:
        """Return the acting user, or None when the token is missing or invalid."""
        data = await self._request("GET", "/auth/me")
        if not data.get("authenticated"):
            return None
        return GetCurrentUserResponse.model_validate(data["user"])

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("Board API HTTP error", method=method, url=url, error=str(e))
            raise BoardClientError(0, str(e)) from e

        if response.is_error:
            detail = _error_detail(response)
            logfire.warn(
                "Board API request rejected",
                method=method,
                url=url,
                status_code=response.status_code,
                detail=detail,
            )
            raise BoardClientError(response.status_code, detail)

        return response.json()


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return response.text
