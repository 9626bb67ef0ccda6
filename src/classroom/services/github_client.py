"""GitHub repository lookups used by starter-code validation."""

from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from src.classroom.core.config import get_settings
from src.classroom.core.logging import get_logger

logger = get_logger(__name__)

# Preview media type that exposes `is_template` on the repository payload
TEMPLATE_PREVIEW_MEDIA_TYPE = "application/vnd.github.baptiste-preview+json"


class RemoteError(Exception):
    """A GitHub lookup failed: timeout, transport error, auth failure or not found.

    Never means "empty" or "not a template"; callers must report it as its own
    outcome.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RepositoryClient(Protocol):
    """Contract for starter-code repository lookups.

    Implementations raise RemoteError for any failure to obtain an answer.
    """

    async def fetch_repository_emptiness(self, repo_id: int) -> bool: ...

    async def fetch_repository_is_template(self, repo_id: int) -> bool: ...


@dataclass(frozen=True, slots=True)
class RepositoryMetadata:
    """The subset of GitHub's repository payload validation relies on."""

    id: int
    full_name: str
    is_empty: bool
    is_template: bool

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "RepositoryMetadata":
        """Read the payload; a missing or non-integer `size` raises.

        Raises:
            KeyError: If `id` or `size` is absent.
            TypeError: If `size` is not an integer.
        """
        size = payload["size"]
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError(f"Repository size must be an integer, got {size!r}")
        return cls(
            id=int(payload["id"]),
            full_name=str(payload.get("full_name", "")),
            is_empty=size == 0,
            is_template=bool(payload.get("is_template", False)),
        )


class GitHubClient:
    """RepositoryClient backed by the GitHub REST API.

    One instance serves one validation run for one user's token.
    """

    def __init__(
        self,
        token: str | None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.github_request_timeout_seconds
        self._token = token
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": TEMPLATE_PREVIEW_MEDIA_TYPE,
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def fetch_repository_metadata(self, repo_id: int) -> RepositoryMetadata:
        """GET /repositories/{id}.

        Raises:
            RemoteError: On timeout, transport failure, non-2xx status or a
                payload that cannot be read.
        """
        url = f"{self.base_url}/repositories/{repo_id}"
        try:
            async with httpx.AsyncClient(
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.warning("GitHub request timed out", repo_id=repo_id, timeout=self.timeout)
            raise RemoteError(f"Timed out fetching repository {repo_id}") from e
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed", repo_id=repo_id, error=str(e))
            raise RemoteError(f"Could not reach GitHub for repository {repo_id}") from e

        if response.status_code in (401, 403):
            raise RemoteError(
                f"Not authorized to read repository {repo_id}", status_code=response.status_code
            )
        if response.status_code == 404:
            raise RemoteError(f"Repository {repo_id} not found", status_code=404)
        if response.is_error:
            raise RemoteError(
                f"GitHub returned {response.status_code} for repository {repo_id}",
                status_code=response.status_code,
            )

        try:
            return RepositoryMetadata.from_payload(response.json())
        except (ValueError, KeyError, TypeError) as e:
            raise RemoteError(f"Unreadable repository payload for {repo_id}") from e

    async def fetch_repository_emptiness(self, repo_id: int) -> bool:
        metadata = await self.fetch_repository_metadata(repo_id)
        return metadata.is_empty

    async def fetch_repository_is_template(self, repo_id: int) -> bool:
        metadata = await self.fetch_repository_metadata(repo_id)
        return metadata.is_template
