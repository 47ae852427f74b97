"""GitHub REST API client implementation for public, unauthenticated reads."""
import asyncio
import logging
from typing import Any, List, Optional

import aiohttp

from github_portfolio.domain.errors import InvalidResponse, NetworkFailure, error_for_status
from github_portfolio.domain.github_interface import IGitHubClient
from github_portfolio.domain.models import LanguageByteMap, RepositorySummary, UserProfile


logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
REPOS_PER_PAGE = 100  # GitHub max is 100, no further pages are requested


class GitHubRestClient(IGitHubClient):
    """GitHub REST API client.

    Implements the IGitHubClient port, providing an anti-corruption layer
    between the domain and GitHub's JSON payloads. Every status is mapped to
    the domain error taxonomy; nothing is retried or cached.
    """

    HEADERS = {
        "Accept": "application/vnd.github+json",
        "User-Agent": "github-portfolio-card",
    }

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """Initialize GitHub client.

        Args:
            base_url: Root of the REST API
            timeout_seconds: Total time allowed for each request
            session: Pre-built session; the client closes only sessions it created
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session = session
        self._owns_session = session is None

    async def _init_session(self) -> aiohttp.ClientSession:
        """Initialize the HTTP session (lazy initialization)."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def _get_json(self, path: str, not_found_message: Optional[str] = None) -> Any:
        """Issue a GET request and decode the JSON body.

        Args:
            path: Path below the base URL, including any query string
            not_found_message: Message carried by NotFound on a 404

        Returns:
            Decoded JSON payload, or None for an empty response

        Raises:
            NotFound, RateLimited, ApiError: For non-success statuses
            InvalidResponse: When a successful body is not valid JSON
            NetworkFailure: When no response was received
        """
        session = await self._init_session()
        url = f"{self._base_url}{path}"
        logger.debug(f"GET {url}")

        try:
            async with session.get(url, headers=self.HEADERS, timeout=self._timeout) as response:
                error = error_for_status(response.status, not_found_message)
                if error is not None:
                    raise error
                if response.status == 204:
                    return None
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise InvalidResponse(f"{url} returned malformed JSON ({e})")
        except asyncio.TimeoutError:
            raise NetworkFailure(f"request to {url} timed out")
        except aiohttp.ClientError as e:
            raise NetworkFailure(str(e) or e.__class__.__name__)

    async def fetch_user_profile(self, username: str) -> UserProfile:
        """Fetch a user's public profile."""
        data = await self._get_json(f"/users/{username}")
        if not isinstance(data, dict):
            raise InvalidResponse(f"profile of {username} is not an object")

        return UserProfile(
            login=data.get("login") or username,
            name=data.get("name"),
            avatar_url=data.get("avatar_url"),
            bio=data.get("bio"),
            location=data.get("location"),
            company=data.get("company"),
            public_repos=data.get("public_repos") or 0,
            followers=data.get("followers") or 0,
            html_url=data.get("html_url"),
            blog=data.get("blog"),
            twitter_username=data.get("twitter_username"),
            email=data.get("email")
        )

    async def fetch_repositories(self, username: str) -> List[RepositorySummary]:
        """Fetch a single page of repositories sorted by stars."""
        data = await self._get_json(
            f"/users/{username}/repos?sort=stars&per_page={REPOS_PER_PAGE}",
            not_found_message="Repositories not found."
        )
        if not isinstance(data, list) or not all(isinstance(node, dict) for node in data):
            raise InvalidResponse(f"repository list of {username} is not a list of objects")

        repositories = [
            RepositorySummary(
                name=node.get("name"),
                html_url=node.get("html_url"),
                description=node.get("description"),
                language=node.get("language"),
                stargazers_count=node.get("stargazers_count") or 0,
                forks_count=node.get("forks_count") or 0
            )
            for node in data
            if node.get("name")
        ]
        logger.info(f"Fetched {len(repositories)} repositories for {username}")
        return repositories

    async def fetch_repository_languages(self, owner: str, repository: str) -> LanguageByteMap:
        """Fetch the language byte counts of one repository."""
        data = await self._get_json(f"/repos/{owner}/{repository}/languages")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidResponse(f"languages of {owner}/{repository} are not an object")
        try:
            return {language: int(size) for language, size in data.items()}
        except (TypeError, ValueError):
            raise InvalidResponse(f"languages of {owner}/{repository} have non-numeric sizes")

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None
