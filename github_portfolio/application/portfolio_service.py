"""Portfolio service orchestrating the GitHub fetches for one user."""
import asyncio
import logging
import time
from typing import Dict, List, Sequence, Tuple

from github_portfolio.domain.errors import FetchError
from github_portfolio.domain.github_interface import IGitHubClient
from github_portfolio.domain.models import (
    LanguageFetchResult,
    Portfolio,
    RepositorySummary,
    SkillProfile,
    UserProfile,
)
from github_portfolio.domain.skills import build_skill_profile


logger = logging.getLogger(__name__)


class PortfolioService:
    """Application service for building a user's portfolio.

    Orchestrates the profile and repository requests, the per-repository
    language fan-out and the skill aggregation. Holds no state between
    submissions apart from the set of builds currently in flight.
    """

    def __init__(self, github_client: IGitHubClient):
        """Initialize portfolio service.

        Args:
            github_client: GitHub API client implementation
        """
        self._github_client = github_client
        self._in_flight: Dict[str, asyncio.Task] = {}

    async def fetch_primary(self, username: str) -> Tuple[UserProfile, List[RepositorySummary]]:
        """Fetch the profile and the repository list concurrently.

        Both requests are essential: the first failure propagates and no
        partial result is returned.

        Args:
            username: GitHub login

        Returns:
            Tuple of the user's profile and repositories

        Raises:
            FetchError: When either request fails
        """
        profile_task = asyncio.ensure_future(self._github_client.fetch_user_profile(username))
        repos_task = asyncio.ensure_future(self._github_client.fetch_repositories(username))

        try:
            profile, repositories = await asyncio.gather(profile_task, repos_task)
        except Exception as e:
            logger.error(f"Primary fetch for {username} failed: {e}")
            for task in (profile_task, repos_task):
                task.cancel()
            # Collect the sibling's outcome so its exception is not left unretrieved
            await asyncio.gather(profile_task, repos_task, return_exceptions=True)
            raise

        return profile, repositories

    async def _fetch_languages(self, username: str, repository: RepositorySummary) -> LanguageFetchResult:
        """Fetch one repository's languages, turning failures into a result."""
        try:
            languages = await self._github_client.fetch_repository_languages(
                username, repository.name
            )
        except FetchError as e:
            logger.warning(f"Error fetching languages for {repository.name}: {e}")
            return LanguageFetchResult.failure(repository.name, e)
        return LanguageFetchResult.success(repository.name, languages)

    async def collect_languages(
        self,
        username: str,
        repositories: Sequence[RepositorySummary]
    ) -> List[LanguageFetchResult]:
        """Fetch every repository's languages at once and wait for all of them.

        A failing repository yields a failed result instead of aborting the
        others.
        """
        results = await asyncio.gather(
            *(self._fetch_languages(username, repo) for repo in repositories)
        )

        failed = sum(1 for result in results if not result.ok)
        if failed:
            logger.info(f"Skipped {failed}/{len(results)} repositories without language data")
        return list(results)

    async def compute_skills(
        self,
        username: str,
        repositories: Sequence[RepositorySummary]
    ) -> SkillProfile:
        """Fan out over the repositories and rank the merged languages."""
        results = await self.collect_languages(username, repositories)
        return build_skill_profile(results)

    async def _build(self, username: str) -> Portfolio:
        start_time = time.time()
        logger.info(f"Building portfolio for {username}")

        profile, repositories = await self.fetch_primary(username)
        skills = await self.compute_skills(username, repositories)

        logger.info(
            f"Portfolio for {username} built in {time.time() - start_time:.2f} seconds: "
            f"{len(repositories)} repositories, {len(skills)} languages"
        )
        return Portfolio(
            username=username,
            profile=profile,
            repositories=tuple(repositories),
            skills=skills
        )

    async def build_portfolio(self, username: str) -> Portfolio:
        """Build the complete portfolio for ``username``.

        Concurrent calls for the same username share a single build.

        Raises:
            FetchError: When the profile or repository request fails
        """
        task = self._in_flight.get(username)
        if task is None:
            task = asyncio.ensure_future(self._build(username))
            self._in_flight[username] = task
            task.add_done_callback(lambda _: self._in_flight.pop(username, None))
        else:
            logger.info(f"Joining in-flight build for {username}")
        return await asyncio.shield(task)

    async def close(self) -> None:
        """Close connections."""
        await self._github_client.close()
