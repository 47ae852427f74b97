"""GitHub API interface (port) for fetching portfolio data.

This is the anti-corruption layer that shields the domain from GitHub API specifics.
"""
from abc import ABC, abstractmethod
from typing import List
from github_portfolio.domain.models import LanguageByteMap, RepositorySummary, UserProfile


class IGitHubClient(ABC):
    """Abstract interface for GitHub API operations."""

    @abstractmethod
    async def fetch_user_profile(self, username: str) -> UserProfile:
        """Fetch a user's public profile.

        Args:
            username: GitHub login

        Returns:
            UserProfile entity

        Raises:
            FetchError: NotFound, RateLimited, ApiError or NetworkFailure
        """
        pass

    @abstractmethod
    async def fetch_repositories(self, username: str) -> List[RepositorySummary]:
        """Fetch the user's repositories, most starred first, one page only.

        Args:
            username: GitHub login

        Returns:
            Repository summaries in the order GitHub returned them

        Raises:
            FetchError: NotFound, RateLimited, ApiError or NetworkFailure
        """
        pass

    @abstractmethod
    async def fetch_repository_languages(self, owner: str, repository: str) -> LanguageByteMap:
        """Fetch the byte count per language of one repository.

        Raises:
            FetchError: on any non-success status or transport failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
