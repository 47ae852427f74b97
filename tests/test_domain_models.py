"""Tests for domain models."""
import dataclasses

import pytest

from github_portfolio.domain.errors import ApiError, NotFound, RateLimited, error_for_status
from github_portfolio.domain.models import (
    LanguageFetchResult,
    Portfolio,
    RepositorySummary,
    SkillProfile,
    UserProfile,
)


def test_user_profile_creation():
    """Test creating an immutable UserProfile entity."""
    profile = UserProfile(login="octocat", name="The Octocat", public_repos=8, followers=9000)

    assert profile.login == "octocat"
    assert profile.display_name == "The Octocat"
    assert profile.public_repos == 8
    assert profile.bio is None

    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.name = "Someone else"


def test_display_name_falls_back_to_login():
    """Test that a profile without a name displays its login."""
    assert UserProfile(login="octocat").display_name == "octocat"


def test_language_fetch_result_tags():
    """Test success and failure results."""
    ok = LanguageFetchResult.success("hello-world", {"C": 10})
    failed = LanguageFetchResult.failure("broken", ApiError(500))

    assert ok.ok
    assert ok.languages == {"C": 10}
    assert not failed.ok
    assert failed.error.status == 500
    assert failed.languages is None


def test_portfolio_stars_and_top_repositories():
    """Test derived statistics without reordering the source sequence."""
    repos = (
        RepositorySummary(name="small", stargazers_count=1),
        RepositorySummary(name="big", stargazers_count=50),
        RepositorySummary(name="medium", stargazers_count=7),
    )
    portfolio = Portfolio(
        username="octocat",
        profile=UserProfile(login="octocat"),
        repositories=repos,
        skills=SkillProfile()
    )

    assert portfolio.total_stars == 58
    assert [repo.name for repo in portfolio.top_repositories(2)] == ["big", "medium"]
    assert [repo.name for repo in portfolio.repositories] == ["small", "big", "medium"]


def test_error_for_status():
    """Test the status code contract."""
    assert isinstance(error_for_status(404), NotFound)
    assert isinstance(error_for_status(403), RateLimited)
    assert isinstance(error_for_status(500), ApiError)
    assert error_for_status(502).message == "GitHub API error: 502"
    assert error_for_status(404, "Repositories not found.").message == "Repositories not found."
    assert error_for_status(200) is None
    assert error_for_status(204) is None


def test_top_repositories_with_non_positive_limit():
    """Test that a zero or negative limit lists nothing."""
    portfolio = Portfolio(
        username="octocat",
        profile=UserProfile(login="octocat"),
        repositories=(RepositorySummary(name="a", stargazers_count=1),),
        skills=SkillProfile()
    )

    assert portfolio.top_repositories(0) == []
    assert portfolio.top_repositories(-1) == []
