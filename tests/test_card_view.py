"""Tests for the console card view."""
import json

from github_portfolio.domain.models import LanguageFetchResult, Portfolio, RepositorySummary, UserProfile
from github_portfolio.domain.skills import build_skill_profile
from github_portfolio.presentation.card_view import (
    contact_links,
    portfolio_to_dict,
    render_portfolio,
)


def _portfolio(**profile_fields):
    profile = UserProfile(login="octocat", **profile_fields)
    repos = tuple(
        RepositorySummary(name=f"repo{i}", stargazers_count=i, forks_count=1)
        for i in range(8)
    )
    skills = build_skill_profile([
        LanguageFetchResult.success("repo0", {"Go": 1000, "TypeScript": 200}),
    ])
    return Portfolio(username="octocat", profile=profile, repositories=repos, skills=skills)


def test_contact_links():
    """Test link construction for every optional contact field."""
    profile = UserProfile(
        login="octocat",
        html_url="https://github.com/octocat",
        blog="github.blog",
        twitter_username="github",
        email="octocat@github.com"
    )

    assert contact_links(profile) == [
        ("GitHub", "https://github.com/octocat"),
        ("Website", "https://github.blog"),
        ("Twitter", "https://twitter.com/github"),
        ("Email", "mailto:octocat@github.com"),
    ]


def test_contact_links_keeps_scheme_and_skips_missing():
    """Test that an http blog is kept and empty fields are omitted."""
    profile = UserProfile(login="octocat", blog="http://example.com", twitter_username="")

    assert contact_links(profile) == [("Website", "http://example.com")]


def test_render_portfolio():
    """Test the card text."""
    card = render_portfolio(_portfolio(name="The Octocat", location="SF"), top_n=3)

    assert card.startswith("=" * 60)
    assert "The Octocat (@octocat)" in card
    assert "No bio available" in card
    assert "Location: SF" in card
    assert "Company:" not in card
    assert "Total stars: 28" in card
    assert "83.3%" in card and "16.7%" in card
    assert "repo7" in card and "repo5" in card
    assert "repo4" not in card
    assert "Not specified" in card
    assert "Contact" not in card


def test_render_portfolio_without_skills():
    """Test the empty skills message."""
    portfolio = _portfolio()
    empty = Portfolio(
        username="octocat",
        profile=portfolio.profile,
        repositories=(),
        skills=build_skill_profile([])
    )

    card = render_portfolio(empty)

    assert "No language data available." in card
    assert "No public repositories." in card


def test_portfolio_to_dict_is_json_serializable():
    """Test the JSON view."""
    data = portfolio_to_dict(_portfolio(blog="example.com"), top_n=2)

    assert json.loads(json.dumps(data)) == data
    assert data["skills"] == [
        {"language": "Go", "percentage": 83.3},
        {"language": "TypeScript", "percentage": 16.7},
    ]
    assert [repo["name"] for repo in data["top_repositories"]] == ["repo7", "repo6"]
    assert data["stats"]["total_stars"] == 28
    assert data["links"] == [{"label": "Website", "href": "https://example.com"}]
