"""Console rendering of a portfolio card."""
from dataclasses import asdict
from typing import Any, Dict, List, Tuple

from github_portfolio.domain.models import Portfolio, RepositorySummary, UserProfile


SECTION_RULE = "=" * 60
NO_BIO_MESSAGE = "No bio available"
NO_DESCRIPTION_MESSAGE = "No description available"
NO_LANGUAGE_MESSAGE = "Not specified"
NO_SKILLS_MESSAGE = "No language data available."
NO_REPOSITORIES_MESSAGE = "No public repositories."
TWITTER_URL_TEMPLATE = "https://twitter.com/{handle}"
SKILL_LINE_TEMPLATE = "  {language:<24} {percentage:5.1f}%"
REPO_LINE_TEMPLATE = "  {name}  ★ {stars}  ⑂ {forks}  ● {language}"


def contact_links(profile: UserProfile) -> List[Tuple[str, str]]:
    """Build the ``(label, href)`` contact links a profile supports."""
    links = []
    if profile.html_url:
        links.append(("GitHub", profile.html_url))
    if profile.blog:
        blog = profile.blog if profile.blog.startswith("http") else f"https://{profile.blog}"
        links.append(("Website", blog))
    if profile.twitter_username:
        links.append(("Twitter", TWITTER_URL_TEMPLATE.format(handle=profile.twitter_username)))
    if profile.email:
        links.append(("Email", f"mailto:{profile.email}"))
    return links


def _section(title: str) -> List[str]:
    return ["", SECTION_RULE, title, SECTION_RULE]


def _repository_lines(repo: RepositorySummary) -> List[str]:
    lines = [
        REPO_LINE_TEMPLATE.format(
            name=repo.name,
            stars=repo.stargazers_count,
            forks=repo.forks_count,
            language=repo.language or NO_LANGUAGE_MESSAGE
        ),
        f"    {repo.description or NO_DESCRIPTION_MESSAGE}",
    ]
    if repo.html_url:
        lines.append(f"    {repo.html_url}")
    return lines


def render_portfolio(portfolio: Portfolio, top_n: int = 6) -> str:
    """Render the portfolio as plain text.

    Args:
        portfolio: Fetched portfolio
        top_n: Number of most starred repositories to list

    Returns:
        Multi-line card text
    """
    profile = portfolio.profile
    lines = _section(f"{profile.display_name} (@{portfolio.username})")

    lines.append(profile.bio or NO_BIO_MESSAGE)
    if profile.location:
        lines.append(f"Location: {profile.location}")
    if profile.company:
        lines.append(f"Company: {profile.company}")

    lines += _section("Stats")
    lines.append(f"Public repositories: {profile.public_repos:,}")
    lines.append(f"Followers: {profile.followers:,}")
    lines.append(f"Total stars: {portfolio.total_stars:,}")

    lines += _section("Skills")
    if portfolio.skills:
        for skill in portfolio.skills:
            lines.append(SKILL_LINE_TEMPLATE.format(
                language=skill.language,
                percentage=skill.percentage
            ))
    else:
        lines.append(NO_SKILLS_MESSAGE)

    lines += _section(f"Top {top_n} Repositories")
    top_repositories = portfolio.top_repositories(top_n)
    if top_repositories:
        for repo in top_repositories:
            lines += _repository_lines(repo)
    else:
        lines.append(NO_REPOSITORIES_MESSAGE)

    links = contact_links(profile)
    if links:
        lines += _section("Contact")
        lines += [f"{label}: {href}" for label, href in links]

    return "\n".join(lines).lstrip("\n")


def portfolio_to_dict(portfolio: Portfolio, top_n: int = 6) -> Dict[str, Any]:
    """Return a JSON-serializable view of the portfolio."""
    return {
        "username": portfolio.username,
        "profile": asdict(portfolio.profile),
        "stats": {
            "public_repos": portfolio.profile.public_repos,
            "followers": portfolio.profile.followers,
            "total_stars": portfolio.total_stars,
        },
        "skills": [
            {"language": language, "percentage": percentage}
            for language, percentage in portfolio.skills.as_pairs()
        ],
        "top_repositories": [asdict(repo) for repo in portfolio.top_repositories(top_n)],
        "links": [{"label": label, "href": href} for label, href in contact_links(portfolio.profile)],
    }
