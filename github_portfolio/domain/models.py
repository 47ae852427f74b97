"""Domain models representing core business entities."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from github_portfolio.domain.errors import FetchError


# Mapping from language name to the bytes it contributes to one repository
LanguageByteMap = Dict[str, int]


@dataclass(frozen=True)
class UserProfile:
    """Immutable snapshot of a GitHub user's public profile."""
    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    html_url: Optional[str] = None
    blog: Optional[str] = None
    twitter_username: Optional[str] = None
    email: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Returns the display name, falling back to the login."""
        return self.name or self.login


@dataclass(frozen=True)
class RepositorySummary:
    """Immutable summary of one repository owned by the user."""
    name: str
    html_url: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0


@dataclass(frozen=True)
class LanguageFetchResult:
    """Outcome of fetching one repository's languages.

    Exactly one of ``languages`` or ``error`` is set.
    """
    repository: str
    languages: Optional[LanguageByteMap] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.languages is not None

    @classmethod
    def success(cls, repository: str, languages: LanguageByteMap) -> 'LanguageFetchResult':
        return cls(repository=repository, languages=dict(languages))

    @classmethod
    def failure(cls, repository: str, error: FetchError) -> 'LanguageFetchResult':
        return cls(repository=repository, error=error)


@dataclass(frozen=True)
class SkillTotals:
    """Accumulated byte counts per language plus the grand total."""
    bytes_by_language: Dict[str, int] = field(default_factory=dict)
    total_bytes: int = 0


@dataclass(frozen=True)
class Skill:
    """One ranked language with its share of all bytes."""
    language: str
    byte_count: int
    percentage: float


@dataclass(frozen=True)
class SkillProfile:
    """Ranked, percentage-normalized language usage across repositories."""
    skills: Tuple[Skill, ...] = ()
    total_bytes: int = 0

    def __iter__(self):
        return iter(self.skills)

    def __len__(self) -> int:
        return len(self.skills)

    @property
    def languages(self) -> List[str]:
        """Returns language names in rank order."""
        return [skill.language for skill in self.skills]

    def as_pairs(self) -> List[Tuple[str, float]]:
        """Returns the profile as ``(language, percentage)`` pairs."""
        return [(skill.language, skill.percentage) for skill in self.skills]


@dataclass(frozen=True)
class Portfolio:
    """Everything a view needs to render a user's portfolio card."""
    username: str
    profile: UserProfile
    repositories: Tuple[RepositorySummary, ...]
    skills: SkillProfile

    @property
    def total_stars(self) -> int:
        """Returns the star count summed over the fetched repositories."""
        return sum(repo.stargazers_count for repo in self.repositories)

    def top_repositories(self, limit: int = 6) -> List[RepositorySummary]:
        """Returns the most starred repositories without reordering the source."""
        ranked = sorted(
            self.repositories,
            key=lambda repo: repo.stargazers_count,
            reverse=True
        )
        return ranked[:max(limit, 0)]
