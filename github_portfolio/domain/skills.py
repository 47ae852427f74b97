"""Language skill aggregation.

Merges per-repository language byte maps into a single ranked profile. Every
function here is pure so the aggregation can be tested without a network.
"""
from fractions import Fraction
from functools import reduce
from typing import Iterable, List

from github_portfolio.domain.models import (
    LanguageByteMap,
    LanguageFetchResult,
    Skill,
    SkillProfile,
    SkillTotals,
)

# One percent is ten display units (one decimal digit)
PERCENT_TENTHS = 1000


def merge_languages(totals: SkillTotals, languages: LanguageByteMap) -> SkillTotals:
    """Add one repository's byte counts to the running totals.

    Args:
        totals: Totals accumulated so far (left untouched)
        languages: Language byte map of a single repository

    Returns:
        New SkillTotals including the repository's bytes
    """
    merged = dict(totals.bytes_by_language)
    grand_total = totals.total_bytes
    for language, byte_count in languages.items():
        merged[language] = merged.get(language, 0) + byte_count
        grand_total += byte_count
    return SkillTotals(bytes_by_language=merged, total_bytes=grand_total)


def aggregate_languages(results: Iterable[LanguageFetchResult]) -> SkillTotals:
    """Reduce the successful fetch results into a single SkillTotals.

    Failed results contribute nothing.
    """
    successes = (result.languages for result in results if result.ok)
    return reduce(merge_languages, successes, SkillTotals())


def _percentages(byte_counts: List[int], total: int) -> List[float]:
    """Split 100% into tenths proportionally to ``byte_counts``.

    Uses the largest remainder method, so each share is within 0.1 of its
    exact value and the shares add up to exactly 100.0.
    """
    exact = [Fraction(count * PERCENT_TENTHS, total) for count in byte_counts]
    tenths = [int(share) for share in exact]
    leftover = PERCENT_TENTHS - sum(tenths)
    by_remainder = sorted(
        range(len(exact)),
        key=lambda index: (-(exact[index] - tenths[index]), index)
    )
    for index in by_remainder[:leftover]:
        tenths[index] += 1
    return [share / 10 for share in tenths]


def rank_skills(totals: SkillTotals) -> SkillProfile:
    """Rank languages by byte count and express each as a percentage.

    Ties are ordered by language name. A zero grand total yields an empty
    profile.
    """
    if totals.total_bytes <= 0:
        return SkillProfile()

    ranked = sorted(
        totals.bytes_by_language.items(),
        key=lambda item: (-item[1], item[0])
    )
    percentages = _percentages([count for _, count in ranked], totals.total_bytes)
    skills = tuple(
        Skill(language=language, byte_count=byte_count, percentage=percentage)
        for (language, byte_count), percentage in zip(ranked, percentages)
    )
    return SkillProfile(skills=skills, total_bytes=totals.total_bytes)


def build_skill_profile(results: Iterable[LanguageFetchResult]) -> SkillProfile:
    """Aggregate and rank fan-out results in one step."""
    return rank_skills(aggregate_languages(results))
