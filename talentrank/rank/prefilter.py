"""
Elimination stage for ranking.

This module removes candidates who fail a job's hard elimination
criteria before any scoring happens.  Each configured criterion is
checked independently and a candidate must pass all of them.
Criteria that are absent or set to ``"Any"`` never eliminate anyone,
and malformed values (such as an age range that is not ``MIN-MAX``)
degrade to unconstrained instead of raising.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..config import DEFAULT_FILTER_SETTINGS, FilterSettings
from ..normalize.schema import Candidate, EliminationCriteria, Employer

logger = logging.getLogger(__name__)

# (criterion name, candidate attribute) pairs compared for equality.
EXACT_MATCH_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("ethnicity", "ethnicity"),
    ("race", "race"),
    ("religion", "religion"),
    ("nationality", "nationality"),
    ("country_of_birth", "country_of_birth"),
    ("current_country", "current_country"),
    ("job_arrangement", "desired_type_of_job_arrangement"),
)


def parse_age_range(age_range: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse ``"MIN-MAX"`` into a tuple, ``None`` when it does not parse."""
    if not age_range:
        return None
    parts = age_range.split("-")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        return None


def availability_rank(availability: Optional[str], settings: FilterSettings = DEFAULT_FILTER_SETTINGS) -> int:
    """Map a notice period to its position in the vocabulary, -1 if unknown."""
    if not availability:
        return -1
    return settings.availability_ranks.get(availability.lower(), -1)


def _failed_check(
    candidate: Candidate,
    criteria: EliminationCriteria,
    settings: FilterSettings,
) -> Optional[str]:
    """Return the name of the first failing criterion, or ``None``."""
    age_range = parse_age_range(criteria.constraint("age"))
    if age_range and candidate.age is not None:
        low, high = age_range
        if candidate.age < low or candidate.age > high:
            return "age"

    for name, attribute in EXACT_MATCH_FIELDS:
        required = criteria.constraint(name)
        if required is not None and getattr(candidate, attribute) != required:
            return name

    ceiling = criteria.constraint("salary_monthly")
    expected = candidate.minimum_expected_salary_monthly
    if ceiling and expected is not None and expected > ceiling:
        return "salary_monthly"

    required_availability = criteria.constraint("availability")
    if required_availability is not None:
        if availability_rank(candidate.availability, settings) > availability_rank(required_availability, settings):
            return "availability"

    visa = criteria.constraint("visa_status")
    if visa is not None and visa.lower() not in settings.visa_exemptions:
        if candidate.visa_status != visa:
            return "visa_status"

    return None


def passes(
    candidate: Candidate,
    criteria: EliminationCriteria,
    settings: FilterSettings = DEFAULT_FILTER_SETTINGS,
) -> bool:
    """Return True when ``candidate`` satisfies every configured criterion."""
    failed = _failed_check(candidate, criteria, settings)
    if failed:
        logger.debug("Eliminating candidate %s on %s", candidate.candidate_id, failed)
        return False
    return True


def filter_candidates(
    candidates: Iterable[Candidate],
    employer: Employer,
    settings: FilterSettings = DEFAULT_FILTER_SETTINGS,
) -> List[Candidate]:
    """Return the candidates that pass the employer's elimination criteria.

    Args:
        candidates: Iterable of Candidate objects.
        employer: The job whose ``elimination_criteria`` apply.
        settings: Availability vocabulary and visa exemptions.

    Returns:
        Passing candidates in their original order.
    """
    pool = list(candidates)
    criteria = employer.elimination_criteria
    filtered = [c for c in pool if passes(c, criteria, settings)]
    logger.info("Prefiltered %d -> %d candidates for job %s", len(pool), len(filtered), employer.job_id)
    return filtered
