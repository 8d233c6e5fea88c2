"""
Ranking for one job.

Combines the elimination and scoring stages: candidates that fail the
job's elimination criteria are dropped, the rest are scored, sorted
by score (highest first) and numbered.  The sort is stable, so
candidates with equal scores keep their input order and still get
distinct consecutive ranks.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from ..config import DEFAULT_FILTER_SETTINGS, DEFAULT_WEIGHTS, FilterSettings, ScoringWeights
from ..normalize.schema import Candidate, Employer, MatchResult
from .prefilter import filter_candidates
from .scoring import score

logger = logging.getLogger(__name__)


def rank(
    candidates: Iterable[Candidate],
    employer: Employer,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    settings: FilterSettings = DEFAULT_FILTER_SETTINGS,
) -> List[MatchResult]:
    """Rank a candidate pool against one job.

    Args:
        candidates: Iterable of Candidate objects.
        employer: The job to rank against.
        weights: Tier weights for the scorer.
        settings: Availability vocabulary and visa exemptions for the
            elimination stage.

    Returns:
        A new list of ``MatchResult`` ordered by rank (1-based).  An
        empty list when no candidate survives elimination.
    """
    survivors = filter_candidates(candidates, employer, settings)
    scored = [(candidate, score(candidate, employer, weights)) for candidate in survivors]
    scored.sort(key=lambda x: x[1], reverse=True)
    results = [
        MatchResult(candidate=candidate, matching_score=value, rank=position + 1)
        for position, (candidate, value) in enumerate(scored)
    ]
    if results:
        logger.info(
            "Ranked %d candidates for job %s (top score %d)",
            len(results),
            employer.job_id,
            results[0].matching_score,
        )
    else:
        logger.info("No candidates survived elimination for job %s", employer.job_id)
    return results


def rank_all_jobs(
    candidates: Iterable[Candidate],
    employers: Iterable[Employer],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    settings: FilterSettings = DEFAULT_FILTER_SETTINGS,
) -> Dict[int, List[MatchResult]]:
    """Rank the same pool independently against every job."""
    pool = list(candidates)
    return {employer.job_id: rank(pool, employer, weights, settings) for employer in employers}
