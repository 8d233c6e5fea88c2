"""
Category scoring stage.

Scores a candidate against a job's required matching criteria.  Each
of the 13 categories holds up to three criteria slots (``field1`` to
``field3``).  Every slot is scored on its own:

* tokens of the slot found in the candidate's past/current field earn
  ``weights.past_current`` points each (3 by default);
* tokens found in the candidate's preferred field earn
  ``weights.preferred`` points each (1 by default).

Slot scores are summed, so a token required in two slots counts
twice.  ``max_possible_score`` gives the denominator used for
percentage display: every criteria token at the past/current weight.
It ignores the preferred tier, so a score can exceed it.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..config import DEFAULT_WEIGHTS, ScoringWeights
from ..normalize.schema import CATEGORIES, Candidate, Employer
from ..normalize.tokenize import tokenize

logger = logging.getLogger(__name__)


def count_matches(candidate_values: Iterable[str], required_values: List[str]) -> int:
    """Count required tokens present in ``candidate_values``, ignoring case.

    Duplicates in ``required_values`` are counted each time.
    """
    if not required_values:
        return 0
    candidate_lower = {v.lower() for v in candidate_values}
    return sum(1 for req in required_values if req.lower() in candidate_lower)


def category_score(
    candidate_past_current: Optional[str],
    candidate_preferred: Optional[str],
    criteria_field: Optional[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Score one criteria slot against both candidate tiers."""
    if not criteria_field:
        return 0
    required = tokenize(criteria_field)
    past_matches = count_matches(tokenize(candidate_past_current), required)
    preferred_matches = count_matches(tokenize(candidate_preferred), required)
    return past_matches * weights.past_current + preferred_matches * weights.preferred


def score(candidate: Candidate, employer: Employer, weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    """Return the candidate's total matching score for ``employer``."""
    total = 0
    for category in CATEGORIES:
        criteria = employer.criteria_for(category)
        if criteria is None:
            continue
        past = candidate.attribute(category.past_field)
        preferred = candidate.attribute(category.preferred_field)
        subtotal = sum(category_score(past, preferred, slot, weights) for slot in criteria.slots)
        if subtotal:
            logger.debug(
                "Candidate %s scored %d on %s", candidate.candidate_id, subtotal, category.key
            )
        total += subtotal
    return total


def max_possible_score(employer: Employer, weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    """Return the display maximum: all criteria tokens at the past/current weight."""
    total_tokens = 0
    for category in CATEGORIES:
        criteria = employer.criteria_for(category)
        if criteria is None:
            continue
        total_tokens += sum(len(tokenize(slot)) for slot in criteria.slots)
    return total_tokens * weights.past_current


def match_percentage(matching_score: int, max_score: int) -> float:
    """Fraction of ``max_score`` reached; 0.0 when there is no maximum."""
    if max_score <= 0:
        return 0.0
    return matching_score / max_score
