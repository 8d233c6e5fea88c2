"""
Match explanation.

Reconstructs, for one ranked candidate, which criteria tokens matched
in which category and tier so a reviewer can see where a score came
from.  Explanations are computed on demand, only for candidates a
caller inspects.

Unlike the scorer, the explainer pools ``field1``..``field3`` of a
category into one token list and intersects it once per tier.  The
pooled list keeps repeats, so a token a job lists in two slots is
reported twice in ``matched_items`` (in the employer's spelling of
each slot) and the explained points add up to the per-slot score in
``scoring.score``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import DEFAULT_WEIGHTS, ScoringWeights
from ..normalize.schema import CATEGORIES, Employer, MatchingCriteriaFields, MatchResult
from ..normalize.tokenize import tokenize


@dataclass
class CategoryMatch:
    category: str
    matched_items: List[str]
    score: int

    def to_dict(self) -> Dict[str, object]:
        return {"category": self.category, "matchedItems": list(self.matched_items), "score": self.score}


@dataclass
class MatchExplanation:
    past_current: List[CategoryMatch] = field(default_factory=list)
    preferred: List[CategoryMatch] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "pastCurrent": [m.to_dict() for m in self.past_current],
            "preferred": [m.to_dict() for m in self.preferred],
        }

    @property
    def total(self) -> int:
        return sum(m.score for m in self.past_current) + sum(m.score for m in self.preferred)


def pooled_criteria(criteria: MatchingCriteriaFields) -> List[str]:
    """Tokens of all slots in order; a token repeated across slots stays repeated."""
    return [token for slot in criteria.slots for token in tokenize(slot)]


def find_matches(candidate_field: Optional[str], required_values: List[str]) -> List[str]:
    """Return the required values present in ``candidate_field``, as the employer spelled them."""
    candidate_lower = {v.lower() for v in tokenize(candidate_field)}
    if not candidate_lower or not required_values:
        return []
    return [req for req in required_values if req.lower() in candidate_lower]


def explain(
    result: MatchResult,
    employer: Employer,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> MatchExplanation:
    """Break down ``result`` into matched tokens per category and tier.

    Args:
        result: A ranked candidate produced by ``aggregate.rank``.
        employer: The job the result was ranked against.
        weights: Tier weights; must be the ones used for ranking.

    Returns:
        A ``MatchExplanation`` listing only categories with at least
        one matched token.
    """
    candidate = result.candidate
    explanation = MatchExplanation()
    for category in CATEGORIES:
        criteria = employer.criteria_for(category)
        if criteria is None:
            continue
        required = pooled_criteria(criteria)

        past_matches = find_matches(candidate.attribute(category.past_field), required)
        if past_matches:
            explanation.past_current.append(
                CategoryMatch(category.label, past_matches, len(past_matches) * weights.past_current)
            )

        preferred_matches = find_matches(candidate.attribute(category.preferred_field), required)
        if preferred_matches:
            explanation.preferred.append(
                CategoryMatch(category.label, preferred_matches, len(preferred_matches) * weights.preferred)
            )
    return explanation
