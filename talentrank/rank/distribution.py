"""
Histogram data for ranked results.

Buckets a ranked list by score percentage, age, expected salary or
the tokens of a text field.  Only counts and candidate ids are
produced; drawing the histograms is left to the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence, Tuple

from ..normalize.schema import MatchResult
from ..normalize.tokenize import tokenize
from .scoring import match_percentage

NOT_SPECIFIED = "Not Specified"

SCORE_BUCKETS: Tuple[Tuple[str, float, float], ...] = tuple(
    (f"{i * 10}-{(i + 1) * 10}%", i / 10, (i + 1) / 10) for i in range(10)
)

# Inclusive on both ends.
AGE_BUCKETS: Tuple[Tuple[str, float, float], ...] = (
    ("18-22", 18, 22),
    ("23-27", 23, 27),
    ("28-32", 28, 32),
    ("33-37", 33, 37),
    ("38-42", 38, 42),
    ("43-47", 43, 47),
    ("48-52", 48, 52),
    ("53-57", 53, 57),
    ("58-62", 58, 62),
    ("63+", 63, math.inf),
)

SALARY_BUCKETS: Tuple[Tuple[str, float, float], ...] = (
    ("0-2k", 0, 2000),
    ("2-4k", 2000, 4000),
    ("4-6k", 4000, 6000),
    ("6-8k", 6000, 8000),
    ("8-10k", 8000, 10000),
    ("10-12k", 10000, 12000),
    ("12-15k", 12000, 15000),
    ("15-20k", 15000, 20000),
    ("20-30k", 20000, 30000),
    ("30k+", 30000, math.inf),
)


@dataclass
class Bucket:
    label: str
    candidate_ids: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.candidate_ids)

    def to_dict(self) -> Dict[str, object]:
        return {"label": self.label, "count": self.count, "candidate_ids": list(self.candidate_ids)}


def _bucketize(
    results: Sequence[MatchResult],
    buckets: Sequence[Tuple[str, float, float]],
    value: Callable[[MatchResult], float],
    inclusive: bool,
) -> List[Bucket]:
    out: List[Bucket] = []
    for label, low, high in buckets:
        bucket = Bucket(label)
        for result in results:
            v = value(result)
            inside = low <= v <= high if inclusive else low <= v < high
            if inside:
                bucket.candidate_ids.append(result.candidate.candidate_id)
        out.append(bucket)
    return out


def score_distribution(results: Sequence[MatchResult], max_score: int) -> List[Bucket]:
    """Bucket results by ``score / max_score`` in steps of 10%.

    The last bucket is open-ended so that scores at or above the
    maximum (possible through preferred-tier matches) are counted.
    """
    buckets = list(SCORE_BUCKETS[:-1]) + [(SCORE_BUCKETS[-1][0], SCORE_BUCKETS[-1][1], math.inf)]
    return _bucketize(
        results,
        buckets,
        lambda r: match_percentage(r.matching_score, max_score),
        inclusive=False,
    )


def age_distribution(results: Sequence[MatchResult]) -> List[Bucket]:
    return _bucketize(results, AGE_BUCKETS, lambda r: r.candidate.age or 0, inclusive=True)


def salary_distribution(results: Sequence[MatchResult]) -> List[Bucket]:
    return _bucketize(
        results,
        SALARY_BUCKETS,
        lambda r: r.candidate.minimum_expected_salary_monthly or 0,
        inclusive=False,
    )


def token_distribution(results: Sequence[MatchResult], field_name: str) -> List[Bucket]:
    """Count candidates per token of ``field_name``, most common first.

    A candidate is counted once under every token listed in the field
    and under ``Not Specified`` when the field is empty.  Tokens are
    grouped by exact spelling.
    """
    groups: Dict[str, Bucket] = {}
    for result in results:
        tokens = tokenize(result.candidate.attribute(field_name)) or [NOT_SPECIFIED]
        for token in tokens:
            groups.setdefault(token, Bucket(token)).candidate_ids.append(result.candidate.candidate_id)
    return sorted(groups.values(), key=lambda b: b.count, reverse=True)
