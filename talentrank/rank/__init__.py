"""
Ranking subsystem for talentrank.

The `rank` package turns a candidate pool and one job into an ordered
list of results.  The stages include:

* `prefilter` – Drops candidates who fail the job's elimination
  criteria (age range, salary ceiling, availability and the exact
  match fields).
* `scoring` – Computes the weighted category score of each survivor.
* `aggregate` – Sorts by score and assigns ranks.
* `explain` – Reconstructs which tokens matched, per category and
  tier, for a single result.
* `distribution` – Buckets results for histograms.
"""

from .prefilter import filter_candidates, passes  # noqa: F401
from .scoring import max_possible_score, score  # noqa: F401
from .aggregate import rank, rank_all_jobs  # noqa: F401
from .explain import explain  # noqa: F401
