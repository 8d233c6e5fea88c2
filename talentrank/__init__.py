"""
Talentrank package: rules-based candidate ranking.

This package contains submodules for loading candidate and employer
records, filtering candidates on hard elimination criteria, scoring
the survivors against a job's matching criteria, ranking them and
explaining each score.  Each submodule implements one step of the
pipeline.

The high‑level flow is:

1. **ingest** – Read candidate and employer JSON arrays into the
   dataclasses defined in ``normalize.schema`` and write ranked
   matches back out as CSV.
2. **normalize** – Record schema plus the comma tokenizer every
   comparison goes through.
3. **rank** – Eliminate, score and order candidates for one job.
   ``prefilter`` applies the pass/fail checks, ``scoring`` computes
   the weighted category score, ``aggregate`` sorts and assigns
   ranks, ``explain`` reconstructs which tokens matched and
   ``distribution`` buckets the results for histograms.
4. **cli** – Command line entry point wiring together the above
   components.

Every ranking function is pure: inputs are passed explicitly and a
new list is returned, so re-ranking after a change is simply another
call.
"""

from .rank.aggregate import rank  # noqa: F401
from .rank.explain import explain  # noqa: F401

__version__ = "0.1.0"
