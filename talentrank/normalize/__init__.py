"""
Normalization subsystem for talentrank.

Holds the record dataclasses shared by every stage and the field
tokenizer used for all text comparisons.  Records keep the field
names of the JSON files they come from so they can be written back
without loss.
"""

from .schema import (  # noqa: F401
    CATEGORIES,
    Candidate,
    Category,
    EliminationCriteria,
    Employer,
    MatchingCriteriaFields,
    MatchResult,
)
from .tokenize import tokenize  # noqa: F401
