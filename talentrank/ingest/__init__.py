"""
File adapters for the profile store.

Candidate and employer records arrive as JSON arrays and ranked
matches leave as CSV.  Nothing here touches the ranking logic; the
adapters only convert between files and the dataclasses in
``normalize.schema``.
"""

from .json_loader import dump_candidates, dump_employers, load_candidates, load_employers  # noqa: F401
from .write_csv import to_match_record, write_matches_csv  # noqa: F401
