"""
JSON import and export of candidate and employer records.

Both files hold a top-level array of objects using the field names
of ``normalize.schema``.  Anything else is rejected with
``ValueError`` before it reaches the ranking code.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, List, TypeVar

from ..normalize.schema import Candidate, Employer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load_array(path: str, build: Callable[[dict], T], id_key: str) -> List[T]:
    with open(path, "r", encoding="utf-8") as f:
        data: Any = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(data).__name__}")
    records: List[T] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: record {index} is not an object")
        if id_key not in item:
            raise ValueError(f"{path}: record {index} has no {id_key}")
        records.append(build(item))
    return records


def load_candidates(path: str) -> List[Candidate]:
    """Load candidates from a JSON array file."""
    candidates = _load_array(path, Candidate.from_dict, "candidate_id")
    logger.info("Loaded %d candidates from %s", len(candidates), path)
    return candidates


def load_employers(path: str) -> List[Employer]:
    """Load employers (jobs) from a JSON array file."""
    employers = _load_array(path, Employer.from_dict, "job_id")
    logger.info("Loaded %d employers from %s", len(employers), path)
    return employers


def _dump_array(records: Iterable[Any], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in records], f, indent=2, ensure_ascii=False)


def dump_candidates(candidates: Iterable[Candidate], path: str) -> None:
    _dump_array(candidates, path)


def dump_employers(employers: Iterable[Employer], path: str) -> None:
    _dump_array(employers, path)
