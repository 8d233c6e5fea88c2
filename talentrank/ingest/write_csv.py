"""
CSV writer for ranked matches.

Flattens each ``MatchResult`` together with its job into one match
record, the row shape the profile store persists.  If the file
already exists, it will be overwritten.  Unicode is written in
UTF‑8 encoding.
"""

from __future__ import annotations

import csv
from typing import Dict, Iterable, List

from ..normalize.schema import Employer, MatchResult

# Candidate attributes copied into every match record, in column order.
CANDIDATE_COLUMNS: List[str] = [
    "first_name",
    "last_name",
    "email",
    "phone",
    "date_of_birth",
    "age",
    "gender",
    "race",
    "ethnicity",
    "dialect",
    "current_country",
    "current_city",
    "nationality",
    "country_of_birth",
    "month_and_year_moved_to_current_country",
    "minimum_expected_salary_monthly",
    "visa_status",
    "availability",
    "desired_type_of_job_arrangement",
    "desired_job_hierarchy_in_title",
    "desired_employer",
    "desired_domain",
    "desired_role",
    "desired_function",
    "desired_structure",
    "desired_system",
]

MATCH_COLUMNS: List[str] = [
    "job_id",
    "job_title",
    "employer_name",
    "salary_monthly",
    "candidate_id",
    "rank",
    "matching_score",
] + CANDIDATE_COLUMNS


def to_match_record(result: MatchResult, employer: Employer) -> Dict[str, object]:
    """Build the flat match record for one ranked candidate."""
    candidate = result.candidate
    record: Dict[str, object] = {
        "job_id": employer.job_id,
        "job_title": employer.job_title,
        "employer_name": employer.employer_name,
        "salary_monthly": employer.elimination_criteria.salary_monthly or 0,
        "candidate_id": candidate.candidate_id,
        "rank": result.rank,
        "matching_score": result.matching_score,
    }
    for column in CANDIDATE_COLUMNS:
        # The store names the structural skills column differently.
        attribute = "desired_structural_skills" if column == "desired_structure" else column
        record[column] = getattr(candidate, attribute)
    return record


def write_matches_csv(results: Iterable[MatchResult], employer: Employer, path: str) -> int:
    """Write match records to ``path`` and return how many were written.

    Args:
        results: Ranked results for ``employer``.
        employer: The job the results belong to.
        path: Destination path for the CSV.
    """
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=MATCH_COLUMNS)
        writer.writeheader()
        for result in results:
            row = {k: ("" if v is None else v) for k, v in to_match_record(result, employer).items()}
            writer.writerow(row)
            count += 1
    return count
