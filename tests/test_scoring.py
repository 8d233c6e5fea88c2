"""
Unittest suite for category scoring and the display maximum.
"""

from __future__ import annotations

import unittest

from talentrank.config import ScoringWeights
from talentrank.normalize.schema import Candidate, Employer, MatchingCriteriaFields
from talentrank.rank.scoring import (
    category_score,
    count_matches,
    match_percentage,
    max_possible_score,
    score,
)


def _employer(**criteria) -> Employer:
    return Employer(
        job_id=1,
        required_matching_criteria={k: MatchingCriteriaFields(**v) for k, v in criteria.items()},
    )


class TestCountMatches(unittest.TestCase):
    def test_case_insensitive(self) -> None:
        self.assertEqual(count_matches(["java", "python"], ["Java"]), 1)

    def test_required_duplicates_count_each_time(self) -> None:
        self.assertEqual(count_matches(["sql"], ["SQL", "sql"]), 2)

    def test_no_required_values(self) -> None:
        self.assertEqual(count_matches(["sql"], []), 0)


class TestCategoryScore(unittest.TestCase):
    def test_past_current_tier(self) -> None:
        self.assertEqual(category_score("java, python", None, "Java"), 3)

    def test_both_tiers(self) -> None:
        self.assertEqual(category_score("java, python", "java", "Java"), 4)

    def test_empty_slot_scores_zero(self) -> None:
        self.assertEqual(category_score("java", "java", None), 0)
        self.assertEqual(category_score("java", "java", ""), 0)

    def test_custom_weights(self) -> None:
        weights = ScoringWeights(past_current=5, preferred=2)
        self.assertEqual(category_score("a, b", "b", "a, b", weights), 12)


class TestScore(unittest.TestCase):
    def test_single_category(self) -> None:
        employer = _employer(structural_skills={"field1": "Java"})
        candidate = Candidate(
            candidate_id=1,
            past_current_structural_skills="java, python",
            preferred_structural_skills="java",
        )
        self.assertEqual(score(candidate, employer), 4)

    def test_token_repeated_across_slots_counts_per_slot(self) -> None:
        employer = _employer(role={"field1": "X", "field2": "X"})
        candidate = Candidate(candidate_id=1, past_current_role="x")
        self.assertEqual(score(candidate, employer), 6)

    def test_sums_over_categories(self) -> None:
        employer = _employer(
            domain={"field1": "Banking, Insurance"},
            function={"field1": "Audit", "field3": "Tax"},
            hobbies={"field2": "Chess"},
        )
        candidate = Candidate(
            candidate_id=1,
            past_current_domain="banking",
            preferred_domain="insurance",
            past_current_function="Tax, Audit",
            preferred_hobbies="chess",
        )
        # domain 3 + 1, function 3 + 3, hobbies 1
        self.assertEqual(score(candidate, employer), 11)

    def test_education_categories_have_no_preferred_tier(self) -> None:
        employer = _employer(education_subject={"field1": "Physics"}, university_major={"field1": "Finance"})
        candidate = Candidate(
            candidate_id=1,
            past_current_education_subject="physics",
            preferred_role="Physics",
            preferred_domain="Finance",
        )
        self.assertEqual(score(candidate, employer), 3)

    def test_no_criteria_scores_zero(self) -> None:
        candidate = Candidate(candidate_id=1, past_current_role="Engineer")
        self.assertEqual(score(candidate, Employer(job_id=1)), 0)


class TestMaxPossibleScore(unittest.TestCase):
    def test_counts_every_token_at_past_weight(self) -> None:
        employer = _employer(
            role={"field1": "A, B", "field2": "A"},
            system={"field3": "SAP"},
        )
        self.assertEqual(max_possible_score(employer), 12)

    def test_empty_category_contributes_nothing(self) -> None:
        employer = _employer(role={}, values={"field1": " , "})
        self.assertEqual(max_possible_score(employer), 0)
        candidate = Candidate(candidate_id=1, past_current_role="A", past_current_values="A")
        self.assertEqual(score(candidate, employer), 0)

    def test_percentage(self) -> None:
        self.assertEqual(match_percentage(6, 12), 0.5)
        self.assertEqual(match_percentage(5, 0), 0.0)


if __name__ == "__main__":
    unittest.main()
