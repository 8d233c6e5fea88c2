"""
Unittest suite for the elimination stage.

Each test builds a single candidate and a job with one criterion so
that the check under test is the only one that can fail.
"""

from __future__ import annotations

import unittest

from talentrank.config import FilterSettings
from talentrank.normalize.schema import Candidate, EliminationCriteria, Employer
from talentrank.rank.prefilter import (
    availability_rank,
    filter_candidates,
    parse_age_range,
    passes,
)


def _candidate(**attrs) -> Candidate:
    return Candidate(candidate_id=attrs.pop("candidate_id", 1), **attrs)


class TestAgeRange(unittest.TestCase):
    def test_parse_valid_range(self) -> None:
        self.assertEqual(parse_age_range("25-35"), (25, 35))
        self.assertEqual(parse_age_range(" 25 - 35 "), (25, 35))

    def test_parse_malformed_range(self) -> None:
        self.assertIsNone(parse_age_range("25"))
        self.assertIsNone(parse_age_range("20-30-40"))
        self.assertIsNone(parse_age_range("young-old"))
        self.assertIsNone(parse_age_range(None))

    def test_age_inside_range_passes(self) -> None:
        criteria = EliminationCriteria(age="25-35")
        self.assertTrue(passes(_candidate(age=30), criteria))
        self.assertTrue(passes(_candidate(age=25), criteria))
        self.assertTrue(passes(_candidate(age=35), criteria))

    def test_age_outside_range_fails(self) -> None:
        criteria = EliminationCriteria(age="25-35")
        self.assertFalse(passes(_candidate(age=40), criteria))
        self.assertFalse(passes(_candidate(age=24), criteria))

    def test_malformed_range_is_unconstrained(self) -> None:
        self.assertTrue(passes(_candidate(age=80), EliminationCriteria(age="25to35")))
        self.assertTrue(passes(_candidate(age=80), EliminationCriteria(age="Any")))

    def test_candidate_without_age_is_not_checked(self) -> None:
        self.assertTrue(passes(_candidate(), EliminationCriteria(age="25-35")))


class TestExactMatchFields(unittest.TestCase):
    def test_matching_value_passes(self) -> None:
        criteria = EliminationCriteria(nationality="Malaysian")
        self.assertTrue(passes(_candidate(nationality="Malaysian"), criteria))

    def test_different_value_fails(self) -> None:
        criteria = EliminationCriteria(religion="Buddhism")
        self.assertFalse(passes(_candidate(religion="Islam"), criteria))

    def test_missing_candidate_value_fails(self) -> None:
        criteria = EliminationCriteria(current_country="Singapore")
        self.assertFalse(passes(_candidate(), criteria))

    def test_any_is_unconstrained(self) -> None:
        criteria = EliminationCriteria(ethnicity="Any", race="Any", country_of_birth="Any")
        self.assertTrue(passes(_candidate(ethnicity="X", race="Y", country_of_birth="Z"), criteria))

    def test_job_arrangement_compares_desired_arrangement(self) -> None:
        criteria = EliminationCriteria(job_arrangement="Remote")
        self.assertTrue(passes(_candidate(desired_type_of_job_arrangement="Remote"), criteria))
        self.assertFalse(passes(_candidate(desired_type_of_job_arrangement="Onsite"), criteria))


class TestVisaStatus(unittest.TestCase):
    def test_required_visa_must_match(self) -> None:
        criteria = EliminationCriteria(visa_status="Citizen")
        self.assertTrue(passes(_candidate(visa_status="Citizen"), criteria))
        self.assertFalse(passes(_candidate(visa_status="Student Pass"), criteria))

    def test_work_permit_is_exempt_regardless_of_case(self) -> None:
        self.assertTrue(passes(_candidate(visa_status="Citizen"), EliminationCriteria(visa_status="Work Permit")))
        self.assertTrue(passes(_candidate(), EliminationCriteria(visa_status="work permit")))

    def test_custom_exemptions(self) -> None:
        settings = FilterSettings(visa_exemptions=frozenset({"employment pass"}))
        criteria = EliminationCriteria(visa_status="Employment Pass")
        self.assertTrue(passes(_candidate(visa_status="Citizen"), criteria, settings))
        self.assertFalse(passes(_candidate(visa_status="Citizen"), EliminationCriteria(visa_status="Work Permit"), settings))


class TestSalary(unittest.TestCase):
    def test_expectation_above_ceiling_fails(self) -> None:
        criteria = EliminationCriteria(salary_monthly=5000)
        self.assertFalse(passes(_candidate(minimum_expected_salary_monthly=5001), criteria))
        self.assertTrue(passes(_candidate(minimum_expected_salary_monthly=5000), criteria))

    def test_zero_ceiling_is_unconstrained(self) -> None:
        criteria = EliminationCriteria(salary_monthly=0)
        self.assertTrue(passes(_candidate(minimum_expected_salary_monthly=99999), criteria))


class TestAvailability(unittest.TestCase):
    def test_vocabulary(self) -> None:
        self.assertEqual(availability_rank("Immediate"), 0)
        self.assertEqual(availability_rank("3 MONTHS"), 5)
        self.assertEqual(availability_rank("whenever"), -1)
        self.assertEqual(availability_rank(None), -1)

    def test_slower_candidate_fails(self) -> None:
        criteria = EliminationCriteria(availability="2 weeks")
        self.assertFalse(passes(_candidate(availability="1 month"), criteria))

    def test_faster_or_equal_candidate_passes(self) -> None:
        criteria = EliminationCriteria(availability="2 weeks")
        self.assertTrue(passes(_candidate(availability="immediate"), criteria))
        self.assertTrue(passes(_candidate(availability="2 Weeks"), criteria))

    def test_unknown_candidate_availability_is_most_permissive(self) -> None:
        criteria = EliminationCriteria(availability="immediate")
        self.assertTrue(passes(_candidate(availability="negotiable"), criteria))


class TestFilterCandidates(unittest.TestCase):
    def test_all_checks_must_pass_and_order_is_kept(self) -> None:
        employer = Employer(
            job_id=7,
            elimination_criteria=EliminationCriteria(age="20-40", nationality="Malaysian"),
        )
        pool = [
            _candidate(candidate_id=1, age=30, nationality="Malaysian"),
            _candidate(candidate_id=2, age=45, nationality="Malaysian"),
            _candidate(candidate_id=3, age=30, nationality="Thai"),
            _candidate(candidate_id=4, age=22, nationality="Malaysian"),
        ]
        survivors = filter_candidates(pool, employer)
        self.assertEqual([c.candidate_id for c in survivors], [1, 4])

    def test_no_criteria_keeps_everyone(self) -> None:
        pool = [_candidate(candidate_id=i) for i in range(3)]
        self.assertEqual(filter_candidates(pool, Employer(job_id=1)), pool)


if __name__ == "__main__":
    unittest.main()
