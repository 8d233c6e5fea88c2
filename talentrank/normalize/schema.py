# normalize/schema.py
"""
Record schema for candidates, employers and match results.

Field names match the JSON files exchanged with the profile store, so
``from_dict``/``to_dict`` round-trip a record without renaming
anything.  Keys that the schema does not know about are kept in
``extra`` and written back on export.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

# Literal used by employers to mark an elimination criterion as open.
UNCONSTRAINED = "Any"


def _split_known(cls, data: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    names = {f.name for f in fields(cls) if f.name not in ("extra", "source_blocks")}
    known = {k: v for k, v in data.items() if k in names}
    extra = {k: v for k, v in data.items() if k not in names}
    return known, extra


def _compact(record: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if v is not None}


@dataclass(frozen=True)
class Category:
    """One weighted matching dimension and the candidate fields it reads."""

    key: str
    label: str
    past_field: str
    preferred_field: Optional[str]


CATEGORIES: Tuple[Category, ...] = (
    Category("motivation", "Motivation", "past_current_motivation", "preferred_motivation"),
    Category("values", "Values", "past_current_values", "preferred_values"),
    Category("hobbies", "Hobbies", "past_current_hobbies", "preferred_hobbies"),
    Category("talents", "Talents", "past_current_talents", "preferred_talents"),
    Category("education_subject", "Education Subject", "past_current_education_subject", None),
    Category("university_major", "University Major", "past_current_university_major", None),
    Category("university_ranking", "University Ranking", "past_current_university_ranking", None),
    Category("role", "Role", "past_current_role", "preferred_role"),
    Category("domain", "Domain", "past_current_domain", "preferred_domain"),
    Category("function", "Function", "past_current_function", "preferred_function"),
    Category("structural_skills", "Structural Skills", "past_current_structural_skills", "preferred_structural_skills"),
    Category("system", "System", "past_current_system", "preferred_system"),
    Category("hierarchy", "Hierarchy", "past_current_hierarchy", "preferred_hierarchy"),
)


@dataclass
class Candidate:
    candidate_id: int
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[str] = None
    age: Optional[int] = None
    race: Optional[str] = None
    ethnicity: Optional[str] = None
    dialect: Optional[str] = None
    religion: Optional[str] = None
    country_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    current_country: Optional[str] = None
    current_city: Optional[str] = None
    visa_status: Optional[str] = None
    month_and_year_moved_to_current_country: Optional[str] = None
    months_in_current_country: Optional[int] = None
    availability: Optional[str] = None
    minimum_expected_salary_monthly: Optional[int] = None
    desired_type_of_job_arrangement: Optional[str] = None
    desired_job_hierarchy_in_title: Optional[str] = None
    desired_employer: Optional[str] = None
    desired_role: Optional[str] = None
    desired_domain: Optional[str] = None
    desired_function: Optional[str] = None
    desired_structural_skills: Optional[str] = None
    desired_system: Optional[str] = None
    profile_picture_url: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    fitness_level: Optional[str] = None
    past_current_title: Optional[str] = None
    past_current_motivation: Optional[str] = None
    past_current_values: Optional[str] = None
    past_current_hobbies: Optional[str] = None
    past_current_talents: Optional[str] = None
    past_current_education_subject: Optional[str] = None
    past_current_university_major: Optional[str] = None
    past_current_university_ranking: Optional[str] = None
    past_current_role: Optional[str] = None
    past_current_domain: Optional[str] = None
    past_current_function: Optional[str] = None
    past_current_structural_skills: Optional[str] = None
    past_current_system: Optional[str] = None
    past_current_hierarchy: Optional[str] = None
    past_current_work_arrangement: Optional[str] = None
    preferred_title: Optional[str] = None
    preferred_motivation: Optional[str] = None
    preferred_values: Optional[str] = None
    preferred_hobbies: Optional[str] = None
    preferred_talents: Optional[str] = None
    preferred_role: Optional[str] = None
    preferred_domain: Optional[str] = None
    preferred_function: Optional[str] = None
    preferred_structural_skills: Optional[str] = None
    preferred_system: Optional[str] = None
    preferred_hierarchy: Optional[str] = None
    preferred_work_arrangement: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Candidate":
        known, extra = _split_known(cls, data)
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        record = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        record = _compact(record)
        record.update(self.extra)
        return record

    def attribute(self, name: Optional[str]) -> Optional[str]:
        """Return a text attribute by field name, ``None`` for no field."""
        if name is None:
            return None
        return getattr(self, name)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)


@dataclass
class EliminationCriteria:
    """Hard pass/fail constraints of a job.

    Values are stored as found in the source record.  ``constraint``
    is the one place that decides whether a value actually
    constrains anything, so the ``"Any"`` sentinel is not compared
    throughout the filter.
    """

    age: Optional[str] = None
    ethnicity: Optional[str] = None
    race: Optional[str] = None
    religion: Optional[str] = None
    nationality: Optional[str] = None
    country_of_birth: Optional[str] = None
    current_country: Optional[str] = None
    salary_monthly: Optional[int] = None
    availability: Optional[str] = None
    visa_status: Optional[str] = None
    job_arrangement: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "EliminationCriteria":
        known, extra = _split_known(cls, data or {})
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        record = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        record = _compact(record)
        record.update(self.extra)
        return record

    def constraint(self, name: str) -> Any:
        """Return the value of criterion ``name`` or ``None`` when open."""
        value = getattr(self, name)
        if not value or value == UNCONSTRAINED:
            return None
        return value


@dataclass
class MatchingCriteriaFields:
    field1: Optional[str] = None
    field2: Optional[str] = None
    field3: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MatchingCriteriaFields":
        data = data or {}
        return cls(
            field1=data.get("field1"),
            field2=data.get("field2"),
            field3=data.get("field3"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"field1": self.field1, "field2": self.field2, "field3": self.field3})

    @property
    def slots(self) -> List[Optional[str]]:
        return [self.field1, self.field2, self.field3]


@dataclass
class Employer:
    job_id: int
    job_title: Optional[str] = None
    employer_name: Optional[str] = None
    logo_url: Optional[str] = None
    id: Optional[str] = None
    elimination_criteria: EliminationCriteria = field(default_factory=EliminationCriteria)
    required_matching_criteria: Dict[str, MatchingCriteriaFields] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)
    # Criteria blocks present in the source record, written back even when empty.
    source_blocks: FrozenSet[str] = field(default=frozenset(), repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employer":
        known, extra = _split_known(cls, data)
        known["source_blocks"] = frozenset(
            k for k in ("elimination_criteria", "required_matching_criteria") if k in data
        )
        known["elimination_criteria"] = EliminationCriteria.from_dict(known.get("elimination_criteria"))
        known["required_matching_criteria"] = {
            key: MatchingCriteriaFields.from_dict(value)
            for key, value in (known.get("required_matching_criteria") or {}).items()
        }
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        record = _compact(
            {
                "id": self.id,
                "job_id": self.job_id,
                "logo_url": self.logo_url,
                "job_title": self.job_title,
                "employer_name": self.employer_name,
            }
        )
        elimination = self.elimination_criteria.to_dict()
        if elimination or "elimination_criteria" in self.source_blocks:
            record["elimination_criteria"] = elimination
        if self.required_matching_criteria or "required_matching_criteria" in self.source_blocks:
            record["required_matching_criteria"] = {
                key: value.to_dict() for key, value in self.required_matching_criteria.items()
            }
        record.update(self.extra)
        return record

    def criteria_for(self, category: Category) -> Optional[MatchingCriteriaFields]:
        return self.required_matching_criteria.get(category.key)


@dataclass
class MatchResult:
    """A surviving candidate with its score and rank for one job."""

    candidate: Candidate
    matching_score: int
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "candidate": self.candidate.to_dict(),
            "rank": self.rank,
            "matchingScore": self.matching_score,
        }
