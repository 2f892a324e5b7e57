"""
Data Contracts for the Guidance Engine

Defines Pydantic models for the student profile (input), the document parse
result, and the recommendation records (output).
These contracts are the API boundary for the parser and the engine.

Every model is frozen: a profile or recommendation is a snapshot that gets
replaced wholesale (``model_copy(update=...)``), never mutated in place.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from enum import Enum

from .constants import DEFAULT_GRADE


# =============================================================================
# ENUMS
# =============================================================================

class RecommendationType(str, Enum):
    """Which result lists a Recommendation is expected to carry."""
    CAREER_GUIDANCE = "career_guidance"
    UNIVERSITY_RECOMMENDATION = "university_recommendation"
    REQUIREMENTS = "requirements"
    STREAM_RECOMMENDATION = "stream_recommendation"


class AdmissionStatus(str, Enum):
    """Student's APS relative to a programme's published requirement."""
    EXCEEDS_REQUIREMENT = "exceeds_requirement"
    MEETS_REQUIREMENT = "meets_requirement"
    BELOW_REQUIREMENT = "below_requirement"


class ParseErrorKind(str, Enum):
    """Why a parse produced no usable subjects."""
    INSUFFICIENT_TEXT = "insufficient_text"
    NO_SUBJECTS_FOUND = "no_subjects_found"
    RECOGNITION_FAILURE = "recognition_failure"


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class Subject(BaseModel):
    """
    A single subject result on the student's profile.

    ``name`` is always a canonical catalog name, never a raw OCR fragment.
    The 0-100 range is enforced here, at construction; the APS calculator and
    the engine assume it holds.
    """
    name: str
    score: int = Field(ge=0, le=100)
    is_core: bool = False

    class Config:
        frozen = True


def _unique(values: List[str]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class StudentProfile(BaseModel):
    """
    Snapshot of everything the engine knows about a student.

    ``aps_score`` is only ever the APS of ``subjects``; build profiles through
    ``runner.build_profile`` so the two never drift apart.
    """
    grade: int = Field(default=DEFAULT_GRADE, ge=9, le=12)
    subjects: List[Subject] = Field(default_factory=list)
    selected_interests: List[str] = Field(default_factory=list)
    selected_skills: List[str] = Field(default_factory=list)
    aps_score: int = Field(default=0, ge=0)

    @field_validator("selected_interests", "selected_skills")
    @classmethod
    def _dedupe(cls, values: List[str]) -> List[str]:
        return _unique(values)

    class Config:
        frozen = True


# =============================================================================
# PARSER OUTPUT
# =============================================================================

class ExtractedSubject(BaseModel):
    """Subject/score pair as found by the parser, before promotion to Subject."""
    name: str
    score: int
    is_synthesized: bool = False  # True when the score was guessed, not read

    class Config:
        frozen = True


class ParseResult(BaseModel):
    """
    Output contract for the document parser.

    Failures are carried as data: ``error`` is set (and ``confidence`` is 0.0)
    whenever ``subjects`` is empty.
    """
    subjects: List[ExtractedSubject] = Field(default_factory=list)
    raw_text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    error: Optional[str] = None
    error_kind: Optional[ParseErrorKind] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and bool(self.subjects)

    @property
    def has_synthesized_scores(self) -> bool:
        return any(s.is_synthesized for s in self.subjects)

    class Config:
        frozen = True
        use_enum_values = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class Career(BaseModel):
    """Career suggestion with the subjects and skills it leans on."""
    title: str
    description: str
    demand: str  # Low/Medium/High/Very High
    requirements: List[str] = Field(default_factory=list)
    skills_needed: List[str] = Field(default_factory=list)
    elevator_pitch: str = ""

    class Config:
        frozen = True


class University(BaseModel):
    """University programme with the student's admission status for it."""
    name: str
    program: str
    location: str
    aps_requirement: int
    status: AdmissionStatus

    class Config:
        frozen = True
        use_enum_values = True


class School(BaseModel):
    """High school offering one or more of the recommended streams."""
    name: str
    location: str
    distance: str
    type: str
    streams: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class Recommendation(BaseModel):
    """
    A titled bag of results.

    Only the lists relevant to ``type`` are expected to be non-empty, e.g. a
    stream recommendation carries stream names in ``requirements`` and the
    matching schools in ``schools``.
    """
    title: str
    description: str
    type: RecommendationType
    requirements: List[str] = Field(default_factory=list)
    universities: List[University] = Field(default_factory=list)
    careers: List[Career] = Field(default_factory=list)
    schools: List[School] = Field(default_factory=list)

    class Config:
        frozen = True
        use_enum_values = True


class GuidanceSnapshot(BaseModel):
    """
    Profile together with the recommendations generated for it.
    This is what gets handed to the presentation layer.
    """
    profile: StudentProfile = Field(default_factory=StudentProfile)
    recommendations: List[Recommendation] = Field(default_factory=list)
    analysis: Optional[ParseResult] = None

    class Config:
        frozen = True
