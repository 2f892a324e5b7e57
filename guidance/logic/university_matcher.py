"""
University Matcher

Grades 11-12 university pathways and admission requirements.
"""

from typing import List, Optional, Sequence

from .constants import ADVISORY_APS_THRESHOLD
from .contracts import AdmissionStatus, Recommendation, RecommendationType, University
from .matching import has_tag
from .pathways import (
    BASELINE_REQUIREMENTS,
    LOW_APS_ADVISORIES,
    UNIVERSITY_CANDIDATES,
    ProgramCandidate,
)


def admission_status(aps_score: int, aps_requirement: int, gate: Optional[int] = None) -> AdmissionStatus:
    """
    Compare the student's APS to a programme requirement.

    Reaching the requirement exceeds it. Short of that, a student who passed
    the programme's entry gate meets it; anyone else is below.
    """
    if aps_score >= aps_requirement:
        return AdmissionStatus.EXCEEDS_REQUIREMENT
    if gate is not None and aps_score >= gate:
        return AdmissionStatus.MEETS_REQUIREMENT
    return AdmissionStatus.BELOW_REQUIREMENT


def candidate_status(candidate: ProgramCandidate, aps_score: int) -> AdmissionStatus:
    # Interest-gated programmes have no meets band
    gate = None if candidate.required_interest else candidate.min_aps
    return admission_status(aps_score, candidate.aps_requirement, gate)


def is_eligible(candidate: ProgramCandidate, aps_score: int, interests: Sequence[str]) -> bool:
    if aps_score < candidate.min_aps:
        return False
    if candidate.required_interest and not has_tag(interests, candidate.required_interest):
        return False
    return True


def match_universities(
    aps_score: int,
    interests: Sequence[str],
    candidates: Sequence[ProgramCandidate] = UNIVERSITY_CANDIDATES,
) -> List[University]:
    """Programmes whose gate the student passes, with status computed now."""
    return [
        University(
            name=c.name,
            program=c.program,
            location=c.location,
            aps_requirement=c.aps_requirement,
            status=candidate_status(c, aps_score),
        )
        for c in candidates
        if is_eligible(c, aps_score, interests)
    ]


def recommend_universities(aps_score: int, interests: Sequence[str]) -> Recommendation:
    return Recommendation(
        title="University Pathways",
        description=f"Bachelor's programs matching your APS score of {aps_score}",
        type=RecommendationType.UNIVERSITY_RECOMMENDATION,
        universities=match_universities(aps_score, interests),
    )


def recommend_admission_requirements(aps_score: int) -> Recommendation:
    requirements = list(BASELINE_REQUIREMENTS)
    if aps_score < ADVISORY_APS_THRESHOLD:
        requirements.extend(LOW_APS_ADVISORIES)

    return Recommendation(
        title="Admission Requirements",
        description="Key requirements for tertiary education applications",
        type=RecommendationType.REQUIREMENTS,
        requirements=requirements,
    )
