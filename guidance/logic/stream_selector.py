"""
Stream Selector

Grade 10 stream choice and the schools that offer the chosen streams.
"""

from typing import List, Sequence

from .constants import (
    COMMERCE_STREAM_MIN_APS,
    SCIENCE_STREAM_MIN_APS,
    STREAM_SUBJECT_MIN_SCORE,
)
from .contracts import Recommendation, RecommendationType, School, Subject
from .matching import first_score, has_tag
from .pathways import COMMERCE_SCHOOL, SCIENCE_SCHOOL, TECHNICAL_SCHOOL

SCIENCE_STREAM = "Science Stream"
COMMERCE_STREAM = "Commerce Stream"
GENERAL_STREAM = "General Stream"
VOCATIONAL_STREAM = "Vocational Stream"


def select_streams(
    subjects: Sequence[Subject],
    interests: Sequence[str],
    aps_score: int,
) -> List[str]:
    """
    Pick streams from subject scores and APS.

    Science needs both a math and a science subject at 60+ and APS 25+;
    commerce needs a business/economics subject at 60+ and APS 22+.
    Interest tags only add sub-foci to a stream that already qualified.
    """
    streams: List[str] = []

    math_score = first_score(subjects, "math")
    science_score = first_score(subjects, "science")
    commerce_score = first_score(subjects, "business", "economic")

    if (
        math_score >= STREAM_SUBJECT_MIN_SCORE
        and science_score >= STREAM_SUBJECT_MIN_SCORE
        and aps_score >= SCIENCE_STREAM_MIN_APS
    ):
        streams.append(SCIENCE_STREAM)
        if has_tag(interests, "Engineering"):
            streams.append("Engineering Focus")
        if has_tag(interests, "Technology"):
            streams.append("IT Focus")

    if commerce_score >= STREAM_SUBJECT_MIN_SCORE and aps_score >= COMMERCE_STREAM_MIN_APS:
        streams.append(COMMERCE_STREAM)
        if has_tag(interests, "Business"):
            streams.append("Business Management")

    if not streams:
        streams = [GENERAL_STREAM, VOCATIONAL_STREAM]

    return streams


def schools_for_streams(streams: Sequence[str]) -> List[School]:
    """Schools are derived from the stream names alone; the technical school is always offered."""
    schools: List[School] = []

    if any("Science" in s or "Engineering" in s for s in streams):
        schools.append(SCIENCE_SCHOOL)

    if any("Commerce" in s or "Business" in s for s in streams):
        schools.append(COMMERCE_SCHOOL)

    schools.append(TECHNICAL_SCHOOL)
    return schools


def recommend_streams(
    subjects: Sequence[Subject],
    interests: Sequence[str],
    aps_score: int,
) -> Recommendation:
    streams = select_streams(subjects, interests, aps_score)
    return Recommendation(
        title="Stream Recommendations",
        description="Recommended academic streams based on your performance",
        type=RecommendationType.STREAM_RECOMMENDATION,
        requirements=streams,
        schools=schools_for_streams(streams),
    )


def recommend_schools(schools: Sequence[School]) -> Recommendation:
    return Recommendation(
        title="Recommended Schools",
        description="Schools offering your recommended streams in your area",
        type=RecommendationType.STREAM_RECOMMENDATION,
        schools=list(schools),
    )
