"""
Guidance Runner

Orchestrates profile updates:
1. Accepts parsed or manually entered subjects, or new interests/skills
2. Builds a fresh StudentProfile (APS always recomputed)
3. Runs the recommendation engine
4. Returns a GuidanceSnapshot

This is a pure orchestration layer - NO parsing, NO scoring rules, NO state.
Callers own the current snapshot and decide where to publish the new one.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..parsing.subject_catalog import SubjectCatalog, subject_catalog
from .aps_calculator import compute_aps
from .constants import DEFAULT_GRADE, SCORE_MAX, SCORE_MIN
from .contracts import (
    ExtractedSubject,
    GuidanceSnapshot,
    ParseResult,
    StudentProfile,
    Subject,
)
from .engine import RecommendationEngine

logger = logging.getLogger(__name__)


class InvalidManualScoreError(ValueError):
    """A manually entered score is missing, non-numeric or outside 0-100."""

    def __init__(self, subject: str, score: Any):
        self.subject = subject
        self.score = score
        super().__init__(f"Invalid score for {subject}: {score!r} (expected {SCORE_MIN}-{SCORE_MAX})")


def empty_profile() -> StudentProfile:
    return StudentProfile(grade=DEFAULT_GRADE)


def build_profile(
    grade: int,
    subjects: Iterable[Subject],
    interests: Sequence[str] = (),
    skills: Sequence[str] = (),
) -> StudentProfile:
    """
    Build a profile whose APS matches its subjects.

    Keeps the first subject per name, so the profile never holds two
    results for the same canonical subject.
    """
    unique: List[Subject] = []
    seen = set()
    for subject in subjects:
        if subject.name in seen:
            continue
        seen.add(subject.name)
        unique.append(subject)

    return StudentProfile(
        grade=grade,
        subjects=unique,
        selected_interests=list(interests),
        selected_skills=list(skills),
        aps_score=compute_aps(unique),
    )


def promote_extracted(
    extracted: Iterable[ExtractedSubject],
    catalog: SubjectCatalog = subject_catalog,
) -> List[Subject]:
    """Turn parser output into profile subjects; core status is assigned here."""
    return [
        Subject(name=e.name, score=e.score, is_core=catalog.is_core(e.name))
        for e in extracted
    ]


def validate_manual_entries(
    entries: Iterable[Mapping[str, Any]],
    catalog: SubjectCatalog = subject_catalog,
) -> List[Subject]:
    """
    Validate manually entered subjects.

    Names are canonicalised where the catalog knows them. Scores must be
    whole numbers within 0-100.

    Raises:
        InvalidManualScoreError: on the first out-of-range or unreadable score
    """
    subjects: List[Subject] = []
    for entry in entries:
        raw_name = str(entry.get("name", "")).strip()
        score = entry.get("score")

        if isinstance(score, bool) or not isinstance(score, int) or not SCORE_MIN <= score <= SCORE_MAX:
            raise InvalidManualScoreError(raw_name, score)

        name = catalog.canonicalize(raw_name) or raw_name
        subjects.append(Subject(name=name, score=score, is_core=catalog.is_core(name)))
    return subjects


def _snapshot(
    profile: StudentProfile,
    engine: RecommendationEngine,
    analysis: Optional[ParseResult] = None,
) -> GuidanceSnapshot:
    return GuidanceSnapshot(
        profile=profile,
        recommendations=engine.recommend_for_profile(profile),
        analysis=analysis,
    )


def apply_parse_result(
    current: GuidanceSnapshot,
    result: ParseResult,
    grade: int,
    engine: Optional[RecommendationEngine] = None,
) -> GuidanceSnapshot:
    """
    Accept a document parse into the profile.

    A failed parse leaves the profile and recommendations untouched and only
    records the analysis, so a bad scan never wipes existing subjects.
    """
    engine = engine or RecommendationEngine()

    if not result.subjects:
        logger.warning(f"⚠️ Parse result not applied: {result.error}")
        return current.model_copy(update={"analysis": result})

    if result.has_synthesized_scores:
        logger.warning("⚠️ Applying parse result with synthesized scores")

    old = current.profile
    profile = build_profile(
        grade,
        promote_extracted(result.subjects),
        old.selected_interests,
        old.selected_skills,
    )
    logger.info(f"📦 Profile updated from document: {len(profile.subjects)} subjects, APS {profile.aps_score}")
    return _snapshot(profile, engine, analysis=result)


def apply_manual_subjects(
    current: GuidanceSnapshot,
    grade: int,
    subjects: Sequence[Subject],
    engine: Optional[RecommendationEngine] = None,
) -> GuidanceSnapshot:
    """Replace the profile's subjects with manually entered ones."""
    engine = engine or RecommendationEngine()
    old = current.profile
    profile = build_profile(grade, subjects, old.selected_interests, old.selected_skills)
    logger.info(f"📦 Profile updated manually: {len(profile.subjects)} subjects, APS {profile.aps_score}")
    return _snapshot(profile, engine, analysis=current.analysis)


def update_interests(
    current: GuidanceSnapshot,
    interests: Sequence[str],
    engine: Optional[RecommendationEngine] = None,
) -> GuidanceSnapshot:
    engine = engine or RecommendationEngine()
    old = current.profile
    profile = build_profile(old.grade, old.subjects, interests, old.selected_skills)
    return _snapshot(profile, engine, analysis=current.analysis)


def update_skills(
    current: GuidanceSnapshot,
    skills: Sequence[str],
    engine: Optional[RecommendationEngine] = None,
) -> GuidanceSnapshot:
    engine = engine or RecommendationEngine()
    old = current.profile
    profile = build_profile(old.grade, old.subjects, old.selected_interests, skills)
    return _snapshot(profile, engine, analysis=current.analysis)


def clear() -> GuidanceSnapshot:
    """Fresh session state: grade 9, no subjects, no recommendations."""
    return GuidanceSnapshot(profile=empty_profile(), recommendations=[], analysis=None)
