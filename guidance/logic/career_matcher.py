"""
Career Matcher

Career guidance rules:
- Grade 9: careers suggested from strong subjects crossed with interests,
  plus a skills-development list for weak subjects
- Grades 11-12: APS-tiered career pathways filtered by interests and skills
"""

from typing import List, Sequence

from .constants import (
    HIGH_DEMAND_MIN_APS,
    MAX_UNFILTERED_CAREERS,
    MEDIUM_DEMAND_MIN_APS,
    STRONG_SUBJECT_SCORE,
    WEAK_SUBJECT_SCORE,
)
from .contracts import Career, Recommendation, RecommendationType, Subject
from .matching import any_subject_contains, has_any_tag
from .pathways import (
    DEFAULT_CAREERS,
    HIGH_DEMAND_CAREERS,
    MARKETING_MANAGER,
    MEDICAL_DOCTOR,
    MEDIUM_DEMAND_CAREERS,
    SOFTWARE_DEVELOPER,
    VOCATIONAL_CAREERS,
)


def strong_subjects(subjects: Sequence[Subject]) -> List[Subject]:
    return [s for s in subjects if s.score >= STRONG_SUBJECT_SCORE]


def weak_subjects(subjects: Sequence[Subject]) -> List[Subject]:
    return [s for s in subjects if s.score < WEAK_SUBJECT_SCORE]


def recommend_exploration_careers(
    strong: Sequence[Subject],
    interests: Sequence[str],
) -> Recommendation:
    """
    Grade 9 career exploration.

    Each subject-strength signal only counts when backed by a matching
    interest: math -> tech/engineering, science -> healthcare,
    language -> business/education. No signal falls back to the default pair.
    """
    careers: List[Career] = []

    if any_subject_contains(strong, "math") and has_any_tag(interests, "Technology", "Engineering"):
        careers.append(SOFTWARE_DEVELOPER)

    if any_subject_contains(strong, "science") and has_any_tag(interests, "Healthcare", "Science"):
        careers.append(MEDICAL_DOCTOR)

    if any_subject_contains(strong, "english", "language") and has_any_tag(interests, "Business", "Education"):
        careers.append(MARKETING_MANAGER)

    if not careers:
        careers = list(DEFAULT_CAREERS)

    return Recommendation(
        title="Career Pathways",
        description=f"Based on your strengths in {len(strong)} subjects and interests",
        type=RecommendationType.CAREER_GUIDANCE,
        careers=careers,
    )


def recommend_skills_development(weak: Sequence[Subject]) -> Recommendation:
    return Recommendation(
        title="Skills Development Focus",
        description="Consider focusing on these areas for improvement:",
        type=RecommendationType.CAREER_GUIDANCE,
        requirements=[f"Improve {s.name} (current: {s.score}%)" for s in weak],
    )


def career_tier(aps_score: int) -> List[Career]:
    """Candidate careers for an APS score, best tier the score reaches."""
    if aps_score >= HIGH_DEMAND_MIN_APS:
        return list(HIGH_DEMAND_CAREERS)
    if aps_score >= MEDIUM_DEMAND_MIN_APS:
        return list(MEDIUM_DEMAND_CAREERS)
    return list(VOCATIONAL_CAREERS)


def career_matches(career: Career, interests: Sequence[str], skills: Sequence[str]) -> bool:
    """Title names an interest, or the career needs a skill the student has."""
    title = career.title.lower()
    if any(interest.lower() in title for interest in interests):
        return True
    selected = {skill.lower() for skill in skills}
    return any(skill.lower() in selected for skill in career.skills_needed)


def recommend_career_pathways(
    aps_score: int,
    interests: Sequence[str],
    skills: Sequence[str],
    max_unfiltered: int = MAX_UNFILTERED_CAREERS,
) -> Recommendation:
    """
    Grades 11-12 career pathways.

    If no career in the tier matches the student's interests or skills, the
    unfiltered top of the tier is shown instead of an empty list.
    """
    careers = career_tier(aps_score)
    filtered = [c for c in careers if career_matches(c, interests, skills)]

    return Recommendation(
        title="Career Pathways",
        description="High-demand careers matching your profile",
        type=RecommendationType.CAREER_GUIDANCE,
        careers=filtered if filtered else careers[:max_unfiltered],
    )
