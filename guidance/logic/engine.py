"""
Recommendation Engine

Main orchestrator that dispatches a profile to the grade-specific rule chain.
This is the primary entry point for generating recommendations.
"""

import logging
from typing import List, Sequence

from .constants import ENGINE_VERSION
from .contracts import Recommendation, StudentProfile, Subject
from .career_matcher import (
    recommend_career_pathways,
    recommend_exploration_careers,
    recommend_skills_development,
    strong_subjects,
    weak_subjects,
)
from .stream_selector import recommend_schools, recommend_streams
from .university_matcher import recommend_admission_requirements, recommend_universities

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Deterministic, grade-driven recommendation engine.

    Pipeline per grade:
    - Grade 9: career exploration (strong subjects) + skills focus (weak subjects)
    - Grade 10: stream recommendation + schools for those streams
    - Grades 11-12: university pathways + career pathways + admission requirements

    The engine holds no state between calls; identical inputs always give
    identical output.
    """

    def __init__(self):
        self.version = ENGINE_VERSION

    def generate(
        self,
        grade: int,
        subjects: Sequence[Subject],
        aps_score: int,
        interests: Sequence[str] = (),
        skills: Sequence[str] = (),
    ) -> List[Recommendation]:
        """
        Generate recommendations for one student.

        Args:
            grade: School grade (9-12)
            subjects: Subjects with validated scores
            aps_score: APS computed from ``subjects``
            interests: Selected interest tags
            skills: Selected skill tags

        Returns:
            List of Recommendation records, empty for unsupported grades
        """
        recommendations: List[Recommendation] = []

        if grade == 9:
            strong = strong_subjects(subjects)
            weak = weak_subjects(subjects)
            if strong:
                recommendations.append(recommend_exploration_careers(strong, interests))
            if weak:
                recommendations.append(recommend_skills_development(weak))

        elif grade == 10:
            streams = recommend_streams(subjects, interests, aps_score)
            recommendations.append(streams)
            recommendations.append(recommend_schools(streams.schools))

        elif grade in (11, 12):
            recommendations.append(recommend_universities(aps_score, interests))
            recommendations.append(recommend_career_pathways(aps_score, interests, skills))
            recommendations.append(recommend_admission_requirements(aps_score))

        else:
            logger.warning(f"⚠️ Unsupported grade {grade}; no recommendations generated")
            return recommendations

        logger.info(
            f"🎯 Grade {grade}: {len(recommendations)} recommendations "
            f"(APS {aps_score}, {len(subjects)} subjects)"
        )
        return recommendations

    def recommend_for_profile(self, profile: StudentProfile) -> List[Recommendation]:
        """Generate recommendations straight from a profile snapshot."""
        return self.generate(
            grade=profile.grade,
            subjects=profile.subjects,
            aps_score=profile.aps_score,
            interests=profile.selected_interests,
            skills=profile.selected_skills,
        )


# Convenience function for simple usage
def generate_recommendations(
    grade: int,
    subjects: Sequence[Subject],
    aps_score: int,
    interests: Sequence[str] = (),
    skills: Sequence[str] = (),
) -> List[Recommendation]:
    """
    Convenience function to get recommendations.

    Returns:
        List of Recommendation records
    """
    engine = RecommendationEngine()
    return engine.generate(grade, subjects, aps_score, interests, skills)
