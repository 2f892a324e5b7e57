"""
APS Calculator

Converts subject percentages into an Admission Point Score.
"""

from typing import Iterable, List, Tuple

from .constants import APS_BANDS, APS_FLOOR_POINTS
from .contracts import Subject


def points_for_score(score: int) -> int:
    """Band points for one percentage (1-7; never 0)."""
    for minimum, points in APS_BANDS:
        if score >= minimum:
            return points
    return APS_FLOOR_POINTS


def compute_aps(subjects: Iterable[Subject]) -> int:
    """
    Sum band points over all subjects.

    Args:
        subjects: Subjects with 0-100 scores (validated by the caller)

    Returns:
        APS total, 0 for no subjects
    """
    return sum(points_for_score(subject.score) for subject in subjects)


def subject_points(subjects: Iterable[Subject]) -> List[Tuple[str, int]]:
    """Per-subject breakdown, in input order."""
    return [(subject.name, points_for_score(subject.score)) for subject in subjects]
