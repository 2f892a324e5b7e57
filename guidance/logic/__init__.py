"""
Guidance Logic Module

Provides the APS calculator and the deterministic recommendation engine.
"""

from .contracts import (
    Subject,
    StudentProfile,
    ExtractedSubject,
    ParseResult,
    ParseErrorKind,
    Recommendation,
    RecommendationType,
    Career,
    University,
    School,
    AdmissionStatus,
    GuidanceSnapshot,
)
from .aps_calculator import compute_aps, points_for_score
from .engine import RecommendationEngine, generate_recommendations
from .runner import InvalidManualScoreError, build_profile
from .profile_store import ProfileStore, profile_store

__all__ = [
    # Main engine
    "RecommendationEngine",
    "generate_recommendations",
    "compute_aps",
    "points_for_score",

    # Orchestration
    "InvalidManualScoreError",
    "build_profile",
    "ProfileStore",
    "profile_store",

    # Contracts
    "Subject",
    "StudentProfile",
    "ExtractedSubject",
    "ParseResult",
    "Recommendation",
    "Career",
    "University",
    "School",
    "GuidanceSnapshot",

    # Enums
    "ParseErrorKind",
    "RecommendationType",
    "AdmissionStatus",
]
