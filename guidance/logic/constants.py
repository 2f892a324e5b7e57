"""
Guidance Engine Constants

Defines the APS band table, parser thresholds, recommendation gates and the
fixed option lists used by the guidance engine.
All values are deterministic with no AI/ML components.
"""

from typing import Dict, List, Tuple

# =============================================================================
# APS BANDS
# =============================================================================

# (minimum score, points) checked from highest to lowest
APS_BANDS: List[Tuple[int, int]] = [
    (80, 7),   # Outstanding achievement
    (70, 6),   # Meritorious achievement
    (60, 5),   # Substantial achievement
    (50, 4),   # Adequate achievement
    (40, 3),   # Moderate achievement
    (30, 2),   # Elementary achievement
]
APS_FLOOR_POINTS = 1  # Anything below 30% still earns a point

# =============================================================================
# PARSER THRESHOLDS
# =============================================================================

MIN_TEXT_LENGTH = 10        # Below this no extraction is attempted
MIN_LINE_LENGTH = 3         # Shorter lines are OCR noise

SCORE_MIN = 0
SCORE_MAX = 100

# Bare numbers outside this range are subject codes, years, page numbers...
PLAUSIBLE_SCORE_RANGE: Tuple[int, int] = (30, 100)

# Scores inside this band count as "realistic" for confidence scoring
REALISTIC_SCORE_RANGE: Tuple[int, int] = (30, 95)

# (minimum subject count, multiplier) checked from highest to lowest
CONFIDENCE_SIZE_FACTORS: List[Tuple[int, float]] = [
    (6, 0.9),   # Most of a report card
    (4, 0.7),
    (2, 0.5),
]
CONFIDENCE_SIZE_FLOOR = 0.3  # Single subject

# Applied once when any score had to be guessed
SYNTHETIC_CONFIDENCE_PENALTY = 0.5

# Inclusive ranges used when a subject is found but no score was recognised
SYNTHETIC_SCORE_RANGES: Dict[str, Tuple[int, int]] = {
    "Mathematics": (65, 85),
    "English Home Language": (70, 90),
    "First Additional Language": (60, 80),
    "Natural Sciences": (65, 85),
    "Social Sciences": (60, 80),
    "Technology": (70, 90),
    "Life Orientation": (75, 95),
    "Economic Management Sciences": (60, 80),
    "Creative Arts": (70, 90),
}
DEFAULT_SYNTHETIC_RANGE: Tuple[int, int] = (50, 80)

# =============================================================================
# RECOMMENDATION THRESHOLDS
# =============================================================================

STRONG_SUBJECT_SCORE = 70
WEAK_SUBJECT_SCORE = 50

# Grade 10 stream gates
STREAM_SUBJECT_MIN_SCORE = 60
SCIENCE_STREAM_MIN_APS = 25
COMMERCE_STREAM_MIN_APS = 22

# Grade 11-12 career tiers
HIGH_DEMAND_MIN_APS = 40
MEDIUM_DEMAND_MIN_APS = 30
MAX_UNFILTERED_CAREERS = 3

# Below this APS the admission checklist gets advisory lines
ADVISORY_APS_THRESHOLD = 30

# =============================================================================
# PROFILE OPTIONS
# =============================================================================

AVAILABLE_INTERESTS = [
    "Technology",
    "Engineering",
    "Healthcare",
    "Business",
    "Arts",
    "Science",
    "Education",
    "Sports",
]

AVAILABLE_SKILLS = [
    "Problem Solving",
    "Communication",
    "Leadership",
    "Creativity",
    "Analytical Thinking",
    "Teamwork",
]

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_GRADE = 9
SUPPORTED_GRADES = (9, 10, 11, 12)
ENGINE_VERSION = "1.0.0"
