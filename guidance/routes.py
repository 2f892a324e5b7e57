"""
Guidance API Routes

Exposes the parser, the APS calculator and the recommendation engine via REST API.
Stateless: every request carries everything the computation needs.
"""

from typing import List, Dict, Any
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from config import ENABLE_SYNTHETIC_FALLBACK, synthetic_rng
from .logic.aps_calculator import compute_aps, subject_points
from .logic.constants import ENGINE_VERSION
from .logic.engine import RecommendationEngine
from .logic.runner import InvalidManualScoreError, build_profile, validate_manual_entries
from .parsing.document_parser import DocumentParser


router = APIRouter(prefix="/guidance", tags=["guidance"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class ParseRequest(BaseModel):
    """Request body for document parsing."""
    text: str = Field(
        ...,
        description="Text already recognised from the report card",
        examples=["Mathematics 85%\nEnglish Home Language 72%\nLife Orientation 90%"],
    )


class SubjectEntry(BaseModel):
    """A manually entered subject result (score validated by the runner)."""
    name: str
    score: Any = None


class SubjectsRequest(BaseModel):
    """Request body for APS calculation."""
    subjects: List[SubjectEntry] = Field(default_factory=list)


class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    grade: int = Field(..., ge=9, le=12, description="School grade (9-12)")
    subjects: List[SubjectEntry] = Field(default_factory=list)
    interests: List[str] = Field(
        default_factory=list,
        examples=[["Engineering", "Technology"]],
    )
    skills: List[str] = Field(
        default_factory=list,
        examples=[["Problem Solving"]],
    )


def _validated_subjects(entries: List[SubjectEntry]):
    try:
        return validate_manual_entries(entry.model_dump() for entry in entries)
    except InvalidManualScoreError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/documents/parse", summary="Parse recognised report-card text")
def parse_document(request: ParseRequest):
    """
    Extract subjects and scores from recognised text.

    **Response:**
    - `subjects`: subject/score pairs (`is_synthesized` marks guessed scores)
    - `confidence`: 0.0-1.0 trust estimate
    - `error` / `error_kind`: set when nothing usable was found
    """
    parser = DocumentParser(rng=synthetic_rng(), enable_synthetic=ENABLE_SYNTHETIC_FALLBACK)
    result = parser.parse(request.text)
    return result.model_dump()


@router.post("/aps", summary="Calculate APS")
def calculate_aps(request: SubjectsRequest):
    """Compute the Admission Point Score with a per-subject breakdown."""
    subjects = _validated_subjects(request.subjects)
    return {
        "aps_score": compute_aps(subjects),
        "subject_points": [
            {"name": name, "points": points}
            for name, points in subject_points(subjects)
        ],
    }


@router.post("/recommendations", summary="Get grade-specific recommendations")
def get_recommendations(request: RecommendationRequest):
    """
    Generate recommendations for a student profile.

    **Request Body:**
    - `grade`: 9-12
    - `subjects`: subject names with 0-100 scores
    - `interests` / `skills`: selected tags

    **Response:**
    - `profile`: normalised profile including the computed APS
    - `recommendations`: career, stream, university and requirement records
    """
    subjects = _validated_subjects(request.subjects)

    try:
        profile = build_profile(request.grade, subjects, request.interests, request.skills)
        recommendations = RecommendationEngine().recommend_for_profile(profile)

        response_data: Dict[str, Any] = {
            "profile": profile.model_dump(),
            "recommendations": [r.model_dump() for r in recommendations],
            "count": len(recommendations),
            "engine_version": ENGINE_VERSION,
        }
        return response_data

    except Exception as e:
        import traceback
        return JSONResponse(
            status_code=500,
            content={"error": str(e), "trace": traceback.format_exc()}
        )


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Guidance engine health check")
def health_check():
    """Check if guidance engine is operational."""
    return {"status": "ok", "engine": "guidance", "version": ENGINE_VERSION}
