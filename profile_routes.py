"""
Profile API Routes

Endpoints to build up and fetch the current student profile.
State lives in the process-local ProfileStore; nothing is persisted.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import List

from config import ENABLE_SYNTHETIC_FALLBACK, synthetic_rng
from guidance.logic import runner
from guidance.logic.profile_store import profile_store
from guidance.parsing.document_parser import DocumentParser
from guidance.routes import SubjectEntry

router = APIRouter(prefix="/api/profile", tags=["profile"])


class DocumentPayload(BaseModel):
    grade: int = Field(..., ge=9, le=12)
    text: str


class SubjectsPayload(BaseModel):
    grade: int = Field(..., ge=9, le=12)
    subjects: List[SubjectEntry] = Field(default_factory=list)


class TagsPayload(BaseModel):
    values: List[str] = Field(default_factory=list)


# ─────────────────────────────────────────────
# GET /api/profile
# ─────────────────────────────────────────────
@router.get("", summary="Fetch current profile and recommendations")
def get_profile():
    return profile_store.snapshot.model_dump()


# ─────────────────────────────────────────────
# GET /api/profile/options
# ─────────────────────────────────────────────
@router.get("/options", summary="Selectable interests and skills")
def get_options():
    return {
        "interests": profile_store.available_interests,
        "skills": profile_store.available_skills,
    }


# ─────────────────────────────────────────────
# POST /api/profile/document
# ─────────────────────────────────────────────
@router.post("/document", summary="Apply recognised report-card text")
def apply_document(payload: DocumentPayload):
    """
    Parse the text and, if any subjects were found, replace the profile's
    subjects with them. The parse result is returned either way.
    """
    try:
        parser = DocumentParser(rng=synthetic_rng(), enable_synthetic=ENABLE_SYNTHETIC_FALLBACK)
        result = parser.parse(payload.text)
        snapshot = runner.apply_parse_result(profile_store.snapshot, result, payload.grade)
        profile_store.publish(snapshot)
        return snapshot.model_dump()

    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Profile update failed: {str(e)}"},
        )


# ─────────────────────────────────────────────
# POST /api/profile/subjects
# ─────────────────────────────────────────────
@router.post("/subjects", summary="Apply manually entered subjects")
def apply_subjects(payload: SubjectsPayload):
    try:
        subjects = runner.validate_manual_entries(s.model_dump() for s in payload.subjects)
    except runner.InvalidManualScoreError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        snapshot = runner.apply_manual_subjects(profile_store.snapshot, payload.grade, subjects)
        profile_store.publish(snapshot)
        return snapshot.model_dump()

    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Profile update failed: {str(e)}"},
        )


# ─────────────────────────────────────────────
# PUT /api/profile/interests
# ─────────────────────────────────────────────
@router.put("/interests", summary="Replace selected interests")
def put_interests(payload: TagsPayload):
    try:
        snapshot = runner.update_interests(profile_store.snapshot, payload.values)
        profile_store.publish(snapshot)
        return snapshot.model_dump()

    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Profile update failed: {str(e)}"},
        )


# ─────────────────────────────────────────────
# PUT /api/profile/skills
# ─────────────────────────────────────────────
@router.put("/skills", summary="Replace selected skills")
def put_skills(payload: TagsPayload):
    try:
        snapshot = runner.update_skills(profile_store.snapshot, payload.values)
        profile_store.publish(snapshot)
        return snapshot.model_dump()

    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Profile update failed: {str(e)}"},
        )


# ─────────────────────────────────────────────
# DELETE /api/profile
# ─────────────────────────────────────────────
@router.delete("", summary="Clear profile")
def clear_profile():
    try:
        snapshot = profile_store.reset()
        return {"status": "ok", "message": "Profile cleared", "profile": snapshot.profile.model_dump()}

    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": f"Profile reset failed: {str(e)}"},
        )
