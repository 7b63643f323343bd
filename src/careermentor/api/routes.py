from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from careermentor.api.deps import get_mentor
from careermentor.api.schemas import (
    CareerRequest,
    CareerResponse,
    ProfileFetchResponse,
    ProfileSaveResponse,
    ProfileSubmitRequest,
    ProgressRequest,
    ProgressResponse,
)
from careermentor.core.mentor import MentorService
from careermentor.errors import (
    CareerMentorError,
    NotFound,
    StoreError,
    UpstreamUnavailable,
    ValidationError,
    WebhookNotConfigured,
)
from careermentor.types import CompletionSignal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def error_response(
    status_code: int,
    error: str,
    *,
    details: str | None = None,
    envelope: bool = False,
) -> JSONResponse:
    body: dict = {"success": False} if envelope else {}
    body["error"] = error
    if details is not None:
        body["details"] = details
    return JSONResponse(body, status_code=status_code)


@router.post("/profile", response_model=ProfileSaveResponse)
def save_profile(payload: ProfileSubmitRequest, mentor: MentorService = Depends(get_mentor)):
    try:
        profile, created = mentor.submit_profile(payload.model_dump())
    except ValidationError as exc:
        return error_response(exc.status_code, exc.message)
    except StoreError as exc:
        logger.error("Profile error: %s (%s)", exc.message, exc.details)
        return error_response(500, "Failed to save profile", details=exc.details or exc.message)

    return ProfileSaveResponse(
        message="Profile created successfully" if created else "Profile updated successfully",
        profile=profile.public_dict(),
    )


@router.get("/profile/{email}", response_model=ProfileFetchResponse)
def fetch_profile(email: str, mentor: MentorService = Depends(get_mentor)):
    try:
        profile = mentor.get_profile(email)
    except NotFound as exc:
        return error_response(exc.status_code, exc.message)
    except StoreError as exc:
        logger.error("Get profile error: %s (%s)", exc.message, exc.details)
        return error_response(500, "Failed to fetch profile", details=exc.details or exc.message)

    return ProfileFetchResponse(profile=profile.public_dict())


@router.post("/ai/career", response_model=CareerResponse)
def recommend_career(payload: CareerRequest, mentor: MentorService = Depends(get_mentor)):
    try:
        recommendation = mentor.recommend_career(payload.email)
    except (ValidationError, NotFound, UpstreamUnavailable) as exc:
        return error_response(exc.status_code, exc.message, envelope=True)
    except CareerMentorError as exc:
        logger.error("AI career error: %s (%s)", exc.message, exc.details)
        return error_response(500, "Failed to get career recommendation", envelope=True)
    except Exception:
        logger.exception("AI career error")
        return error_response(500, "Failed to get career recommendation", envelope=True)

    return CareerResponse(**recommendation.model_dump())


@router.post("/progress", response_model=ProgressResponse)
def update_progress(payload: ProgressRequest, mentor: MentorService = Depends(get_mentor)):
    signal = CompletionSignal(
        month_completed=payload.month_completed or None,
        is_completed=bool(payload.is_completed),
    )
    try:
        update = mentor.update_progress(payload.email, signal)
    except (ValidationError, NotFound, WebhookNotConfigured) as exc:
        return error_response(exc.status_code, exc.message)
    except CareerMentorError as exc:
        logger.error("Progress update error: %s (%s)", exc.message, exc.details)
        return error_response(500, "Failed to update progress", details=exc.details or exc.message)
    except Exception as exc:
        logger.exception("Progress update error")
        return error_response(500, "Failed to update progress", details=str(exc))

    return ProgressResponse(
        message=update.message,
        roadmap=update.roadmap,
        progress_status=update.progress_status,
        month_completed=payload.month_completed,
    )
