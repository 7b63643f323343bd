from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ProfileSubmitRequest(BaseModel):
    # Presence and ranges are checked by the profile validator so that every
    # failure carries the same error messages.
    email: str | None = None
    branch: str | None = None
    year: int | None = None
    interest: str | None = None
    daily_time: int | None = None


class ProfileSaveResponse(BaseModel):
    message: str
    profile: dict[str, Any]


class ProfileFetchResponse(BaseModel):
    profile: dict[str, Any]


class CareerRequest(BaseModel):
    email: str | None = None


class CareerResponse(BaseModel):
    success: bool = True
    career_path: str
    roadmap: str
    message: str


class ProgressRequest(BaseModel):
    email: str | None = None
    month_completed: int | None = None
    is_completed: bool | None = None


class ProgressResponse(BaseModel):
    success: bool = True
    message: str
    roadmap: str | None
    progress_status: str
    month_completed: int | None
