from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

Branch = Literal["CSE", "IT", "Other"]
ProgressStatus = Literal["not_started", "in_progress", "needs_help"]

VALID_BRANCHES: tuple[str, ...] = ("CSE", "IT", "Other")
VALID_INTERESTS: tuple[str, ...] = (
    "Web Dev",
    "Data",
    "AI",
    "Govt",
    "Software Engineering",
    "Cybersecurity",
    "Cloud Computing",
    "DevOps Engineering",
    "Mobile App Development",
)
MIN_YEAR, MAX_YEAR = 1, 4
MIN_DAILY_TIME, MAX_DAILY_TIME = 30, 60

DEFAULT_CAREER_PATH = "Recommended Career Path"
DEFAULT_PROGRESS_MESSAGE = "Progress updated successfully"


class Profile(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int | None = None
    email: str
    branch: str | None = None
    year: int | None = None
    interest: str | None = None
    daily_time: int | None = None
    career_path: str | None = None
    roadmap: str | None = None
    progress_status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def public_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ProfileSubmission(BaseModel):
    email: str
    branch: Branch
    year: int
    interest: str
    daily_time: int


class NormalizedResponse(BaseModel):
    career_path: str
    roadmap: str
    message: str = ""


class ProgressReply(BaseModel):
    roadmap: str | None = None
    message: str = DEFAULT_PROGRESS_MESSAGE


class CompletionSignal(BaseModel):
    month_completed: int | None = None
    is_completed: bool = False


class Reconciliation(BaseModel):
    status: ProgressStatus
    roadmap: str | None = None

    def update_values(self) -> dict[str, Any]:
        values: dict[str, Any] = {"progress_status": self.status}
        if self.roadmap and self.roadmap.strip():
            values["roadmap"] = self.roadmap
        return values


class CareerRecommendation(BaseModel):
    career_path: str
    roadmap: str
    message: str


class ProgressUpdate(BaseModel):
    message: str
    roadmap: str | None
    progress_status: ProgressStatus
