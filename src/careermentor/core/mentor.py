from __future__ import annotations

import logging
from typing import Any

from careermentor.core.normalizer import extract_progress_reply, normalize
from careermentor.core.profiles import missing_recommendation_fields, validate_submission
from careermentor.core.reconciler import INITIAL_STATUS, reconcile, status_after_recommendation
from careermentor.core.webhook import WebhookClient
from careermentor.db.store import ProfileStore
from careermentor.errors import NotFound, StoreError, ValidationError, WebhookNotConfigured
from careermentor.types import (
    CareerRecommendation,
    CompletionSignal,
    Profile,
    ProgressUpdate,
)

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


class MentorService:
    def __init__(self, store: ProfileStore, webhook: WebhookClient):
        self.store = store
        self.webhook = webhook

    def submit_profile(self, values: dict[str, Any]) -> tuple[Profile, bool]:
        """Create or update the profile for an email. Returns ``(profile, created)``."""
        submission = validate_submission(values)

        existing = self.store.get(submission.email)
        fields = submission.model_dump(exclude={"email"})
        if existing is not None:
            profile = self.store.update(submission.email, fields)
            if profile is None:
                raise StoreError("profile disappeared during update")
            logger.info("Updated profile for %s", submission.email)
            return profile, False

        profile = self.store.insert(
            {"email": submission.email, **fields, "progress_status": INITIAL_STATUS}
        )
        logger.info("Created profile for %s", submission.email)
        return profile, True

    def get_profile(self, email: str) -> Profile:
        profile = self.store.get(email)
        if profile is None:
            raise NotFound("Profile not found")
        return profile

    def recommend_career(self, email: str | None) -> CareerRecommendation:
        logger.info("Career recommendation requested for %s", email)
        if not email:
            raise ValidationError("Email is required")

        profile = self.get_profile(email)
        if missing_recommendation_fields(profile):
            raise ValidationError("Profile is incomplete. Please update your profile.")

        payload = {
            "email": profile.email,
            "branch": profile.branch,
            "year": profile.year,
            "interest": profile.interest,
            "daily_time": profile.daily_time,
            "current_status": profile.progress_status or INITIAL_STATUS,
        }
        raw_body = self.webhook.post(payload)
        logger.info("Raw AI response preview: %s", raw_body[:PREVIEW_CHARS])

        normalized = normalize(raw_body)
        self._persist_quietly(
            email,
            {
                "career_path": normalized.career_path,
                "roadmap": normalized.roadmap,
                "progress_status": status_after_recommendation(),
            },
        )
        return CareerRecommendation(**normalized.model_dump())

    def update_progress(self, email: str | None, signal: CompletionSignal) -> ProgressUpdate:
        if not email:
            raise ValidationError("Email is required")

        profile = self.store.get(email)
        if profile is None:
            raise NotFound("Profile not found. Please create a profile first.")

        if not self.webhook.configured:
            raise WebhookNotConfigured("n8n webhook URL not configured")

        payload = {
            "email": profile.email,
            "branch": profile.branch,
            "year": profile.year,
            "interest": profile.interest,
            "daily_time": profile.daily_time,
            "current_roadmap": profile.roadmap or "",
            "month_completed": signal.month_completed,
            "is_completed": signal.is_completed,
            "progress_status": profile.progress_status or "in_progress",
            "action": "progress_update",
        }
        reply = extract_progress_reply(self.webhook.post(payload))

        result = reconcile(profile, signal, reply)
        self._persist_quietly(email, result.update_values())
        return ProgressUpdate(message=reply.message, roadmap=result.roadmap, progress_status=result.status)

    def _persist_quietly(self, email: str, values: dict[str, Any]) -> None:
        # The computed result is still returned when the write fails.
        try:
            self.store.update(email, values)
        except StoreError as exc:
            logger.error("Failed to update profile %s: %s (%s)", email, exc.message, exc.details)
