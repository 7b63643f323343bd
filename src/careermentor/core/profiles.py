from __future__ import annotations

from typing import Any

from careermentor.errors import ValidationError
from careermentor.types import (
    MAX_DAILY_TIME,
    MAX_YEAR,
    MIN_DAILY_TIME,
    MIN_YEAR,
    VALID_BRANCHES,
    VALID_INTERESTS,
    Profile,
    ProfileSubmission,
)

SUBMISSION_FIELDS: tuple[str, ...] = ("email", "branch", "year", "interest", "daily_time")
RECOMMENDATION_FIELDS: tuple[str, ...] = ("branch", "year", "interest", "daily_time")


def validate_submission(values: dict[str, Any]) -> ProfileSubmission:
    if any(not values.get(name) for name in SUBMISSION_FIELDS):
        raise ValidationError(f"Missing required fields: {', '.join(SUBMISSION_FIELDS)}")

    if values["branch"] not in VALID_BRANCHES:
        raise ValidationError("Invalid branch. Must be CSE, IT, or Other")

    if not MIN_YEAR <= values["year"] <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")

    if values["interest"] not in VALID_INTERESTS:
        raise ValidationError(f"Invalid interest. Must be one of: {', '.join(VALID_INTERESTS)}")

    if not MIN_DAILY_TIME <= values["daily_time"] <= MAX_DAILY_TIME:
        raise ValidationError(
            f"Daily study time must be between {MIN_DAILY_TIME} and {MAX_DAILY_TIME} minutes"
        )

    return ProfileSubmission(**{name: values[name] for name in SUBMISSION_FIELDS})


def missing_recommendation_fields(profile: Profile) -> list[str]:
    # Zero is a usable value; only absent or empty fields count as missing.
    missing = []
    for name in RECOMMENDATION_FIELDS:
        value = getattr(profile, name)
        if value is None or value == "":
            missing.append(name)
    return missing
