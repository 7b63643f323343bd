import pytest

from careermentor.core.reconciler import (
    INITIAL_STATUS,
    reconcile,
    status_after_recommendation,
)
from careermentor.types import CompletionSignal, Profile, ProgressReply


def _profile(roadmap: str | None = "## Month 1\nHTML") -> Profile:
    return Profile(
        email="asha@example.com",
        branch="CSE",
        year=2,
        interest="Web Dev",
        daily_time=45,
        roadmap=roadmap,
        progress_status="in_progress",
    )


@pytest.mark.parametrize("reply", [ProgressReply(), ProgressReply(roadmap="new"), ProgressReply(message="stuck?")])
def test_completed_month_keeps_roadmap_in_progress(reply) -> None:
    result = reconcile(_profile(), CompletionSignal(month_completed=1, is_completed=True), reply)
    assert result.status == "in_progress"


@pytest.mark.parametrize("reply", [ProgressReply(), ProgressReply(roadmap="new")])
def test_incomplete_month_needs_help(reply) -> None:
    result = reconcile(_profile(), CompletionSignal(month_completed=None, is_completed=False), reply)
    assert result.status == "needs_help"


def test_reply_roadmap_replaces_existing() -> None:
    result = reconcile(_profile(), CompletionSignal(is_completed=True), ProgressReply(roadmap="## Month 2"))
    assert result.roadmap == "## Month 2"


@pytest.mark.parametrize("roadmap", [None, "", "   "])
def test_blank_reply_roadmap_keeps_existing(roadmap) -> None:
    result = reconcile(_profile(), CompletionSignal(is_completed=True), ProgressReply(roadmap=roadmap))
    assert result.roadmap == "## Month 1\nHTML"


def test_update_values_never_carry_blank_roadmap() -> None:
    result = reconcile(_profile(roadmap=None), CompletionSignal(is_completed=False), ProgressReply())

    assert result.roadmap is None
    assert result.update_values() == {"progress_status": "needs_help"}


def test_status_constants() -> None:
    assert INITIAL_STATUS == "not_started"
    assert status_after_recommendation() == "in_progress"
