from __future__ import annotations

from careermentor.types import (
    CompletionSignal,
    Profile,
    ProgressReply,
    ProgressStatus,
    Reconciliation,
)

INITIAL_STATUS: ProgressStatus = "not_started"


def status_after_recommendation() -> ProgressStatus:
    return "in_progress"


def next_progress_status(signal: CompletionSignal) -> ProgressStatus:
    # A completed month keeps the multi-month roadmap active; it does not finish it.
    if signal.is_completed:
        return "in_progress"
    return "needs_help"


def reconcile(profile: Profile, signal: CompletionSignal, reply: ProgressReply) -> Reconciliation:
    roadmap = reply.roadmap
    if not roadmap or not roadmap.strip():
        roadmap = profile.roadmap
    return Reconciliation(status=next_progress_status(signal), roadmap=roadmap)
