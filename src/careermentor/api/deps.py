from __future__ import annotations

from fastapi import Request

from careermentor.core.mentor import MentorService


def get_mentor(request: Request) -> MentorService:
    return MentorService(request.app.state.store, request.app.state.webhook)
