"""Reduce loosely structured webhook bodies to stable internal values.

The upstream workflow is free to answer with a JSON object or with plain
markdown. JSON is read opportunistically; anything that does not parse is
kept verbatim as the roadmap text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from careermentor.errors import EmptyResponse, MissingRoadmap
from careermentor.types import (
    DEFAULT_CAREER_PATH,
    DEFAULT_PROGRESS_MESSAGE,
    NormalizedResponse,
    ProgressReply,
)

ROADMAP_FIELDS: tuple[str, ...] = ("roadmap", "roadmap_text", "result")
PROGRESS_ROADMAP_FIELDS: tuple[str, ...] = ("roadmap", "roadmap_text")
PROGRESS_MESSAGE_FIELDS: tuple[str, ...] = ("message", "feedback")


@dataclass(frozen=True, slots=True)
class Structured:
    value: Any

    def field(self, name: str) -> Any:
        if isinstance(self.value, dict):
            return self.value.get(name)
        return None


@dataclass(frozen=True, slots=True)
class Unstructured:
    text: str


ParsedBody = Structured | Unstructured


def decode_body(raw_body: str | bytes | None) -> str:
    if raw_body is None:
        return ""
    if isinstance(raw_body, bytes):
        return raw_body.decode("utf-8", errors="replace")
    return raw_body


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_body(raw_body: str) -> ParsedBody:
    try:
        return Structured(json.loads(raw_body, parse_constant=_reject_constant))
    except ValueError:
        return Unstructured(raw_body)


def first_present(parsed: Structured, fields: tuple[str, ...]) -> str | None:
    for name in fields:
        value = parsed.field(name)
        if value:
            return as_text(value)
    return None


def as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, indent=2)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def normalize(raw_body: str | bytes | None) -> NormalizedResponse:
    text = decode_body(raw_body)
    if is_blank(text):
        raise EmptyResponse("AI returned empty response")

    parsed = parse_body(text)
    match parsed:
        case Structured():
            roadmap = first_present(parsed, ROADMAP_FIELDS) or ""
            career_path = first_present(parsed, ("career_path",)) or DEFAULT_CAREER_PATH
            message = first_present(parsed, ("message",)) or ""
        case Unstructured(text=body):
            roadmap = body
            career_path = DEFAULT_CAREER_PATH
            message = ""

    if is_blank(roadmap):
        raise MissingRoadmap("AI roadmap missing")

    return NormalizedResponse(career_path=career_path, roadmap=roadmap, message=message)


def extract_progress_reply(raw_body: str | bytes | None) -> ProgressReply:
    """Read a progress-update reply; an empty or roadmap-less body is not an error."""
    text = decode_body(raw_body)
    if is_blank(text):
        return ProgressReply()

    parsed = parse_body(text)
    match parsed:
        case Structured():
            return ProgressReply(
                roadmap=first_present(parsed, PROGRESS_ROADMAP_FIELDS),
                message=first_present(parsed, PROGRESS_MESSAGE_FIELDS) or DEFAULT_PROGRESS_MESSAGE,
            )
        case Unstructured(text=body):
            return ProgressReply(roadmap=body)
