from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidInput

TITLE_MAX_CHARS = 100
DESCRIPTION_MAX_CHARS = 500
HASHTAG_COUNT = 5
MAX_VIRAL_SCORE = 10


@dataclass(frozen=True, slots=True)
class TranscriptSegment:
    text: str
    offset_millis: float
    duration_millis: float

    @property
    def start_sec(self) -> float:
        return self.offset_millis / 1000

    @property
    def end_sec(self) -> float:
        return self.offset_millis / 1000 + self.duration_millis / 1000


@dataclass(slots=True)
class WindowScores:
    hook: int
    emotional: int
    clarity: int

    @property
    def total(self) -> int:
        return self.hook + self.emotional + self.clarity


@dataclass(slots=True)
class ClipCandidate:
    start_sec: float
    end_sec: float
    transcript_text: str
    hook_score: int
    emotional_score: int
    clarity_score: int

    @property
    def total_score(self) -> int:
        return self.hook_score + self.emotional_score + self.clarity_score

    @property
    def duration(self) -> float:
        return max(0.0, self.end_sec - self.start_sec)


@dataclass(slots=True)
class Captions:
    title: str
    description: str
    hashtags: list[str] = field(default_factory=list)
    source: str = "local"


@dataclass(slots=True)
class EnhancedClip:
    title: str
    description: str
    hashtags: list[str]
    start_sec: float
    end_sec: float
    transcript_text: str
    viral_score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "hashtags": list(self.hashtags),
            "start_sec": self.start_sec,
            "end_sec": self.end_sec,
            "transcript_text": self.transcript_text,
            "viral_score": self.viral_score,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> EnhancedClip:
        if not isinstance(payload, dict):
            raise InvalidInput("Clip payload must be a JSON object")
        missing = [key for key in ("title", "start_sec", "end_sec") if key not in payload]
        if missing:
            raise InvalidInput(f"Clip payload is missing: {', '.join(missing)}")

        hashtags = payload.get("hashtags") or []
        if not isinstance(hashtags, list):
            raise InvalidInput("Clip hashtags must be a list")
        try:
            start_sec = float(payload["start_sec"])
            end_sec = float(payload["end_sec"])
            viral_score = int(payload.get("viral_score", 0))
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Clip payload has a non-numeric field: {exc}") from exc
        if end_sec <= start_sec:
            raise InvalidInput("Clip end_sec must be after start_sec")

        return cls(
            title=str(payload["title"])[:TITLE_MAX_CHARS],
            description=str(payload.get("description") or "")[:DESCRIPTION_MAX_CHARS],
            hashtags=[str(tag) for tag in hashtags][:HASHTAG_COUNT],
            start_sec=start_sec,
            end_sec=end_sec,
            transcript_text=str(payload.get("transcript_text") or ""),
            viral_score=min(MAX_VIRAL_SCORE, max(0, viral_score)),
        )


@dataclass(slots=True)
class UploadPlan:
    video_id: str
    clip: EnhancedClip
    steps: list[str]
    commands: dict[str, str]
    youtube_metadata: dict[str, Any]
    ready_for_upload: bool
    message: str
    status: str = "ready"
    setup_guide: str = ""
    note: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "status": self.status,
            "video_id": self.video_id,
            "clip": self.clip.to_dict(),
            "steps": list(self.steps),
            "commands": dict(self.commands),
            "youtube_metadata": dict(self.youtube_metadata),
            "ready_for_upload": self.ready_for_upload,
            "message": self.message,
        }
        if self.setup_guide:
            payload["setup_guide"] = self.setup_guide
        if self.note:
            payload["note"] = self.note
        return payload
