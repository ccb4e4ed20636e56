from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class ScanConfig:
    window_size: int = 20
    stride: int = 5
    min_clip_sec: float = 15.0
    max_clip_sec: float = 60.0
    top_k: int = 5
    score_threshold: int = 3


@dataclass(slots=True)
class CaptionConfig:
    primary: str = "openai"
    fallback: str = "gemini"
    request_timeout_sec: float = 30.0
    parallelism: int = 5
    title_max_chars: int = 100
    description_max_chars: int = 500
    hashtag_count: int = 5
    openai_model: str = "gpt-3.5-turbo"
    openai_api_key: str = ""
    gemini_model: str = "gemini-pro"
    gemini_api_key: str = ""


@dataclass(slots=True)
class TranscriptConfig:
    languages: list[str] = field(default_factory=lambda: ["en"])


@dataclass(slots=True)
class UploadConfig:
    max_height: int = 1080
    category_id: str = "22"
    privacy_status: str = "public"
    google_client_id: str = ""
    google_client_secret: str = ""


@dataclass(slots=True)
class Settings:
    scan: ScanConfig
    captions: CaptionConfig
    transcript: TranscriptConfig
    upload: UploadConfig
    root_dir: Path


def load_settings(root_dir: Path) -> Settings:
    config_path = root_dir / "config" / "default.toml"
    raw: dict = {}
    if config_path.exists():
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)

    scan = raw.get("scan", {})
    captions = raw.get("captions", {})
    transcript = raw.get("transcript", {})
    upload = raw.get("upload", {})

    return Settings(
        scan=ScanConfig(
            window_size=max(1, int(scan.get("window_size", 20))),
            stride=max(1, int(scan.get("stride", 5))),
            min_clip_sec=float(scan.get("min_clip_sec", 15)),
            max_clip_sec=float(scan.get("max_clip_sec", 60)),
            top_k=max(1, int(scan.get("top_k", 5))),
            score_threshold=int(scan.get("score_threshold", 3)),
        ),
        captions=CaptionConfig(
            primary=str(captions.get("primary", "openai")),
            fallback=str(captions.get("fallback", "gemini")),
            request_timeout_sec=float(captions.get("request_timeout_sec", 30)),
            parallelism=max(1, int(captions.get("parallelism", 5))),
            title_max_chars=int(captions.get("title_max_chars", 100)),
            description_max_chars=int(captions.get("description_max_chars", 500)),
            hashtag_count=int(captions.get("hashtag_count", 5)),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-pro"),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        ),
        transcript=TranscriptConfig(
            languages=[str(lang) for lang in transcript.get("languages", ["en"])],
        ),
        upload=UploadConfig(
            max_height=int(upload.get("max_height", 1080)),
            category_id=str(upload.get("category_id", "22")),
            privacy_status=str(upload.get("privacy_status", "public")),
            google_client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
            google_client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        ),
        root_dir=root_dir,
    )
