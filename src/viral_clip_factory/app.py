from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from viral_clip_factory.application.caption_synthesizer import CaptionSynthesizer
from viral_clip_factory.application.orchestrator import ClipAnalysisOrchestrator
from viral_clip_factory.application.upload_planner import UploadPlanner
from viral_clip_factory.domain.clip_scanner import ClipScanner
from viral_clip_factory.domain.scan_rules import ScanRuleConfig
from viral_clip_factory.infrastructure.llm.fallback_client import LocalCaptionProvider
from viral_clip_factory.infrastructure.llm.gemini_client import GeminiCaptionProvider
from viral_clip_factory.infrastructure.llm.openai_client import OpenAICaptionProvider
from viral_clip_factory.infrastructure.transcript.youtube_transcript import YouTubeTranscriptSource
from viral_clip_factory.utils.config import CaptionConfig, Settings, load_settings
from viral_clip_factory.utils.logger import configure_logger, get_logger


def build_caption_providers(config: CaptionConfig) -> list:
    available = {
        "openai": lambda: OpenAICaptionProvider(
            api_key=config.openai_api_key,
            model=config.openai_model,
            timeout_sec=config.request_timeout_sec,
            title_max_chars=config.title_max_chars,
            description_max_chars=config.description_max_chars,
            hashtag_count=config.hashtag_count,
        ),
        "gemini": lambda: GeminiCaptionProvider(
            api_key=config.gemini_api_key,
            model=config.gemini_model,
            timeout_sec=config.request_timeout_sec,
            title_max_chars=config.title_max_chars,
            description_max_chars=config.description_max_chars,
            hashtag_count=config.hashtag_count,
        ),
    }
    order: list[str] = []
    for name in (config.primary, config.fallback):
        key = name.strip().lower()
        if key not in available:
            valid = ", ".join(available)
            raise ValueError(f"Unknown caption provider '{name}'. Expected one of: {valid}")
        if key not in order:
            order.append(key)
    return [available[key]() for key in order]


def build_orchestrator_from_settings(settings: Settings, logger, transcript_source=None) -> ClipAnalysisOrchestrator:
    scanner = ClipScanner(
        ScanRuleConfig(
            window_size=settings.scan.window_size,
            stride=settings.scan.stride,
            min_clip_sec=settings.scan.min_clip_sec,
            max_clip_sec=settings.scan.max_clip_sec,
            top_k=settings.scan.top_k,
            score_threshold=settings.scan.score_threshold,
        )
    )
    synthesizer = CaptionSynthesizer(
        providers=build_caption_providers(settings.captions),
        fallback=LocalCaptionProvider(hashtag_count=settings.captions.hashtag_count),
        logger=logger,
    )
    if transcript_source is None:
        transcript_source = YouTubeTranscriptSource(languages=settings.transcript.languages, logger=logger)

    return ClipAnalysisOrchestrator(
        transcript_source=transcript_source,
        scanner=scanner,
        synthesizer=synthesizer,
        upload_planner=UploadPlanner(settings.upload),
        logger=logger,
        parallelism=settings.captions.parallelism,
    )


def build_orchestrator(root_dir: Path) -> ClipAnalysisOrchestrator:
    load_dotenv(root_dir / ".env")
    configure_logger()
    settings = load_settings(root_dir)
    return build_orchestrator_from_settings(settings, get_logger())
