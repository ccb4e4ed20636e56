from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed

from viral_clip_factory.application.caption_synthesizer import CaptionSynthesizer
from viral_clip_factory.application.upload_planner import UploadPlanner
from viral_clip_factory.domain.clip_scanner import ClipScanner, viral_score
from viral_clip_factory.domain.errors import InvalidInput
from viral_clip_factory.domain.models import ClipCandidate, EnhancedClip, UploadPlan
from viral_clip_factory.domain.protocols import TranscriptSource
from viral_clip_factory.domain.video_id import extract_video_id


class ClipAnalysisOrchestrator:
    def __init__(
        self,
        transcript_source: TranscriptSource,
        scanner: ClipScanner,
        synthesizer: CaptionSynthesizer,
        upload_planner: UploadPlanner,
        logger,
        parallelism: int = 5,
    ) -> None:
        self.transcript_source = transcript_source
        self.scanner = scanner
        self.synthesizer = synthesizer
        self.upload_planner = upload_planner
        self.logger = logger
        self.parallelism = max(1, parallelism)

    def resolve_video_id(self, video_url: str) -> str:
        if not (video_url or "").strip():
            raise InvalidInput("Video URL is required")
        video_id = extract_video_id(video_url)
        if not video_id:
            raise InvalidInput("Invalid YouTube URL")
        return video_id

    def analyze(self, video_url: str) -> list[EnhancedClip]:
        video_id = self.resolve_video_id(video_url)
        self.logger.info("analysis.started", video_id=video_id)

        transcript = self.transcript_source.fetch(video_id)
        candidates = self.scanner.scan(transcript)
        self.logger.info(
            "scan.completed",
            video_id=video_id,
            segments=len(transcript),
            candidates=len(candidates),
        )
        if not candidates:
            return []

        clips = self.enhance(candidates)
        self.logger.info("analysis.completed", video_id=video_id, clips=len(clips))
        return clips

    def enhance(self, candidates: list[ClipCandidate]) -> list[EnhancedClip]:
        if not candidates:
            return []
        workers = min(self.parallelism, len(candidates))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_map = {
                executor.submit(self._enhance_one, candidate): idx
                for idx, candidate in enumerate(candidates)
            }
            ordered: list[tuple[int, EnhancedClip]] = []
            for future in as_completed(future_map):
                ordered.append((future_map[future], future.result()))

        ordered.sort(key=lambda pair: pair[0])
        return [clip for _, clip in ordered]

    def plan_upload(self, video_url: str, clip: EnhancedClip) -> UploadPlan:
        video_id = self.resolve_video_id(video_url)
        plan = self.upload_planner.build(video_id, clip)
        self.logger.info(
            "upload.plan_built",
            video_id=video_id,
            ready_for_upload=plan.ready_for_upload,
        )
        return plan

    def _enhance_one(self, candidate: ClipCandidate) -> EnhancedClip:
        captions = self.synthesizer.synthesize(candidate.transcript_text)
        return EnhancedClip(
            title=captions.title,
            description=captions.description,
            hashtags=list(captions.hashtags),
            start_sec=candidate.start_sec,
            end_sec=candidate.end_sec,
            transcript_text=candidate.transcript_text,
            viral_score=viral_score(candidate.total_score),
        )
