from __future__ import annotations

import shlex

from viral_clip_factory.domain.models import EnhancedClip, UploadPlan
from viral_clip_factory.domain.video_id import watch_url
from viral_clip_factory.utils.config import UploadConfig
from viral_clip_factory.utils.paths import sanitize_filename

UPLOAD_STEPS = (
    "1. Download video segment using yt-dlp",
    "2. Generate subtitle file (SRT) from transcript",
    "3. Process video with FFmpeg to add subtitles and format for Shorts",
    "4. Authenticate with YouTube OAuth2",
    "5. Upload using YouTube Data API v3",
)
SUBTITLE_FORCE_STYLE = (
    "Alignment=2,FontSize=24,PrimaryColour=&H00FFFFFF,OutlineColour=&H00000000,Outline=2"
)
SUBTITLE_STYLE_SUMMARY = "Bold, white text with black outline, bottom-centered"
SETUP_GUIDE_URL = "https://developers.google.com/youtube/v3/getting-started"
MISSING_CREDENTIALS_MESSAGE = (
    "YouTube API credentials not configured. Set up OAuth2 credentials to enable automatic uploads."
)
SIMULATION_NOTE = (
    "This is a demonstration. Full implementation requires server-side video processing "
    "(yt-dlp, FFmpeg) and YouTube Data API OAuth2 authentication."
)


class UploadPlanner:
    def __init__(self, config: UploadConfig) -> None:
        self.config = config

    def build(self, video_id: str, clip: EnhancedClip) -> UploadPlan:
        output_name = f"clip_{sanitize_filename(clip.title)}.mp4"
        commands = {
            "download": shlex.join(self.build_download_command(video_id, clip, output_name)),
            "process": shlex.join(self.build_process_command("input.mp4", "subtitles.srt", "output.mp4")),
            "subtitle_style": SUBTITLE_STYLE_SUMMARY,
        }

        if self.has_credentials():
            return UploadPlan(
                video_id=video_id,
                clip=clip,
                steps=list(UPLOAD_STEPS),
                commands=commands,
                youtube_metadata=self.build_metadata(video_id, clip),
                ready_for_upload=True,
                message="Upload simulation complete",
                note=SIMULATION_NOTE,
            )
        return UploadPlan(
            video_id=video_id,
            clip=clip,
            steps=list(UPLOAD_STEPS),
            commands=commands,
            youtube_metadata=self.build_metadata(video_id, clip),
            ready_for_upload=False,
            message=MISSING_CREDENTIALS_MESSAGE,
            setup_guide=SETUP_GUIDE_URL,
        )

    def has_credentials(self) -> bool:
        return bool(self.config.google_client_id.strip() and self.config.google_client_secret.strip())

    def build_download_command(self, video_id: str, clip: EnhancedClip, output_name: str) -> list[str]:
        return [
            "yt-dlp",
            "-f",
            f"best[height<={self.config.max_height}]",
            "--download-sections",
            f"*{clip.start_sec:.3f}-{clip.end_sec:.3f}",
            "-o",
            output_name,
            watch_url(video_id),
        ]

    def build_process_command(self, input_path: str, subtitle_path: str, output_path: str) -> list[str]:
        video_filter = (
            "crop=ih*9/16:ih,scale=1080:1920,"
            f"subtitles={subtitle_path}:force_style='{SUBTITLE_FORCE_STYLE}'"
        )
        return [
            "ffmpeg",
            "-i",
            input_path,
            "-vf",
            video_filter,
            "-c:v",
            "libx264",
            "-preset",
            "fast",
            "-crf",
            "23",
            "-c:a",
            "aac",
            output_path,
        ]

    def build_metadata(self, video_id: str, clip: EnhancedClip) -> dict:
        hashtags = " ".join(clip.hashtags)
        return {
            "title": clip.title,
            "description": f"{clip.description}\n\n{hashtags}\n\nFull video: {watch_url(video_id)}",
            "tags": [tag.replace("#", "", 1) for tag in clip.hashtags],
            "category_id": self.config.category_id,
            "privacy_status": self.config.privacy_status,
        }
