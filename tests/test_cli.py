import json
from pathlib import Path

from viral_clip_factory import cli
from viral_clip_factory.app import build_orchestrator_from_settings
from viral_clip_factory.domain.errors import TranscriptUnavailable
from viral_clip_factory.domain.models import TranscriptSegment
from viral_clip_factory.utils.config import load_settings


class DummyLogger:
    def info(self, *args, **kwargs):
        pass

    def warning(self, *args, **kwargs):
        pass

    def exception(self, *args, **kwargs):
        pass


class FakeSource:
    def __init__(self, error: Exception | None = None):
        self.error = error

    def fetch(self, video_id):
        if self.error is not None:
            raise self.error
        text = "pro tip. this changed my life! honestly"
        return [TranscriptSegment(text=text, offset_millis=i * 1000, duration_millis=1000) for i in range(20)]


def _patch(monkeypatch, tmp_path: Path, source: FakeSource) -> None:
    for key in ("OPENAI_API_KEY", "GEMINI_API_KEY", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET"):
        monkeypatch.delenv(key, raising=False)
    settings = load_settings(tmp_path)
    monkeypatch.setattr(
        cli,
        "build_orchestrator",
        lambda root_dir: build_orchestrator_from_settings(settings, DummyLogger(), transcript_source=source),
    )
    monkeypatch.setattr(cli, "get_logger", lambda: DummyLogger())


def test_analyze_prints_ranked_clips(monkeypatch, tmp_path: Path, capsys):
    _patch(monkeypatch, tmp_path, FakeSource())

    code = cli.run(["analyze", "https://youtu.be/dQw4w9WgXcQ"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["video_id"] == "dQw4w9WgXcQ"
    assert len(payload["clips"]) == 1
    assert payload["clips"][0]["viral_score"] == 6
    assert payload["clips"][0]["hashtags"][:3] == ["#Shorts", "#Viral", "#Podcast"]


def test_invalid_url_exits_with_user_error(monkeypatch, tmp_path: Path, capsys):
    _patch(monkeypatch, tmp_path, FakeSource())

    code = cli.run(["analyze", "not-a-url"])

    assert code == 2
    assert json.loads(capsys.readouterr().out) == {"error": "Invalid YouTube URL"}


def test_transcript_unavailable_exits_with_user_error(monkeypatch, tmp_path: Path, capsys):
    _patch(monkeypatch, tmp_path, FakeSource(error=TranscriptUnavailable("no captions")))

    code = cli.run(["analyze", "dQw4w9WgXcQ"])

    assert code == 2
    assert json.loads(capsys.readouterr().out) == {"error": "no captions"}


def test_unexpected_failure_exits_with_generic_error(monkeypatch, tmp_path: Path, capsys):
    _patch(monkeypatch, tmp_path, FakeSource(error=ValueError()))

    code = cli.run(["analyze", "dQw4w9WgXcQ"])

    assert code == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Analysis failed"}


def test_upload_builds_plan_from_saved_analysis(monkeypatch, tmp_path: Path, capsys):
    _patch(monkeypatch, tmp_path, FakeSource())
    clips_file = tmp_path / "analysis.json"
    assert cli.run(["analyze", "dQw4w9WgXcQ", "--output", str(clips_file)]) == 0

    code = cli.run(["upload", "dQw4w9WgXcQ", "--clips-file", str(clips_file), "--index", "1"])

    plan = json.loads(capsys.readouterr().out)
    assert code == 0
    assert plan["video_id"] == "dQw4w9WgXcQ"
    assert plan["ready_for_upload"] is False
    assert plan["youtube_metadata"]["tags"][:2] == ["Shorts", "Viral"]


def test_upload_rejects_out_of_range_index(monkeypatch, tmp_path: Path, capsys):
    _patch(monkeypatch, tmp_path, FakeSource())
    clips_file = tmp_path / "analysis.json"
    cli.run(["analyze", "dQw4w9WgXcQ", "--output", str(clips_file)])

    code = cli.run(["upload", "dQw4w9WgXcQ", "--clips-file", str(clips_file), "--index", "9"])

    assert code == 2
    assert "--index must be between 1 and 1" in json.loads(capsys.readouterr().out)["error"]
