from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from viral_clip_factory.app import build_orchestrator
from viral_clip_factory.domain.errors import InvalidInput, TranscriptUnavailable
from viral_clip_factory.domain.models import EnhancedClip
from viral_clip_factory.utils.logger import get_logger

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USER_ERROR = 2


def _default_root_dir() -> Path:
    return Path(__file__).resolve().parents[2]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vcf", description="Find viral short-form clips in YouTube transcripts")
    parser.add_argument(
        "--root-dir",
        default="",
        help="Directory holding config/default.toml and .env (default: project root)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze_cmd = sub.add_parser("analyze", help="Scan a video's transcript and caption the best clips")
    analyze_cmd.add_argument("video_url", help="YouTube URL or 11-character video id")
    analyze_cmd.add_argument("--output", default="", help="Write the JSON result to this file instead of stdout")

    upload_cmd = sub.add_parser("upload", help="Build the upload plan for one analysed clip")
    upload_cmd.add_argument("video_url", help="YouTube URL or 11-character video id")
    upload_cmd.add_argument("--clips-file", required=True, help="JSON file written by `vcf analyze --output`")
    upload_cmd.add_argument("--index", type=int, default=1, help="1-based clip number in the file (default: 1)")

    return parser


def _emit(payload: dict, output: str = "") -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        return
    print(text)


def _load_clip(clips_file: str, index: int) -> EnhancedClip:
    path = Path(clips_file)
    if not path.exists():
        raise InvalidInput(f"Clips file not found: {clips_file}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"Clips file is not valid JSON: {exc.msg}") from exc

    clips = payload.get("clips") if isinstance(payload, dict) else payload
    if not isinstance(clips, list) or not clips:
        raise InvalidInput("Clips file contains no clips")
    if not 1 <= index <= len(clips):
        raise InvalidInput(f"--index must be between 1 and {len(clips)}")
    return EnhancedClip.from_dict(clips[index - 1])


def _cmd_analyze(orch, args: argparse.Namespace) -> int:
    video_id = orch.resolve_video_id(args.video_url)
    clips = orch.analyze(args.video_url)
    _emit({"video_id": video_id, "clips": [clip.to_dict() for clip in clips]}, output=args.output)
    return EXIT_OK


def _cmd_upload(orch, args: argparse.Namespace) -> int:
    clip = _load_clip(args.clips_file, args.index)
    plan = orch.plan_upload(args.video_url, clip)
    _emit(plan.to_dict())
    return EXIT_OK


COMMANDS = {
    "analyze": _cmd_analyze,
    "upload": _cmd_upload,
}
FAILURE_MESSAGES = {
    "analyze": "Analysis failed",
    "upload": "Upload failed",
}


def run(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    root_dir = Path(args.root_dir) if args.root_dir else _default_root_dir()
    logger = get_logger()

    try:
        orch = build_orchestrator(root_dir)
        return COMMANDS[args.command](orch, args)
    except (InvalidInput, TranscriptUnavailable) as exc:
        logger.warning("request.rejected", command=args.command, error=str(exc))
        _emit({"error": str(exc)})
        return EXIT_USER_ERROR
    except Exception as exc:
        logger.exception(f"{args.command}.failed", error=str(exc))
        _emit({"error": str(exc) or FAILURE_MESSAGES[args.command]})
        return EXIT_FAILED


def main() -> None:
    raise SystemExit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
