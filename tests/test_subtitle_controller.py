from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeTool, ScriptedPicker
from mkvsub.controller.subtitle_controller import SubtitleController, summarize
from mkvsub.errors import Conflict, DiscoveryError, FilesystemError, NoTracksError, OperatorCancelled, ParseError
from mkvsub.model.extraction_outcome import ExtractionOutcome
from mkvsub.model.subtitle_track import SubtitleTrack

NO_SUBS = """\
  Stream #0:0: Video: h264 (High), yuv420p, 1920x1080
  Stream #0:1(eng): Audio: aac (LC), 48000 Hz, stereo
"""


def test_scan_folder_matches_mkv_case_insensitively(tmp_path: Path) -> None:
    for name in ("b.mkv", "a.MKV", "c.mp4", "notes.txt"):
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "folder.mkv").mkdir()

    items = SubtitleController(ScriptedPicker(), FakeTool()).scan_folder(tmp_path)
    assert [i.path.name for i in items] == ["a.MKV", "b.mkv"]


def test_scan_folder_without_candidates(tmp_path: Path) -> None:
    (tmp_path / "clip.mp4").write_bytes(b"")
    with pytest.raises(DiscoveryError):
        SubtitleController(ScriptedPicker(), FakeTool()).scan_folder(tmp_path)


def test_scan_missing_folder(tmp_path: Path) -> None:
    with pytest.raises(FilesystemError):
        SubtitleController(ScriptedPicker(), FakeTool()).scan_folder(tmp_path / "missing")


def test_pick_file(tmp_path: Path) -> None:
    (tmp_path / "a.mkv").write_bytes(b"")
    (tmp_path / "b.mkv").write_bytes(b"")
    picker = ScriptedPicker(one=[tmp_path / "b.mkv"])
    assert SubtitleController(picker, FakeTool()).pick_file(tmp_path) == tmp_path / "b.mkv"


def test_pick_tracks_returns_selection(movie: Path) -> None:
    picker = ScriptedPicker(many=[1])
    tracks = SubtitleController(picker, FakeTool()).pick_tracks(movie)
    assert tracks == [SubtitleTrack(stream_index=1, lang=None, format="hdmv_pgs_subtitle")]


def test_pick_tracks_without_subtitles(movie: Path) -> None:
    with pytest.raises(NoTracksError):
        SubtitleController(ScriptedPicker(), FakeTool(probe_text=NO_SUBS)).pick_tracks(movie)


def test_pick_tracks_empty_selection_is_cancel(movie: Path) -> None:
    with pytest.raises(OperatorCancelled):
        SubtitleController(ScriptedPicker(many=[]), FakeTool()).pick_tracks(movie)


def test_parse_error_aborts_enumeration(movie: Path) -> None:
    tool = FakeTool(probe_text="  Stream #0:2(eng: Subtitle: subrip\n")
    with pytest.raises(ParseError):
        SubtitleController(ScriptedPicker(), tool).pick_tracks(movie)


def test_run_extracts_all_selected_in_order(movie: Path) -> None:
    tool = FakeTool()
    outcomes = SubtitleController(ScriptedPicker(), tool).run(file=movie)

    assert [o.status for o in outcomes] == ["produced", "produced"]
    assert [o.path.name for o in outcomes] == ["movie.0.eng.srt", "movie.1.sup"]
    assert [c["selector"] for c in tool.calls] == ["0:s:0", "0:s:1"]


def test_run_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FilesystemError):
        SubtitleController(ScriptedPicker(), FakeTool()).run(file=tmp_path / "gone.mkv")


def test_tool_failure_only_fails_that_track(movie: Path) -> None:
    tool = FakeTool(fail_selectors=["0:s:0"])
    outcomes = SubtitleController(ScriptedPicker(), tool).run(file=movie)

    assert [o.status for o in outcomes] == ["failed", "produced"]
    assert "matches no streams" in outcomes[0].reason


def test_conflict_aborts_remaining_tracks(movie: Path) -> None:
    (movie.parent / "output.srt").write_bytes(b"stale")
    tool = FakeTool()

    with pytest.raises(Conflict):
        SubtitleController(ScriptedPicker(one=[False]), tool).run(file=movie)
    assert tool.calls == []
    assert not (movie.parent / "movie.1.sup").exists()


def test_summarize() -> None:
    track = SubtitleTrack(stream_index=0, lang="eng", format="subrip")
    level, text = summarize([
        ExtractionOutcome.produced(track, Path("movie.0.eng.srt")),
        ExtractionOutcome.skipped(track),
    ])
    assert level == "info"
    assert text.splitlines() == [
        "Produced: movie.0.eng.srt",
        'Skipped: Stream #0:0 (eng) "subrip"',
    ]

    level, _ = summarize([ExtractionOutcome.failed(track, "boom")])
    assert level == "warn"


def test_conflict_keeps_outcomes_finished_before_abort(movie: Path) -> None:
    (movie.parent / "output.sup").write_bytes(b"stale")

    with pytest.raises(Conflict) as excinfo:
        SubtitleController(ScriptedPicker(one=[False]), FakeTool()).run(file=movie)

    assert [(o.status, o.path.name) for o in excinfo.value.outcomes] == [("produced", "movie.0.eng.srt")]
    assert (movie.parent / "movie.0.eng.srt").exists()
