from __future__ import annotations

from pathlib import Path

import pytest

from vttmerge.core.errors import FileReadError, MalformedTimingLineError
from vttmerge.core.pipeline import MergeProgress, MergeRequest, merge_folder
from vttmerge.infra.config import build_app_config


def _write_vtt(path: Path, body: str) -> None:
    path.write_text(f"WEBVTT\n\n{body}", encoding="utf-8")


def test_merge_folder_deduplicates_identical_files(tmp_path: Path) -> None:
    body = "00:00:01.000 --> 00:00:02.000\nHello\n"
    _write_vtt(tmp_path / "a.vtt", body)
    _write_vtt(tmp_path / "b.vtt", body)

    result = merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))

    assert result.files == 2
    assert result.extracted == 2
    assert result.unique == 1
    assert result.duplicates == 1
    assert result.output_path == tmp_path / "output.srt"
    assert result.output_path.read_text(encoding="utf-8") == (
        "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n"
    )


def test_merge_folder_sorts_across_files(tmp_path: Path) -> None:
    _write_vtt(
        tmp_path / "first.vtt",
        "00:00:05.000 --> 00:00:06.000\nFive\n\n00:00:01.000 --> 00:00:02.000\nOne\n",
    )
    _write_vtt(tmp_path / "second.vtt", "00:00:03.000 --> 00:00:04.000\nThree\n")

    result = merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))

    lines = result.output_path.read_text(encoding="utf-8").splitlines()
    assert [line for line in lines if "-->" in line] == [
        "00:00:01,000 --> 00:00:02,000",
        "00:00:03,000 --> 00:00:04,000",
        "00:00:05,000 --> 00:00:06,000",
    ]
    assert lines[0] == "1"
    assert lines[4] == "2"
    assert lines[8] == "3"


def test_merge_folder_writes_empty_output_for_empty_folder(tmp_path: Path) -> None:
    result = merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))

    assert result.files == 0
    assert result.output_path.exists()
    assert result.output_path.read_text(encoding="utf-8") == ""


def test_merge_folder_ignores_non_vtt_files(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text(
        "00:00:01.000 --> 00:00:02.000\nNot a subtitle\n", encoding="utf-8"
    )

    result = merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))

    assert result.unique == 0
    assert "Not a subtitle" not in result.output_path.read_text(encoding="utf-8")


def test_merge_folder_overwrites_previous_output(tmp_path: Path) -> None:
    (tmp_path / "output.srt").write_text("stale", encoding="utf-8")
    _write_vtt(tmp_path / "a.vtt", "00:00:01.000 --> 00:00:02.000\nFresh\n")

    result = merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))

    assert "stale" not in result.output_path.read_text(encoding="utf-8")


def test_merge_folder_reports_progress_per_file(tmp_path: Path) -> None:
    body = "00:00:01.000 --> 00:00:02.000\nHello\n"
    _write_vtt(tmp_path / "a.vtt", body)
    _write_vtt(tmp_path / "b.vtt", body)
    events: list[MergeProgress] = []

    merge_folder(
        MergeRequest(folder=tmp_path, config=build_app_config()),
        on_progress=events.append,
    )

    assert [(event.completed, event.total) for event in events] == [(1, 2), (2, 2)]
    assert [event.added for event in events] == [1, 0]
    assert [event.extracted for event in events] == [1, 1]
    assert events[0].input_path.name == "a.vtt"


def test_merge_folder_aborts_on_malformed_timing_line(tmp_path: Path) -> None:
    _write_vtt(tmp_path / "bad.vtt", "00:00:01.000-->00:00:02.000\nHello\n")

    with pytest.raises(MalformedTimingLineError):
        merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))

    assert not (tmp_path / "output.srt").exists()


def test_merge_folder_aborts_on_unreadable_file(tmp_path: Path, monkeypatch) -> None:
    _write_vtt(tmp_path / "a.vtt", "00:00:01.000 --> 00:00:02.000\nHello\n")

    def fake_read_vtt_cues(path: Path, encoding: str) -> list:
        raise FileReadError(f"Cannot read subtitle file {path}: permission denied")

    monkeypatch.setattr("vttmerge.core.pipeline.read_vtt_cues", fake_read_vtt_cues)

    with pytest.raises(FileReadError, match="permission denied"):
        merge_folder(MergeRequest(folder=tmp_path, config=build_app_config()))


def test_merge_folder_honours_library_level_overrides(tmp_path: Path) -> None:
    (tmp_path / "a.webvtt").write_text(
        "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nOverride\n", encoding="utf-8"
    )
    _write_vtt(tmp_path / "ignored.vtt", "00:00:03.000 --> 00:00:04.000\nSkipped\n")
    config = build_app_config(input_suffix="webvtt", output_name="merged.srt")

    result = merge_folder(MergeRequest(folder=tmp_path, config=config))

    assert result.output_path == tmp_path / "merged.srt"
    assert result.output_path.read_text(encoding="utf-8") == (
        "1\n00:00:01,000 --> 00:00:02,000\nOverride\n\n"
    )
    assert not (tmp_path / "output.srt").exists()
