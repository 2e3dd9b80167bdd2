"""Tests for the transcript store."""

from pathlib import Path
from unittest.mock import patch

import pytest

from bootcheck.config.constants import Target
from bootcheck.errors import TranscriptUnavailableError
from bootcheck.services.transcripts import TranscriptStore, normalize_console_text


def test_path_for_uses_template(settings):
    store = TranscriptStore(settings)
    assert store.path_for(Target.RISCV64) == settings.transcript_dir / "qemu-riscv64-boot.log"


def test_load_missing_returns_none(settings):
    store = TranscriptStore(settings)
    assert store.load(Target.AMD64) is None
    assert not store.exists(Target.AMD64)


def test_load_directory_in_place_of_log_returns_none(settings):
    store = TranscriptStore(settings)
    store.path_for(Target.AMD64).mkdir(parents=True)
    assert store.load(Target.AMD64) is None


def test_load_existing(settings, write_transcript):
    path = write_transcript(Target.ARM64, "Loading kernel\r\nroot@host:~$ ")
    transcript = TranscriptStore(settings).load(Target.ARM64)
    assert transcript is not None
    assert transcript.path == path
    assert transcript.target == Target.ARM64
    assert transcript.text == "Loading kernel\nroot@host:~$ "


def test_load_empty_file(settings, write_transcript):
    write_transcript(Target.AMD64, "")
    transcript = TranscriptStore(settings).load(Target.AMD64)
    assert transcript is not None
    assert transcript.text == ""


def test_load_binary_content_is_best_effort(settings, write_transcript):
    write_transcript(Target.AMD64, b"\xff\xfeLoading kernel\x00\x81")
    transcript = TranscriptStore(settings).load(Target.AMD64)
    assert "Loading kernel" in transcript.text
    assert "�" in transcript.text


def test_load_unreadable_raises(settings, write_transcript):
    write_transcript(Target.AMD64, "Loading kernel")
    with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
        with pytest.raises(TranscriptUnavailableError) as exc_info:
            TranscriptStore(settings).load(Target.AMD64)
    assert exc_info.value.target == Target.AMD64
    assert "denied" in str(exc_info.value)


def test_normalize_strips_ansi_sequences():
    raw = "\x1b[2J\x1b[0;32mLoading kernel\x1b[0m\x1b]0;title\x07"
    assert normalize_console_text(raw) == "Loading kernel"


def test_normalize_line_endings():
    assert normalize_console_text("a\r\nb\rc\n") == "a\nb\nc\n"


def test_ansi_split_marker_is_rejoined():
    """Color codes inside a marker no longer hide it."""
    raw = "Loading \x1b[1mkernel\x1b[0m"
    assert "Loading kernel" in normalize_console_text(raw)
