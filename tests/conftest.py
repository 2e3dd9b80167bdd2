"""Pytest configuration and fixtures."""

import pytest

from bootcheck.config.constants import Target
from bootcheck.config.settings import Settings


@pytest.fixture
def settings(tmp_path):
    """Provide settings pointing at temporary transcript and image directories."""
    return Settings(
        transcript_dir=tmp_path / "logs",
        images_dir=tmp_path / "images",
        write_report=False,
    )


@pytest.fixture
def write_transcript(settings):
    """Write a boot log for a target where the store expects it."""

    def _write(target: Target, content: str | bytes):
        settings.transcript_dir.mkdir(parents=True, exist_ok=True)
        path = settings.transcript_dir / settings.transcript_template.format(target=target.value)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
