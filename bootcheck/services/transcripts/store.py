"""Transcript store: locates and loads boot logs per target."""

import logging
import re
from pathlib import Path

from bootcheck.config.constants import Target
from bootcheck.config.settings import Settings
from bootcheck.errors import TranscriptUnavailableError
from bootcheck.services.transcripts.models import Transcript

logger = logging.getLogger(__name__)

CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
OSC_RE = re.compile(r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")


def normalize_console_text(raw: str) -> str:
    """
    Clean raw serial console output for matching.

    Removes ANSI CSI/OSC escape sequences and normalizes CRLF and bare CR
    line endings to LF.

    Args:
        raw: Decoded console output

    Returns:
        Normalized text
    """
    text = OSC_RE.sub("", raw)
    text = CSI_RE.sub("", text)
    return text.replace("\r\n", "\n").replace("\r", "\n")


class TranscriptStore:
    """Maps targets to boot log files written by the QEMU log collector."""

    def __init__(self, settings: Settings):
        """Initialize transcript store."""
        self.settings = settings

    def path_for(self, target: Target) -> Path:
        """Path where the collector writes the boot log for a target."""
        filename = self.settings.transcript_template.format(target=target.value)
        return self.settings.transcript_dir / filename

    def exists(self, target: Target) -> bool:
        return self.path_for(target).is_file()

    def load(self, target: Target) -> Transcript | None:
        """
        Load the boot log for a target.

        Args:
            target: Architecture whose boot log to load

        Returns:
            The transcript, or None when no boot log was captured

        Raises:
            TranscriptUnavailableError: The file exists but cannot be read
        """
        path = self.path_for(target)
        if not path.is_file():
            logger.info(f"No boot log for {target.value} at {path}")
            return None

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise TranscriptUnavailableError(target, path, e) from e

        text = raw.decode(self.settings.transcript_encoding, errors="replace")
        logger.debug(f"Loaded {len(raw)} bytes of boot log for {target.value}")
        return Transcript(target=target, path=path, text=normalize_console_text(text))
