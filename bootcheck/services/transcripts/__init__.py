"""Boot log transcripts."""

from bootcheck.services.transcripts.models import Transcript
from bootcheck.services.transcripts.store import TranscriptStore, normalize_console_text

__all__ = ["Transcript", "TranscriptStore", "normalize_console_text"]
