"""Transcript service models."""

from dataclasses import dataclass
from pathlib import Path

from bootcheck.config.constants import Target


@dataclass(frozen=True)
class Transcript:
    """Captured serial console output of one boot attempt."""

    target: Target
    path: Path
    text: str
