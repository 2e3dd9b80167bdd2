"""Exception hierarchy for boot checks."""

from pathlib import Path

from bootcheck.config.constants import Target


class BootCheckError(Exception):
    """Base class for errors raised by boot check services."""


class TranscriptUnavailableError(BootCheckError):
    """A transcript file exists but could not be read."""

    def __init__(self, target: Target, path: Path, cause: OSError):
        self.target = target
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read boot log for {target.value} at {path}: {cause}")


class InstallerImageNotFoundError(BootCheckError):
    """No installer image exists for a target."""

    def __init__(self, target: Target, images_dir: Path):
        self.target = target
        self.images_dir = images_dir
        super().__init__(f"No installer image found for {target.value} in {images_dir}")
