"""Boot verdict classifier service."""

from dataclasses import replace

from bootcheck.config.constants import MISSING_TRANSCRIPT_REASON, Polarity, Target
from bootcheck.config.settings import Settings
from bootcheck.services.classifier.checks import DEFAULT_CHECKS, get_checks
from bootcheck.services.classifier.models import (
    Check,
    CheckResult,
    Indeterminate,
    Outcome,
    Verdict,
)
from bootcheck.services.transcripts.models import Transcript


def evaluate(check: Check, text: str) -> bool:
    """Evaluate a single check against transcript text, ignoring case."""
    haystack = text.lower()
    found = any(pattern.lower() in haystack for pattern in check.patterns)
    if check.polarity is Polarity.ABSENT:
        return not found
    return found


class BootVerdictClassifier:
    """Scores a boot transcript against a fixed, ordered set of checks."""

    def __init__(self, checks: tuple[Check, ...] | None = None):
        """Initialize classifier with the given checks, or the default five."""
        self.checks = checks if checks is not None else DEFAULT_CHECKS

    @classmethod
    def from_settings(cls, settings: Settings) -> "BootVerdictClassifier":
        return cls(get_checks(settings.strict_installer_match))

    def classify(self, text: str, target: Target) -> Verdict:
        """
        Classify transcript text.

        Matching is case-insensitive. Repeated matches count once, and a
        panic marker fails its check regardless of what follows it.

        Args:
            text: Transcript text, possibly empty
            target: Architecture the transcript belongs to

        Returns:
            Verdict with one result per check
        """
        results: list[CheckResult] = []
        for check in self.checks:
            passed = evaluate(check, text)
            label = check.label if passed else check.failure_label
            results.append(CheckResult(name=check.name, label=label, passed=passed))
        return Verdict(target=target, checks=tuple(results))

    def classify_transcript(self, transcript: Transcript | None, target: Target) -> Outcome:
        """Classify a loaded transcript; a missing one is indeterminate."""
        if transcript is None:
            return Indeterminate(target=target, reason=MISSING_TRANSCRIPT_REASON)
        verdict = self.classify(transcript.text, target)
        return replace(verdict, transcript_path=transcript.path)
