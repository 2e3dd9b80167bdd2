"""Classifier service models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bootcheck.config.constants import CheckName, Polarity, Target, VerdictStatus


@dataclass(frozen=True)
class Check:
    """A named pass/fail rule applied to a transcript."""

    name: CheckName
    label: str  # shown when the check passes
    failure_label: str  # shown when the check fails
    patterns: tuple[str, ...]
    polarity: Polarity = Polarity.PRESENT


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check against one transcript."""

    name: CheckName
    label: str
    passed: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name.value, "label": self.label, "passed": self.passed}


@dataclass(frozen=True)
class Verdict:
    """Pass/fail result of classifying one target's transcript.

    Counts and the overall flag are derived from ``checks`` so the summary
    can never disagree with the detail.
    """

    target: Target
    checks: tuple[CheckResult, ...]
    transcript_path: Path | None = None

    @property
    def total(self) -> int:
        return len(self.checks)

    @property
    def passed(self) -> int:
        return sum(1 for c in self.checks if c.passed)

    @property
    def success(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def status(self) -> VerdictStatus:
        return VerdictStatus.PASSED if self.success else VerdictStatus.FAILED

    def result_for(self, name: CheckName) -> bool:
        """Return the outcome of a single check by name."""
        for check in self.checks:
            if check.name == name:
                return check.passed
        raise KeyError(name)

    @property
    def breakdown(self) -> dict[str, bool]:
        return {c.name.value: c.passed for c in self.checks}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and API responses."""
        return {
            "target": self.target.value,
            "status": self.status.value,
            "passed": self.passed,
            "total": self.total,
            "success": self.success,
            "checks": [c.to_dict() for c in self.checks],
            "transcript_path": str(self.transcript_path) if self.transcript_path else None,
        }


@dataclass(frozen=True)
class Indeterminate:
    """No transcript was available, so no checks ran."""

    target: Target
    reason: str
    transcript_path: Path | None = None

    @property
    def status(self) -> VerdictStatus:
        return VerdictStatus.INDETERMINATE

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and API responses."""
        return {
            "target": self.target.value,
            "status": self.status.value,
            "reason": self.reason,
            "transcript_path": str(self.transcript_path) if self.transcript_path else None,
        }


Outcome = Verdict | Indeterminate
