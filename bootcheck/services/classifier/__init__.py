"""Boot verdict classification."""

from bootcheck.services.classifier.classifier import BootVerdictClassifier, evaluate
from bootcheck.services.classifier.models import (
    Check,
    CheckResult,
    Indeterminate,
    Outcome,
    Verdict,
)

__all__ = [
    "BootVerdictClassifier",
    "Check",
    "CheckResult",
    "Indeterminate",
    "Outcome",
    "Verdict",
    "evaluate",
]
