"""Console lines describing a classification outcome."""

from bootcheck.config.constants import CheckName, Severity
from bootcheck.services.classifier.models import Indeterminate, Outcome
from bootcheck.utils.console import FAIL_MARK, WARN_MARK, mark


def outcome_lines(outcome: Outcome) -> list[tuple[Severity, str]]:
    """
    Describe an outcome as (severity, message) pairs, one per console line.

    Passing checks are INFO and failing ones WARN, except a detected panic,
    which is ERROR. A missing transcript yields a single ERROR line.
    """
    target = outcome.target.value
    if isinstance(outcome, Indeterminate):
        return [(Severity.ERROR, f"{FAIL_MARK} No data for {target}: {outcome.reason}")]

    lines: list[tuple[Severity, str]] = []
    for result in outcome.checks:
        if result.passed:
            severity = Severity.INFO
        elif result.name == CheckName.NO_PANIC:
            severity = Severity.ERROR
        else:
            severity = Severity.WARN
        lines.append((severity, f"{mark(result.passed)} {result.label}"))

    lines.append((Severity.INFO, f"Test Results: {outcome.passed}/{outcome.total} checks passed"))
    if outcome.success:
        lines.append((Severity.INFO, f"{mark(True)} All checks passed for {target}"))
    else:
        lines.append((Severity.WARN, f"{WARN_MARK} Some checks failed for {target}"))
    return lines
