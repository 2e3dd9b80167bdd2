"""Multi-target validation run."""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from bootcheck.config.constants import Severity, Target, VerdictStatus
from bootcheck.config.settings import Settings
from bootcheck.infrastructure.logging.logger import StructuredLogger
from bootcheck.services.classifier import BootVerdictClassifier, Indeterminate, Outcome
from bootcheck.services.classifier.presenter import outcome_lines
from bootcheck.services.report import ReportRenderer
from bootcheck.services.transcripts import TranscriptStore
from bootcheck.utils.console import style

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.TEST: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass
class ValidationSummary:
    """Outcomes of one validation run, in requested target order."""

    outcomes: list[Outcome] = field(default_factory=list)
    report_path: Path | None = None

    def _count(self, status: VerdictStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def passed(self) -> int:
        return self._count(VerdictStatus.PASSED)

    @property
    def failed(self) -> int:
        return self._count(VerdictStatus.FAILED)

    @property
    def indeterminate(self) -> int:
        return self._count(VerdictStatus.INDETERMINATE)

    @property
    def all_passed(self) -> bool:
        return bool(self.outcomes) and self.passed == len(self.outcomes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging and API responses."""
        return {
            "outcomes": [o.to_dict() for o in self.outcomes],
            "passed": self.passed,
            "failed": self.failed,
            "indeterminate": self.indeterminate,
            "all_passed": self.all_passed,
            "report_path": str(self.report_path) if self.report_path else None,
        }


def log_outcome(outcome: Outcome, color: bool = True) -> None:
    """Log every console line of an outcome at its severity."""
    for severity, message in outcome_lines(outcome):
        logger.log(_LOG_LEVELS[severity], style(severity, message, color=color))


class ValidationRunner:
    """Classifies boot logs for several targets, one independent task per target."""

    def __init__(
        self,
        settings: Settings,
        store: TranscriptStore | None = None,
        classifier: BootVerdictClassifier | None = None,
        renderer: ReportRenderer | None = None,
    ):
        """Initialize validation runner."""
        self.settings = settings
        self.store = store or TranscriptStore(settings)
        self.classifier = classifier or BootVerdictClassifier.from_settings(settings)
        self.renderer = renderer or ReportRenderer()
        self.structured = StructuredLogger(__name__)

    def classify_target(self, target: Target) -> Outcome:
        """
        Load and classify one target's boot log.

        Never raises: any failure becomes an Indeterminate outcome so the
        remaining targets are still classified.
        """
        start = time.perf_counter()
        path: Path | None = None
        try:
            path = self.store.path_for(target)
            transcript = self.store.load(target)
            outcome = self.classifier.classify_transcript(transcript, target)
        except Exception as e:
            self.structured.log_error("classify", e, {"target": target.value})
            outcome = Indeterminate(target=target, reason=str(e), transcript_path=path)
        else:
            if isinstance(outcome, Indeterminate):
                outcome = replace(outcome, transcript_path=path)

        elapsed_ms = (time.perf_counter() - start) * 1000
        self.structured.log_step(
            "classify",
            {"target": target.value, "status": outcome.status.value},
            duration_ms=elapsed_ms,
        )
        return outcome

    async def run(
        self,
        targets: Sequence[Target] | None = None,
        write_report: bool | None = None,
    ) -> ValidationSummary:
        """
        Classify each target concurrently and optionally write the report.

        Args:
            targets: Targets to classify, defaults to the configured list
            write_report: Write a report file, defaults to the configured flag

        Returns:
            Summary with outcomes in the order targets were given
        """
        targets = list(targets) if targets is not None else list(self.settings.targets)
        if write_report is None:
            write_report = self.settings.write_report

        color = self.settings.debug
        logger.info(style(Severity.INFO, f"Analyzing boot logs for {len(targets)} target(s)...", color=color))
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.classify_target, target) for target in targets)
        )

        for outcome in outcomes:
            log_outcome(outcome, color=color)

        summary = ValidationSummary(outcomes=list(outcomes))
        if write_report and summary.outcomes:
            try:
                summary.report_path = self.renderer.write(summary.outcomes, self.settings.images_dir)
            except OSError as e:
                logger.error(f"Failed to write test report: {e}", exc_info=True)

        logger.info(
            style(
                Severity.INFO,
                f"Validation complete: {summary.passed} passed, {summary.failed} failed, "
                f"{summary.indeterminate} without data",
                color=color,
            )
        )
        return summary
