"""Plain-text test report renderer."""

import logging
import platform
import socket
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from bootcheck.config.constants import REPORT_FILENAME_FORMAT, REPORT_TITLE
from bootcheck.services.classifier.models import Indeterminate, Outcome, Verdict
from bootcheck.utils.console import mark

logger = logging.getLogger(__name__)

NEXT_STEPS = (
    "Review boot logs listed above",
    "Run interactive QEMU tests for detailed debugging",
    "Test automated installation sequence",
)


def _result_line(outcome: Outcome) -> str:
    if isinstance(outcome, Indeterminate):
        return f"Result: NO DATA ({outcome.reason})"
    word = "PASS" if outcome.success else "FAIL"
    return f"Result: {word} ({outcome.passed}/{outcome.total} checks passed)"


def _section(outcome: Outcome) -> list[str]:
    target = outcome.target.value
    lines = ["", f"## {target}", "-" * max(8, len(target) + 3)]
    log_path = outcome.transcript_path or "not captured"
    lines.append(f"Boot Log: {log_path}")
    lines.append("")
    lines.append(_result_line(outcome))
    if isinstance(outcome, Verdict):
        lines.extend(f"  {mark(c.passed)} {c.label}" for c in outcome.checks)
    return lines


class ReportRenderer:
    """Renders classification outcomes into the installer test report."""

    def render(
        self,
        outcomes: Iterable[Outcome],
        generated_at: datetime | None = None,
        host: str | None = None,
        machine: str | None = None,
    ) -> str:
        """
        Render a report for one or more targets.

        Every outcome gets a section; indeterminate ones are marked NO DATA
        so a broken harness is not mistaken for a failed boot.

        Args:
            outcomes: Outcomes in display order
            generated_at: Report timestamp, defaults to now
            host: Host name, defaults to this machine's
            machine: Host architecture, defaults to this machine's

        Returns:
            Report text ending with a newline
        """
        generated_at = generated_at or datetime.now()
        host = host or socket.gethostname()
        machine = machine or platform.machine()

        lines = [
            REPORT_TITLE,
            "=" * len(REPORT_TITLE),
            "",
            f"Test Date: {generated_at.strftime('%a %b %d %H:%M:%S %Y')}",
            f"Test Host: {host}",
            "",
            "Architecture Tests:",
        ]
        for outcome in outcomes:
            lines.extend(_section(outcome))

        lines.extend(["", "Next Steps:"])
        lines.extend(f"- {step}" for step in NEXT_STEPS)
        lines.extend(["", "Test Environment:", f"- Architecture: {machine}"])
        return "\n".join(lines) + "\n"

    def write(
        self,
        outcomes: Iterable[Outcome],
        directory: Path,
        generated_at: datetime | None = None,
    ) -> Path:
        """Write a timestamped report file into directory and return its path."""
        generated_at = generated_at or datetime.now()
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / generated_at.strftime(REPORT_FILENAME_FORMAT)
        path.write_text(self.render(outcomes, generated_at=generated_at), encoding="utf-8")
        logger.info(f"Test report created: {path}")
        return path
