"""Tests for the test report renderer."""

from datetime import datetime
from pathlib import Path

from bootcheck.config.constants import REPORT_TITLE, Target
from bootcheck.services.classifier import BootVerdictClassifier, Indeterminate
from bootcheck.services.report import ReportRenderer

FULL_BOOT = "Loading kernel... Loading initramfs... Rustica OS Installer... root@host:~$ "
GENERATED_AT = datetime(2026, 10, 16, 12, 0, 0)


def _outcomes():
    classifier = BootVerdictClassifier()
    return [
        classifier.classify(FULL_BOOT, Target.AMD64),
        classifier.classify("Loading kernel\nLoading initramfs\nKernel panic - not syncing", Target.ARM64),
        Indeterminate(
            target=Target.RISCV64,
            reason="boot log not found",
            transcript_path=Path("/tmp/qemu-riscv64-boot.log"),
        ),
    ]


def test_render_header():
    report = ReportRenderer().render([], generated_at=GENERATED_AT, host="lab01", machine="x86_64")
    assert report.startswith(REPORT_TITLE + "\n" + "=" * len(REPORT_TITLE))
    assert "Test Date: Fri Oct 16 12:00:00 2026" in report
    assert "Test Host: lab01" in report
    assert "- Architecture: x86_64" in report
    assert report.endswith("\n")


def test_render_every_target_with_distinct_results():
    report = ReportRenderer().render(_outcomes(), generated_at=GENERATED_AT, host="h", machine="m")
    assert "## amd64" in report
    assert "## arm64" in report
    assert "## riscv64" in report
    assert "Result: PASS (5/5 checks passed)" in report
    assert "Result: FAIL (2/5 checks passed)" in report
    assert "Result: NO DATA (boot log not found)" in report
    assert "  ✗ Kernel panic detected" in report
    assert "  ✓ Kernel loaded" in report
    assert "Boot Log: /tmp/qemu-riscv64-boot.log" in report


def test_render_preserves_order():
    report = ReportRenderer().render(_outcomes(), generated_at=GENERATED_AT, host="h", machine="m")
    assert report.index("## amd64") < report.index("## arm64") < report.index("## riscv64")


def test_render_uncaptured_log_path():
    outcome = Indeterminate(target=Target.ARM64, reason="boot log not found")
    report = ReportRenderer().render([outcome], generated_at=GENERATED_AT, host="h", machine="m")
    assert "Boot Log: not captured" in report


def test_write_creates_timestamped_file(tmp_path):
    directory = tmp_path / "images"
    path = ReportRenderer().write(_outcomes(), directory, generated_at=GENERATED_AT)
    assert path == directory / "test-report-20261016-120000.txt"
    assert "## riscv64" in path.read_text(encoding="utf-8")
