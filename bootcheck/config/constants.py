"""
Constants, enums, and static values.
"""

from enum import Enum


class Target(str, Enum):
    """CPU architectures an installer image is built and tested for."""

    AMD64 = "amd64"
    ARM64 = "arm64"
    RISCV64 = "riscv64"


ALL_TARGETS: tuple[Target, ...] = (Target.AMD64, Target.ARM64, Target.RISCV64)


class CheckName(str, Enum):
    """Boot log checks, in display order."""

    KERNEL_LOADED = "kernel_loaded"
    INITRAMFS_LOADED = "initramfs_loaded"
    INSTALLER_STARTED = "installer_started"
    NO_PANIC = "no_panic"
    REACHED_SHELL = "reached_shell"


class Polarity(str, Enum):
    """Whether a check passes when its patterns are found or when they are not."""

    PRESENT = "present"
    ABSENT = "absent"


class VerdictStatus(str, Enum):
    """Outcome of classifying one target."""

    PASSED = "passed"
    FAILED = "failed"
    INDETERMINATE = "indeterminate" # No transcript was captured


class Severity(str, Enum):
    """Console message severities."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    TEST = "TEST"


# Installer image naming used by the image build scripts
INSTALLER_IMAGE_PREFIX = "rustica-installer"

REPORT_TITLE = "Rustica OS Installer Test Report"
REPORT_FILENAME_FORMAT = "test-report-%Y%m%d-%H%M%S.txt"

MISSING_TRANSCRIPT_REASON = "boot log not found"
