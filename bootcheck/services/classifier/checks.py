"""Boot log check definitions.

Patterns are lower-case substrings; the classifier matches them against a
lower-cased transcript. Order here is display order only.
"""

from bootcheck.config.constants import CheckName, Polarity
from bootcheck.services.classifier.models import Check

KERNEL_LOADED = Check(
    name=CheckName.KERNEL_LOADED,
    label="Kernel loaded",
    failure_label="Kernel load not detected",
    patterns=("loading kernel",),
)

INITRAMFS_LOADED = Check(
    name=CheckName.INITRAMFS_LOADED,
    label="Initramfs loaded",
    failure_label="Initramfs load not detected",
    patterns=("loading initramfs", "initrd"),
)

INSTALLER_STARTED = Check(
    name=CheckName.INSTALLER_STARTED,
    label="Installer detected",
    failure_label="Installer not detected",
    patterns=("rustica os installer", "installer"),
)

# Only the installer banner, not any mention of the word
INSTALLER_STARTED_STRICT = Check(
    name=CheckName.INSTALLER_STARTED,
    label="Installer detected",
    failure_label="Installer not detected",
    patterns=("rustica os installer",),
)

NO_PANIC = Check(
    name=CheckName.NO_PANIC,
    label="No kernel panics",
    failure_label="Kernel panic detected",
    patterns=("kernel panic", "panic"),
    polarity=Polarity.ABSENT,
)

REACHED_SHELL = Check(
    name=CheckName.REACHED_SHELL,
    label="System reached shell/login",
    failure_label="System did not reach shell",
    patterns=("root@", "login", "shell"),
)

DEFAULT_CHECKS: tuple[Check, ...] = (
    KERNEL_LOADED,
    INITRAMFS_LOADED,
    INSTALLER_STARTED,
    NO_PANIC,
    REACHED_SHELL,
)

STRICT_CHECKS: tuple[Check, ...] = (
    KERNEL_LOADED,
    INITRAMFS_LOADED,
    INSTALLER_STARTED_STRICT,
    NO_PANIC,
    REACHED_SHELL,
)


def get_checks(strict_installer_match: bool = False) -> tuple[Check, ...]:
    """Return the check set, optionally with the tightened installer check."""
    return STRICT_CHECKS if strict_installer_match else DEFAULT_CHECKS
