"""Severity-tagged console text."""

from bootcheck.config.constants import Severity

ANSI = {
    "reset": "\x1b[0m",
    "red": "\x1b[0;31m",
    "green": "\x1b[0;32m",
    "yellow": "\x1b[1;33m",
    "blue": "\x1b[0;34m",
}

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.INFO: "green",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
    Severity.TEST: "blue",
}

PASS_MARK = "✓"
FAIL_MARK = "✗"
WARN_MARK = "⚠"


def colorize(text: str, color: str) -> str:
    """Wrap text in an ANSI color, resetting afterwards. Unknown colors pass through."""
    seq = ANSI.get(color)
    return f"{seq}{text}{ANSI['reset']}" if seq else text


def style(severity: Severity, message: str, color: bool = True) -> str:
    """
    Prefix a message with its severity tag, e.g. ``[INFO] Kernel loaded``.

    Args:
        severity: Message severity
        message: Message text
        color: Colorize the tag with ANSI escapes

    Returns:
        Styled message
    """
    tag = f"[{severity.value}]"
    if color:
        tag = colorize(tag, SEVERITY_COLORS[severity])
    return f"{tag} {message}"


def mark(passed: bool) -> str:
    return PASS_MARK if passed else FAIL_MARK
