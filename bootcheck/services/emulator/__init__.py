"""Emulator command lines."""

from bootcheck.services.emulator.command import (
    InstallerImage,
    QemuCommand,
    boot_command_for,
    build_boot_command,
    build_disk_command,
    find_installer_image,
    qemu_binary,
    scratch_disk_path,
)

__all__ = [
    "InstallerImage",
    "QemuCommand",
    "boot_command_for",
    "build_boot_command",
    "build_disk_command",
    "find_installer_image",
    "qemu_binary",
    "scratch_disk_path",
]
