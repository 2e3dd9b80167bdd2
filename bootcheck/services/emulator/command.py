"""QEMU command builders for booting installer images.

Commands are built as argument lists for the log collector; nothing here
spawns QEMU.
"""

from dataclasses import dataclass
from pathlib import Path

from bootcheck.config.constants import INSTALLER_IMAGE_PREFIX, Target
from bootcheck.config.settings import Settings
from bootcheck.errors import InstallerImageNotFoundError

QEMU_BINARIES: dict[Target, str] = {
    Target.AMD64: "qemu-system-x86_64",
    Target.ARM64: "qemu-system-aarch64",
    Target.RISCV64: "qemu-system-riscv64",
}

# Shared by the arm64 and riscv64 virt machines
_VIRT_DEVICES = (
    "-netdev", "user,id=net0",
    "-device", "virtio-net-pci,netdev=net0",
    "-device", "virtio-rng-pci",
)


@dataclass(frozen=True)
class InstallerImage:
    """An installer image found on disk."""

    target: Target
    path: Path

    @property
    def is_iso(self) -> bool:
        return self.path.suffix == ".iso"


@dataclass(frozen=True)
class QemuCommand:
    """A fully resolved emulator command line."""

    target: Target
    argv: tuple[str, ...]
    timeout: int


def qemu_binary(target: Target) -> str:
    """Return the QEMU system emulator for a target."""
    return QEMU_BINARIES[target]


def find_installer_image(images_dir: Path, target: Target) -> InstallerImage | None:
    """
    Find the installer image for a target.

    ISO images are preferred over raw disk images when both exist; only amd64
    can boot an ISO.

    Args:
        images_dir: Directory holding built images
        target: Architecture to look up

    Returns:
        The first matching image in name order, or None
    """
    if not images_dir.is_dir():
        return None
    prefix = f"{INSTALLER_IMAGE_PREFIX}-{target.value}-"
    suffixes = (".iso", ".img") if target == Target.AMD64 else (".img",)
    for suffix in suffixes:
        matches = sorted(images_dir.glob(f"{prefix}*{suffix}"))
        if matches:
            return InstallerImage(target=target, path=matches[0])
    return None


def scratch_disk_path(images_dir: Path, target: Target) -> Path:
    """Blank disk the installer installs onto during a boot test."""
    return images_dir / f"test-{target.value}-disk.img"


def build_disk_command(path: Path, size: str) -> list[str]:
    """Command creating the blank raw disk the installer writes to."""
    return ["qemu-img", "create", "-f", "raw", str(path), size]


def build_boot_command(
    target: Target,
    image: InstallerImage,
    test_disk: Path,
    settings: Settings,
) -> QemuCommand:
    """Build the command that boots an installer image with a serial console on stdio."""
    argv: list[str] = [
        qemu_binary(target),
        "-m", settings.qemu_memory,
        "-smp", str(settings.qemu_smp),
        "-nographic",
        "-serial", "mon:stdio",
    ]

    if target == Target.AMD64:
        if image.is_iso:
            argv += ["-cdrom", str(image.path)]
            argv += ["-drive", f"file={test_disk},format=raw"]
            argv += ["-boot", "d"]
        else:
            argv += ["-drive", f"file={image.path},format=raw"]
            argv += ["-drive", f"file={test_disk},format=raw"]
            argv += ["-boot", "c"]
    else:
        if target == Target.ARM64:
            argv += ["-M", "virt", "-cpu", "cortex-a57"]
        else:
            argv += ["-M", "virt", "-bios", "default"]
        argv += ["-drive", f"if=virtio,file={image.path},format=raw"]
        argv += ["-drive", f"if=virtio,file={test_disk},format=raw"]
        argv += _VIRT_DEVICES

    return QemuCommand(target=target, argv=tuple(argv), timeout=settings.qemu_timeout)


def boot_command_for(target: Target, settings: Settings) -> QemuCommand:
    """
    Resolve the installer image and test disk for a target and build its boot command.

    Raises:
        InstallerImageNotFoundError: No installer image exists for the target
    """
    image = find_installer_image(settings.images_dir, target)
    if image is None:
        raise InstallerImageNotFoundError(target, settings.images_dir)
    return build_boot_command(target, image, scratch_disk_path(settings.images_dir, target), settings)
