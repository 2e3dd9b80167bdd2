"""Target endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from bootcheck.api.models import QemuCommandResponse, TargetInfo
from bootcheck.config.constants import ALL_TARGETS, Target
from bootcheck.config.settings import Settings, get_settings
from bootcheck.errors import InstallerImageNotFoundError
from bootcheck.services.emulator import boot_command_for, build_disk_command, scratch_disk_path
from bootcheck.services.transcripts import TranscriptStore

router = APIRouter()


@router.get("", response_model=list[TargetInfo])
def list_targets(
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> list[TargetInfo]:
    """List supported targets and whether a boot log was captured for each."""
    store = TranscriptStore(settings)
    return [
        TargetInfo(
            target=target,
            transcript_path=str(store.path_for(target)),
            transcript_exists=store.exists(target),
        )
        for target in ALL_TARGETS
    ]


@router.get("/{target}/qemu-command", response_model=QemuCommandResponse)
def get_qemu_command(
    target: Target,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> QemuCommandResponse:
    """Show the QEMU command line that boots the target's installer image."""
    try:
        command = boot_command_for(target, settings)
    except InstallerImageNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    test_disk = scratch_disk_path(settings.images_dir, target)
    return QemuCommandResponse(
        target=target,
        argv=list(command.argv),
        timeout=command.timeout,
        disk_command=build_disk_command(test_disk, settings.test_disk_size),
    )
