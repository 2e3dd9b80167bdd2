"""Request/Response models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from bootcheck.config.constants import CheckName, Target, VerdictStatus


class ClassifyRequest(BaseModel):
    """Request model for classifying literal transcript text."""

    target: Target = Field(..., description="Architecture the transcript belongs to")
    transcript: str = Field(..., description="Serial console text, may be empty")


class CheckResultResponse(BaseModel):
    """Outcome of one check."""

    name: CheckName
    label: str
    passed: bool


class OutcomeResponse(BaseModel):
    """Classification outcome for one target.

    Indeterminate outcomes carry a reason and no check counts.
    """

    target: Target
    status: VerdictStatus
    passed: Optional[int] = Field(None, description="Checks passed, absent when indeterminate")
    total: Optional[int] = Field(None, description="Checks run, absent when indeterminate")
    success: Optional[bool] = None
    checks: list[CheckResultResponse] = []
    reason: Optional[str] = Field(None, description="Why no checks ran")
    transcript_path: Optional[str] = None


class ValidationRequest(BaseModel):
    """Request model for a multi-target validation run."""

    targets: Optional[list[Target]] = Field(None, description="Defaults to all configured targets")
    write_report: Optional[bool] = Field(None, description="Defaults to the configured flag")


class ValidationResponse(BaseModel):
    """Response model for a validation run."""

    outcomes: list[OutcomeResponse]
    passed: int
    failed: int
    indeterminate: int
    all_passed: bool
    report_path: Optional[str] = None


class TargetInfo(BaseModel):
    """A target and the location of its boot log."""

    target: Target
    transcript_path: str
    transcript_exists: bool


class QemuCommandResponse(BaseModel):
    """Boot command the log collector would run for a target."""

    target: Target
    argv: list[str]
    timeout: int
    disk_command: list[str]


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
