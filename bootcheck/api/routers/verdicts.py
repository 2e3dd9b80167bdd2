"""Verdict endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from bootcheck.api.models import ClassifyRequest, OutcomeResponse
from bootcheck.config.constants import Target
from bootcheck.config.settings import Settings, get_settings
from bootcheck.orchestrator.validation import ValidationRunner
from bootcheck.services.classifier import BootVerdictClassifier
from bootcheck.services.transcripts import normalize_console_text

router = APIRouter()


@router.post("", response_model=OutcomeResponse)
async def classify_text(
    request: ClassifyRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> dict[str, Any]:
    """Classify transcript text posted in the request body."""
    classifier = BootVerdictClassifier.from_settings(settings)
    verdict = classifier.classify(normalize_console_text(request.transcript), request.target)
    return verdict.to_dict()


@router.get("/{target}", response_model=OutcomeResponse)
def classify_stored(
    target: Target,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> dict[str, Any]:
    """
    Classify the boot log the collector captured for a target.

    A missing boot log is reported with status ``indeterminate``, not as an
    HTTP error.
    """
    runner = ValidationRunner(settings)
    outcome = runner.classify_target(target)
    return outcome.to_dict()
