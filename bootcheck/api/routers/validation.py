"""Validation run endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from bootcheck.api.models import ValidationRequest, ValidationResponse
from bootcheck.config.settings import Settings, get_settings
from bootcheck.orchestrator.validation import ValidationRunner

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ValidationResponse)
async def run_validation(
    request: ValidationRequest | None = None,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> dict[str, Any]:
    """
    Classify the boot logs of several targets.

    Every requested target appears in the response; one target's missing
    or unreadable log never hides the others.
    """
    request = request or ValidationRequest()
    try:
        runner = ValidationRunner(settings)
        summary = await runner.run(request.targets, write_report=request.write_report)
        return summary.to_dict()
    except Exception as e:
        logger.error(f"Error running validation: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e)) from e
