"""Advisory routes — tweeter safety checks and design-intent tips."""

import logging

from fastapi import APIRouter, Query

from crossover_backend.models import (
    IntentGuidanceResponse,
    SafetyRequest,
    SafetyResponse,
    SafetyWarningModel,
)
from crossover_engine.safety import get_intent_guidance, validate_safety

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/safety", response_model=SafetyResponse)
async def safety_endpoint(request: SafetyRequest):
    """Check a crossover point against tweeter resonance and slope."""
    warnings = validate_safety(
        request.rh,
        request.rl,
        request.frequency,
        request.fs,
        request.crossover_type,
    )
    if warnings:
        logger.info(
            "Safety check at %sHz produced %d warning(s)", request.frequency, len(warnings)
        )
    return SafetyResponse(warnings=[SafetyWarningModel(**w.to_dict()) for w in warnings])


@router.get("/intent-guidance", response_model=IntentGuidanceResponse)
async def intent_guidance_endpoint(
    intent: str = Query(..., description="Design intent id or label, e.g. 'warm' or 'Vocal Forward'"),
):
    """Return the tuning tip for a design intent."""
    return IntentGuidanceResponse(intent=intent, guidance=get_intent_guidance(intent))
