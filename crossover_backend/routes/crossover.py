"""Crossover routes — 2-way and 3-way component values."""

import logging

from fastapi import APIRouter, HTTPException

from crossover_backend.config import DEFAULT_E_SERIES
from crossover_backend.models import (
    CrossoverRequest,
    CrossoverResponse,
    SnappedComponentModel,
    ThreeWayRequest,
    ThreeWayResponse,
)
from crossover_engine.components import snap_component
from crossover_engine.crossover import calculate_crossover, calculate_3way
from crossover_engine.errors import CrossForgeError

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/crossover", response_model=CrossoverResponse)
async def crossover_endpoint(request: CrossoverRequest):
    """Calculate high-pass and low-pass parts for a 2-way crossover."""
    try:
        result = calculate_crossover(request.rh, request.rl, request.frequency, request.crossover_type)
        response = CrossoverResponse.model_validate(result.to_dict())

        if request.e_series is not None:
            series = request.e_series or DEFAULT_E_SERIES
            response.snapped = [
                SnappedComponentModel(**snap_component(part, series).to_dict())
                for part in result.high_pass + result.low_pass
            ]
        return response
    except CrossForgeError as e:
        logger.warning("Crossover calculation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/crossover/3way", response_model=ThreeWayResponse)
async def three_way_endpoint(request: ThreeWayRequest):
    """Calculate a 3-way crossover with a band-pass midrange."""
    try:
        result = calculate_3way(
            request.rw,
            request.rm,
            request.rt,
            request.low_frequency,
            request.high_frequency,
            request.crossover_type,
        )
        return ThreeWayResponse.model_validate(result.to_dict())
    except CrossForgeError as e:
        logger.warning("3-way calculation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
