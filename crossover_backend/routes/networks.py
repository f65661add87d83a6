"""Auxiliary network routes — L-pad and Zobel."""

import logging

from fastapi import APIRouter, HTTPException

from crossover_backend.models import LPadRequest, LPadResponse, ZobelRequest, ZobelResponse
from crossover_engine.errors import CrossForgeError
from crossover_engine.networks import calculate_lpad, calculate_zobel

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/lpad", response_model=LPadResponse)
async def lpad_endpoint(request: LPadRequest):
    """Calculate L-pad resistors for tweeter attenuation."""
    try:
        return LPadResponse(**calculate_lpad(request.rh, request.attenuation_db).to_dict())
    except CrossForgeError as e:
        logger.warning("L-pad calculation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/zobel", response_model=ZobelResponse)
async def zobel_endpoint(request: ZobelRequest):
    """Calculate a Zobel network from Re and Le."""
    try:
        return ZobelResponse(**calculate_zobel(request.re, request.le).to_dict())
    except CrossForgeError as e:
        logger.warning("Zobel calculation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
