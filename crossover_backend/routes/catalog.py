"""Catalog routes — supported crossover types and design intents."""

from typing import Optional

from fastapi import APIRouter, Query

from crossover_backend.models import CrossoverTypeInfo, DesignIntentInfo
from crossover_engine.catalog import list_crossover_types, list_design_intents

router = APIRouter()


@router.get("/catalog/crossover-types", response_model=list[CrossoverTypeInfo])
async def crossover_types(order: Optional[int] = Query(None, ge=1, le=4)):
    """List crossover types, optionally filtered by filter order."""
    return [CrossoverTypeInfo(**t) for t in list_crossover_types(order)]


@router.get("/catalog/design-intents", response_model=list[DesignIntentInfo])
async def design_intents():
    return [DesignIntentInfo(**i) for i in list_design_intents()]
