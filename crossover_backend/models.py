"""Pydantic models for CrossForge API requests and responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Components ---

class ComponentSpecModel(BaseModel):
    name: str = Field(..., description="Reference designator in signal-path order (C1, L2)")
    value: str = Field(..., description="Value with two decimals")
    unit: str = Field(..., description="uF or mH")


class SnappedComponentModel(BaseModel):
    name: str
    target: str = Field(..., description="Computed value with two decimals")
    value: float = Field(..., description="Nearest E-series value")
    unit: str
    error_pct: float


# --- Crossover ---

class CrossoverRequest(BaseModel):
    rh: float = Field(..., gt=0, description="Tweeter impedance (Ohms)")
    rl: float = Field(..., gt=0, description="Woofer impedance (Ohms)")
    frequency: float = Field(..., gt=0, description="Crossover frequency (Hz)")
    crossover_type: str = Field(..., description="Crossover type id or label, e.g. '2nd Order Butterworth'")
    e_series: Optional[str] = Field(None, description="Also snap parts to this series (E12, E24)")


class CrossoverResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    high_pass: list[ComponentSpecModel] = Field(..., alias="highPass")
    low_pass: list[ComponentSpecModel] = Field(..., alias="lowPass")
    snapped: Optional[list[SnappedComponentModel]] = None


class ThreeWayRequest(BaseModel):
    rw: float = Field(..., gt=0, description="Woofer impedance (Ohms)")
    rm: float = Field(..., gt=0, description="Midrange impedance (Ohms)")
    rt: float = Field(..., gt=0, description="Tweeter impedance (Ohms)")
    low_frequency: float = Field(..., gt=0, description="Woofer/midrange crossover (Hz)")
    high_frequency: float = Field(..., gt=0, description="Midrange/tweeter crossover (Hz)")
    crossover_type: str


class ThreeWayResponse(BaseModel):
    woofer: list[ComponentSpecModel]
    midrange: list[ComponentSpecModel]
    tweeter: list[ComponentSpecModel]


# --- Networks ---

class LPadRequest(BaseModel):
    rh: float = Field(..., gt=0, description="Driver nominal impedance (Ohms)")
    attenuation_db: float = Field(..., gt=0, description="Attenuation (dB)")


class LPadResponse(BaseModel):
    r1: str = Field(..., description="Series resistor (Ohms)")
    r2: str = Field(..., description="Shunt resistor (Ohms)")


class ZobelRequest(BaseModel):
    re: float = Field(..., gt=0, description="DC resistance (Ohms)")
    le: float = Field(..., gt=0, description="Voice coil inductance (mH)")


class ZobelResponse(BaseModel):
    rz: str = Field(..., description="Zobel resistor (Ohms)")
    cz: str = Field(..., description="Zobel capacitor (uF)")


# --- Advisory ---

class SafetyRequest(BaseModel):
    rh: float = Field(..., gt=0)
    rl: float = Field(..., gt=0)
    frequency: float = Field(..., gt=0, description="Crossover frequency (Hz)")
    fs: Optional[float] = Field(None, ge=0, description="Tweeter resonance (Hz)")
    crossover_type: str


class SafetyWarningModel(BaseModel):
    type: str = Field(..., description="hazard or warning")
    message: str


class SafetyResponse(BaseModel):
    warnings: list[SafetyWarningModel]


class IntentGuidanceResponse(BaseModel):
    intent: str
    guidance: str


# --- Catalog ---

class CrossoverTypeInfo(BaseModel):
    id: str
    label: str
    order: int
    alignment: str
    high_pass: list[str]
    low_pass: list[str]


class DesignIntentInfo(BaseModel):
    id: str
    label: str
