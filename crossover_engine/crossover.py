"""
Passive crossover component calculator.

Computes series/shunt capacitor and inductor values for the high-pass
(tweeter) and low-pass (woofer) sections of a 2-way crossover, and
composes three evaluations into a 3-way network with a band-pass midrange.

All formulas are closed form in ω = 2πf and the driver's nominal impedance:

    1st order:   HP C = 1/(ωR)                LP L = R/ω
    2nd order:   HP C = 1/(k·ωR), L = R/(k'·ω)  (k from the alignment table)

Capacitances are returned in µF and inductances in mH, formatted to two
decimal places.

References:
- Dickason, "Loudspeaker Design Cookbook" (7th ed.), ch. 8
- Linkwitz, "Active Crossover Networks for Noncoincident Drivers" (JAES, 1976)
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from crossover_engine.catalog import CrossoverType
from crossover_engine.errors import ConfigurationError, require_positive
from crossover_engine.formatting import to_fixed

UF_PER_F = 1e6
MH_PER_H = 1e3

# Passive LR4 values fitted to published component tables. Units are
# µF·Hz·Ω for capacitors (divide by f·R) and mH·Hz/Ω for inductors
# (multiply by R/f), so results come out directly in µF and mH.
LR4_HP_C1 = 84400
LR4_HP_C2 = 168800
LR4_HP_L3 = 100
LR4_HP_L4 = 200
LR4_LP_L1 = 318
LR4_LP_L2 = 159
LR4_LP_C3 = 212000
LR4_LP_C4 = 106000

# (name, value, unit) before formatting
_Part = Tuple[str, float, str]


@dataclass(frozen=True)
class ComponentSpec:
    """One capacitor or inductor in a computed network."""
    name: str    # e.g. 'C1', 'L2'
    value: str   # two-decimal string, e.g. '6.63'
    unit: str    # 'uF' or 'mH'
    # unrounded value in the same unit, used for E-series snapping
    exact: Optional[float] = field(default=None, compare=False, repr=False)

    @property
    def magnitude(self) -> float:
        return float(self.value)

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'value': self.value, 'unit': self.unit}


@dataclass(frozen=True)
class CrossoverResult:
    high_pass: Tuple[ComponentSpec, ...]
    low_pass: Tuple[ComponentSpec, ...]

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            'highPass': [c.to_dict() for c in self.high_pass],
            'lowPass': [c.to_dict() for c in self.low_pass],
        }


@dataclass(frozen=True)
class ThreeWayResult:
    woofer: Tuple[ComponentSpec, ...]
    midrange: Tuple[ComponentSpec, ...]  # high-pass part, then low-pass part
    tweeter: Tuple[ComponentSpec, ...]

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            'woofer': [c.to_dict() for c in self.woofer],
            'midrange': [c.to_dict() for c in self.midrange],
            'tweeter': [c.to_dict() for c in self.tweeter],
        }


def _cap(name: str, farads: float) -> _Part:
    return (name, farads * UF_PER_F, 'uF')


def _ind(name: str, henries: float) -> _Part:
    return (name, henries * MH_PER_H, 'mH')


def _calc_butterworth_1st(rh: float, rl: float, f: float) -> Tuple[List[_Part], List[_Part]]:
    w = 2 * np.pi * f
    high = [_cap('C1', 1.0 / (w * rh))]
    low = [_ind('L1', rl / w)]
    return high, low


def _second_order(rh: float, rl: float, f: float, c_k: float, l_k: float):
    """
    Shared 2nd-order section: C = 1/(c_k·ω·R), L = R/(l_k·ω).

    Butterworth uses c_k = l_k = √2, Linkwitz-Riley c_k = 2, l_k = 0.5.
    """
    w = 2 * np.pi * f
    high = [
        _cap('C1', 1.0 / (c_k * w * rh)),
        _ind('L1', rh / (l_k * w)),
    ]
    low = [
        _cap('C2', 1.0 / (c_k * w * rl)),
        _ind('L2', rl / (l_k * w)),
    ]
    return high, low


def _calc_butterworth_2nd(rh, rl, f):
    sqrt2 = np.sqrt(2)
    return _second_order(rh, rl, f, sqrt2, sqrt2)


def _calc_linkwitz_riley_2nd(rh, rl, f):
    return _second_order(rh, rl, f, 2.0, 0.5)


def _calc_bessel_2nd(rh, rl, f):
    # Inductors scale up by √3 rather than down, so no shared section here.
    sqrt3 = np.sqrt(3)
    w = 2 * np.pi * f
    high = [
        _cap('C1', 1.0 / (sqrt3 * w * rh)),
        _ind('L1', sqrt3 * rh / w),
    ]
    low = [
        _cap('C2', 1.0 / (sqrt3 * w * rl)),
        _ind('L2', sqrt3 * rl / w),
    ]
    return high, low


def _calc_butterworth_3rd(rh, rl, f):
    w = 2 * np.pi * f
    high = [
        _cap('C1', 1.0 / (1.5 * w * rh)),
        _ind('L2', rh / (1.333 * w)),
        _cap('C3', 1.0 / (0.5 * w * rh)),
    ]
    low = [
        _ind('L1', 1.5 * rl / w),
        _cap('C2', 1.0 / (1.333 * w * rl)),
        _ind('L3', 0.5 * rl / w),
    ]
    return high, low


def _calc_linkwitz_riley_4th(rh, rl, f):
    # Constants are pre-scaled, so no unit conversion here.
    high = [
        ('C1', LR4_HP_C1 / (f * rh), 'uF'),
        ('C2', LR4_HP_C2 / (f * rh), 'uF'),
        ('L3', LR4_HP_L3 * rh / f, 'mH'),
        ('L4', LR4_HP_L4 * rh / f, 'mH'),
    ]
    low = [
        ('L1', LR4_LP_L1 * rl / f, 'mH'),
        ('L2', LR4_LP_L2 * rl / f, 'mH'),
        ('C3', LR4_LP_C3 / (f * rl), 'uF'),
        ('C4', LR4_LP_C4 / (f * rl), 'uF'),
    ]
    return high, low


_CALCULATORS: Dict[CrossoverType, Callable] = {
    CrossoverType.BUTTERWORTH_1ST: _calc_butterworth_1st,
    CrossoverType.BUTTERWORTH_2ND: _calc_butterworth_2nd,
    CrossoverType.LINKWITZ_RILEY_2ND: _calc_linkwitz_riley_2nd,
    CrossoverType.BESSEL_2ND: _calc_bessel_2nd,
    CrossoverType.BUTTERWORTH_3RD: _calc_butterworth_3rd,
    CrossoverType.LINKWITZ_RILEY_4TH: _calc_linkwitz_riley_4th,
}


def _format(parts: List[_Part]) -> Tuple[ComponentSpec, ...]:
    return tuple(ComponentSpec(name, to_fixed(value), unit, float(value)) for name, value, unit in parts)


def calculate_crossover(rh: float, rl: float, f: float, crossover_type) -> CrossoverResult:
    """
    Calculate 2-way crossover component values.

    Args:
        rh: Tweeter (high-pass load) impedance (Ohms)
        rl: Woofer (low-pass load) impedance (Ohms)
        f: Crossover frequency (Hz)
        crossover_type: CrossoverType member, its value or its display label

    Returns:
        CrossoverResult with high-pass and low-pass parts in signal-path order.

    Raises:
        ConfigurationError: crossover_type is not in the catalog.
        NumericDegeneracy: rh, rl or f is not a finite positive number.
    """
    topology = CrossoverType.parse(crossover_type)
    rh = require_positive('rh', rh)
    rl = require_positive('rl', rl)
    f = require_positive('f', f)

    high, low = _CALCULATORS[topology](rh, rl, f)
    return CrossoverResult(high_pass=_format(high), low_pass=_format(low))


def calculate_3way(
    rw: float,
    rm: float,
    rt: float,
    flz: float,
    fhz: float,
    crossover_type,
) -> ThreeWayResult:
    """
    Calculate a 3-way crossover with one topology for both crossover points.

    The woofer gets the low-pass section at flz, the tweeter the high-pass
    section at fhz, and the midrange a band-pass built from the high-pass
    section at flz followed by the low-pass section at fhz.

    Args:
        rw, rm, rt: Woofer, midrange and tweeter impedances (Ohms)
        flz: Woofer/midrange crossover frequency (Hz)
        fhz: Midrange/tweeter crossover frequency (Hz), must exceed flz
        crossover_type: CrossoverType member, its value or its display label

    Raises:
        ConfigurationError: unknown crossover_type, or flz >= fhz.
        NumericDegeneracy: any impedance or frequency is not finite and positive.
    """
    topology = CrossoverType.parse(crossover_type)
    flz = require_positive('flz', flz)
    fhz = require_positive('fhz', fhz)
    if flz >= fhz:
        raise ConfigurationError(
            f"Low crossover point ({flz:g} Hz) must be below high crossover point ({fhz:g} Hz)"
        )

    woofer = calculate_crossover(rw, rw, flz, topology).low_pass
    tweeter = calculate_crossover(rt, rt, fhz, topology).high_pass
    mid_hp = calculate_crossover(rm, rm, flz, topology).high_pass
    mid_lp = calculate_crossover(rm, rm, fhz, topology).low_pass

    return ThreeWayResult(woofer=woofer, midrange=mid_hp + mid_lp, tweeter=tweeter)
