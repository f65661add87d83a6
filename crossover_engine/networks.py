"""
Auxiliary driver networks: L-pad attenuator and Zobel compensation.

L-pad: R1 in series with the driver, R2 in parallel with it, sized so the
load seen by the crossover stays at the driver's nominal impedance.

Zobel: series RC across the driver terminals that cancels the rising
impedance of the voice coil inductance at high frequency.

References:
- Dickason, "Loudspeaker Design Cookbook" (7th ed.)
"""

from dataclasses import dataclass
from typing import Dict

from crossover_engine.errors import require_positive
from crossover_engine.formatting import to_fixed

# Zobel resistor margin over Re, leaves headroom for voice coil heating
ZOBEL_MARGIN = 1.25


@dataclass(frozen=True)
class LPadResult:
    r1: str  # series resistor (Ohms)
    r2: str  # shunt resistor (Ohms)

    def to_dict(self) -> Dict[str, str]:
        return {'r1': self.r1, 'r2': self.r2}


@dataclass(frozen=True)
class ZobelResult:
    rz: str  # Ohms
    cz: str  # µF

    def to_dict(self) -> Dict[str, str]:
        return {'rz': self.rz, 'cz': self.cz}


def calculate_lpad(rh: float, db: float) -> LPadResult:
    """
    Calculate L-pad resistors for tweeter attenuation.

    Args:
        rh: Driver nominal impedance (Ohms)
        db: Attenuation (dB), must be > 0

    Returns:
        LPadResult with R1 (series) and R2 (shunt) in Ohms.
    """
    rh = require_positive('rh', rh)
    db = require_positive('db', db)

    k = 10 ** (db / 20.0)
    r1 = rh * (k - 1) / k
    r2 = rh / (k - 1)

    return LPadResult(r1=to_fixed(r1), r2=to_fixed(r2))


def calculate_zobel(re: float, le: float) -> ZobelResult:
    """
    Calculate a Zobel network for voice coil inductance compensation.

    Rz = 1.25·Re, Cz = Le/Rz²

    Args:
        re: DC resistance of the driver (Ohms)
        le: Voice coil inductance (mH)

    Returns:
        ZobelResult with Rz in Ohms and Cz in µF.
    """
    re = require_positive('re', re)
    le = require_positive('le', le)

    le_si = le * 1e-3  # mH → H
    rz = ZOBEL_MARGIN * re
    cz = le_si / (rz ** 2)

    return ZobelResult(rz=to_fixed(rz), cz=to_fixed(cz * 1e6))
