"""
Standard (E-series) values for crossover parts.

Computed values such as 6.63 µF are rarely stocked. snap_component()
picks the nearest IEC 60063 preferred value so a design can be built
from catalog parts, and reports how far off the substitute is.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from crossover_engine.crossover import ComponentSpec
from crossover_engine.errors import ConfigurationError, require_positive

# IEC 60063 values per decade (1.0 to <10.0)
E12_BASE = [1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2]

E24_BASE = [
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
]

E_SERIES = {
    'E12': E12_BASE,
    'E24': E24_BASE,
}


@dataclass(frozen=True)
class SnappedComponent:
    name: str
    target: str        # computed value, two decimals
    value: float       # nearest standard value
    unit: str
    error_pct: float   # signed, positive means the standard part is larger

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'target': self.target,
            'value': self.value,
            'unit': self.unit,
            'error_pct': self.error_pct,
        }


def snap_to_e_series(value: float, series: str = 'E24') -> Tuple[float, float]:
    """
    Snap a value to the nearest standard E-series value (log distance).

    Returns:
        Tuple of (snapped_value, error_percentage).
    """
    if series not in E_SERIES:
        raise ConfigurationError(f"Unknown series '{series}'. Must be one of: {list(E_SERIES.keys())}")
    value = require_positive('value', value)

    decade = np.floor(np.log10(value))
    base = np.asarray(E_SERIES[series])
    # Neighbouring decades cover values just below 1.0 or near 10.0
    candidates = np.concatenate([base * 0.1, base, base * 10.0]) * 10 ** decade
    best = candidates[np.argmin(np.abs(np.log10(candidates) - np.log10(value)))]

    # Round away float noise from the decade multiply (4.7 * 10**-1 etc.)
    snapped = float(f'{best:.3g}')
    error_pct = (snapped - value) / value * 100
    return snapped, round(error_pct, 4)


def snap_component(spec: ComponentSpec, series: str = 'E24') -> SnappedComponent:
    """
    Snap a computed ComponentSpec to the nearest standard value in the same unit.

    Uses the unrounded value when the part carries one, so parts that
    display as '0.00' still snap.
    """
    exact = spec.exact if spec.exact is not None else spec.magnitude
    snapped, error_pct = snap_to_e_series(exact, series)
    return SnappedComponent(
        name=spec.name,
        target=spec.value,
        value=snapped,
        unit=spec.unit,
        error_pct=error_pct,
    )
