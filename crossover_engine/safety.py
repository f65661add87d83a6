"""
Advisory checks on a crossover design.

validate_safety() flags tweeter protection problems: a crossover point too
close to the tweeter's resonance, or a 1st-order slope used low enough that
the tweeter sees significant out-of-band power. The rule set is narrow on
purpose; it is not a substitute for measuring the drivers.

get_intent_guidance() maps a design intent to a tuning tip.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from crossover_engine.catalog import CrossoverType, DesignIntent

HAZARD = 'hazard'
WARNING = 'warning'

# Fc below this multiple of Fs risks mechanical damage
FS_HAZARD_RATIO = 2.0
# Fc below this multiple of Fs is close enough to resonance to warn
FS_WARNING_RATIO = 2.5
# 1st-order networks below this frequency give too little tweeter protection
FIRST_ORDER_MIN_FREQ = 3000

_INTENT_GUIDANCE = {
    DesignIntent.WARM: (
        "Tip: For a 'Warm' sound, add an L-Pad to attenuate the tweeter by 1.5 - 2.0 dB."
    ),
    DesignIntent.BRIGHT: (
        "Tip: For a 'Bright' sound, reduce tweeter L-Pad attenuation or slightly "
        "lower the tweeter's crossover point."
    ),
    DesignIntent.VOCAL: (
        "Tip: To bring vocals forward, ensure the midrange (in 3-way) or the overlap "
        "region is flat and not recessed."
    ),
}
DEFAULT_GUIDANCE = 'Standard reference alignment selected.'


@dataclass(frozen=True)
class SafetyWarning:
    type: str  # HAZARD or WARNING
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {'type': self.type, 'message': self.message}


def _hz(value: float) -> str:
    """Render a frequency the way a user typed it: 1500, not 1500.0."""
    return str(int(value)) if float(value).is_integer() else str(value)


def validate_safety(
    rh: float,
    rl: float,
    f: float,
    fs: Optional[float],
    crossover_type,
) -> List[SafetyWarning]:
    """
    Check a 2-way design for tweeter safety problems.

    At most one resonance warning is produced (hazard takes precedence),
    plus at most one slope hazard. Never raises; an unrecognized
    crossover_type only disables the slope check.

    Args:
        rh, rl: Driver impedances (Ohms), unused by the current rules
        f: Crossover frequency (Hz)
        fs: Tweeter resonance (Hz), or None/0 to skip the resonance check
        crossover_type: CrossoverType member, its value or its display label

    Returns:
        List of SafetyWarning, possibly empty.
    """
    warnings = []

    if fs and f < FS_HAZARD_RATIO * fs:
        warnings.append(SafetyWarning(
            HAZARD,
            f'CRITICAL: Crossover frequency ({_hz(f)}Hz) is less than 2x Tweeter Fs '
            f'({_hz(fs)}Hz). This risk damaging the tweeter at high volumes.',
        ))
    elif fs and f < FS_WARNING_RATIO * fs:
        warnings.append(SafetyWarning(
            WARNING,
            'Caution: Crossover frequency is close to Tweeter resonance. '
            'Consider a steeper slope or higher Fc for better longevity.',
        ))

    if CrossoverType.lookup(crossover_type) is CrossoverType.BUTTERWORTH_1ST and f < FIRST_ORDER_MIN_FREQ:
        warnings.append(SafetyWarning(
            HAZARD,
            f'DANGER: 1st-order slope is very shallow. At {_hz(f)}Hz, this provides minimal '
            f'protection for most tweeters. Use at least 2nd-order or raise Fc.',
        ))

    return warnings


def get_intent_guidance(intent) -> str:
    """Return the tuning tip for a DesignIntent (member, value or label)."""
    return _INTENT_GUIDANCE.get(DesignIntent.lookup(intent), DEFAULT_GUIDANCE)
