"""
CrossForge Compute Engine

Passive loudspeaker crossover calculations: 2-way and 3-way filter
component values, L-pad and Zobel networks, tweeter safety checks and
design-intent guidance.

All math is closed form and deterministic; no function holds state.
"""

from crossover_engine.catalog import (
    CrossoverType,
    DesignIntent,
    list_crossover_types,
    list_design_intents,
)
from crossover_engine.errors import CrossForgeError, ConfigurationError, NumericDegeneracy
from crossover_engine.crossover import (
    ComponentSpec,
    CrossoverResult,
    ThreeWayResult,
    calculate_crossover,
    calculate_3way,
)
from crossover_engine.networks import LPadResult, ZobelResult, calculate_lpad, calculate_zobel
from crossover_engine.safety import SafetyWarning, validate_safety, get_intent_guidance
from crossover_engine.components import SnappedComponent, snap_to_e_series, snap_component

__version__ = "0.1.0"
