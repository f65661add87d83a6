"""
Crossover topology and design-intent catalog.

Each crossover type names a passive filter order and alignment. The enum
value is a stable identifier; the human-readable label lives in a separate
definition table so the UI text can change without breaking callers.

Alignments follow the Butterworth/Linkwitz-Riley/Bessel standard tables.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from crossover_engine.errors import ConfigurationError


class CrossoverType(str, Enum):
    BUTTERWORTH_1ST = 'butterworth_1st'
    BUTTERWORTH_2ND = 'butterworth_2nd'
    LINKWITZ_RILEY_2ND = 'linkwitz_riley_2nd'
    BESSEL_2ND = 'bessel_2nd'
    BUTTERWORTH_3RD = 'butterworth_3rd'
    LINKWITZ_RILEY_4TH = 'linkwitz_riley_4th'

    @property
    def label(self) -> str:
        return CROSSOVER_DEFINITIONS[self].label

    @property
    def order(self) -> int:
        return CROSSOVER_DEFINITIONS[self].order

    @classmethod
    def lookup(cls, value) -> Optional['CrossoverType']:
        """Resolve a member, enum value, member name or display label; None if unknown."""
        return _lookup(cls, value, {d.label: t for t, d in CROSSOVER_DEFINITIONS.items()})

    @classmethod
    def parse(cls, value) -> 'CrossoverType':
        """Like lookup(), but raise ConfigurationError for anything unrecognized."""
        member = cls.lookup(value)
        if member is None:
            raise ConfigurationError(
                f"Unknown crossover type {value!r}. "
                f"Available: {[d.label for d in CROSSOVER_DEFINITIONS.values()]}"
            )
        return member


class DesignIntent(str, Enum):
    FLAT = 'flat'
    WARM = 'warm'
    BRIGHT = 'bright'
    VOCAL = 'vocal'

    @property
    def label(self) -> str:
        return INTENT_LABELS[self]

    @classmethod
    def lookup(cls, value) -> Optional['DesignIntent']:
        return _lookup(cls, value, {label: i for i, label in INTENT_LABELS.items()})


def _lookup(enum_cls, value, by_label: Dict):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    if value in by_label:
        return by_label[value]
    for member in enum_cls:
        if value == member.value or value == member.name:
            return member
    return None


@dataclass(frozen=True)
class CrossoverDefinition:
    """Display and listing metadata for one crossover type."""
    label: str
    order: int
    alignment: str
    high_pass: Tuple[str, ...]  # component names in signal-path order
    low_pass: Tuple[str, ...]


CROSSOVER_DEFINITIONS: Dict[CrossoverType, CrossoverDefinition] = {
    CrossoverType.BUTTERWORTH_1ST: CrossoverDefinition(
        label='1st Order Butterworth',
        order=1,
        alignment='butterworth',
        high_pass=('C1',),
        low_pass=('L1',),
    ),
    CrossoverType.BUTTERWORTH_2ND: CrossoverDefinition(
        label='2nd Order Butterworth',
        order=2,
        alignment='butterworth',
        high_pass=('C1', 'L1'),
        low_pass=('C2', 'L2'),
    ),
    CrossoverType.LINKWITZ_RILEY_2ND: CrossoverDefinition(
        label='2nd Order Linkwitz-Riley',
        order=2,
        alignment='linkwitz-riley',
        high_pass=('C1', 'L1'),
        low_pass=('C2', 'L2'),
    ),
    CrossoverType.BESSEL_2ND: CrossoverDefinition(
        label='2nd Order Bessel',
        order=2,
        alignment='bessel',
        high_pass=('C1', 'L1'),
        low_pass=('C2', 'L2'),
    ),
    CrossoverType.BUTTERWORTH_3RD: CrossoverDefinition(
        label='3rd Order Butterworth',
        order=3,
        alignment='butterworth',
        high_pass=('C1', 'L2', 'C3'),
        low_pass=('L1', 'C2', 'L3'),
    ),
    CrossoverType.LINKWITZ_RILEY_4TH: CrossoverDefinition(
        label='4th Order Linkwitz-Riley',
        order=4,
        alignment='linkwitz-riley',
        high_pass=('C1', 'C2', 'L3', 'L4'),
        low_pass=('L1', 'L2', 'C3', 'C4'),
    ),
}

INTENT_LABELS: Dict[DesignIntent, str] = {
    DesignIntent.FLAT: 'Flat / Reference',
    DesignIntent.WARM: 'Warm',
    DesignIntent.BRIGHT: 'Bright',
    DesignIntent.VOCAL: 'Vocal Forward',
}


def list_crossover_types(order: Optional[int] = None) -> List[Dict]:
    """List all crossover types, optionally filtered by filter order."""
    result = []
    for crossover_type, definition in CROSSOVER_DEFINITIONS.items():
        if order is not None and definition.order != order:
            continue
        result.append({
            'id': crossover_type.value,
            'label': definition.label,
            'order': definition.order,
            'alignment': definition.alignment,
            'high_pass': list(definition.high_pass),
            'low_pass': list(definition.low_pass),
        })
    return result


def list_design_intents() -> List[Dict]:
    return [{'id': intent.value, 'label': label} for intent, label in INTENT_LABELS.items()]
