"""
Tests for tweeter safety checks and design-intent guidance.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from crossover_engine.catalog import CrossoverType, DesignIntent
from crossover_engine.safety import (
    DEFAULT_GUIDANCE,
    HAZARD,
    WARNING,
    get_intent_guidance,
    validate_safety,
)


class TestResonanceCheck:
    """Fc vs tweeter Fs."""

    def test_below_twice_fs_is_hazard(self):
        warnings = validate_safety(8, 8, 1500, 1000, CrossoverType.BUTTERWORTH_2ND)

        assert len(warnings) == 1
        assert warnings[0].type == HAZARD
        assert '(1500Hz)' in warnings[0].message
        assert '(1000Hz)' in warnings[0].message

    def test_close_to_fs_is_warning(self):
        """2·Fs ≤ Fc < 2.5·Fs → warning only."""
        warnings = validate_safety(8, 8, 2200, 1000, CrossoverType.BUTTERWORTH_2ND)

        assert len(warnings) == 1
        assert warnings[0].type == WARNING
        assert warnings[0].message.startswith('Caution:')

    def test_boundaries(self):
        """Exactly 2·Fs is a warning, exactly 2.5·Fs is clear."""
        at_double = validate_safety(8, 8, 2000, 1000, CrossoverType.BUTTERWORTH_2ND)
        assert [w.type for w in at_double] == [WARNING]

        at_limit = validate_safety(8, 8, 2500, 1000, CrossoverType.BUTTERWORTH_2ND)
        assert at_limit == []

    def test_hazard_wins_over_warning(self):
        warnings = validate_safety(8, 8, 1000, 900, CrossoverType.LINKWITZ_RILEY_4TH)
        assert [w.type for w in warnings] == [HAZARD]

    @pytest.mark.parametrize('fs', [None, 0])
    def test_missing_fs_skips_check(self, fs):
        assert validate_safety(8, 8, 1500, fs, CrossoverType.BUTTERWORTH_2ND) == []

    def test_fractional_frequency_rendered(self):
        warnings = validate_safety(8, 8, 1500.5, 1000, CrossoverType.BUTTERWORTH_2ND)
        assert '(1500.5Hz)' in warnings[0].message


class TestSlopeCheck:
    """1st-order slope protection."""

    def test_first_order_low_frequency_is_hazard(self):
        warnings = validate_safety(8, 8, 2000, None, CrossoverType.BUTTERWORTH_1ST)

        assert len(warnings) == 1
        assert warnings[0].type == HAZARD
        assert 'At 2000Hz' in warnings[0].message

    def test_first_order_above_limit_is_clear(self):
        assert validate_safety(8, 8, 3000, None, CrossoverType.BUTTERWORTH_1ST) == []

    def test_both_checks_fire(self):
        warnings = validate_safety(8, 8, 1500, 1000, '1st Order Butterworth')
        assert [w.type for w in warnings] == [HAZARD, HAZARD]
        assert warnings[0].message.startswith('CRITICAL')
        assert warnings[1].message.startswith('DANGER')

    def test_higher_orders_have_no_slope_warning(self):
        for crossover_type in CrossoverType:
            if crossover_type is CrossoverType.BUTTERWORTH_1ST:
                continue
            assert validate_safety(8, 8, 1000, None, crossover_type) == []

    def test_unknown_type_never_raises(self):
        assert validate_safety(8, 8, 1000, None, 'Mystery Alignment') == []

    def test_to_dict(self):
        warning = validate_safety(8, 8, 2200, 1000, CrossoverType.BESSEL_2ND)[0]
        assert warning.to_dict() == {'type': 'warning', 'message': warning.message}


class TestIntentGuidance:

    def test_warm(self):
        assert '1.5 - 2.0 dB' in get_intent_guidance(DesignIntent.WARM)

    def test_bright_by_label(self):
        assert "'Bright'" in get_intent_guidance('Bright')

    def test_vocal_by_value(self):
        assert 'vocals forward' in get_intent_guidance('vocal')

    @pytest.mark.parametrize('intent', [DesignIntent.FLAT, 'Flat / Reference', 'unknown', None])
    def test_default(self, intent):
        assert get_intent_guidance(intent) == DEFAULT_GUIDANCE


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
