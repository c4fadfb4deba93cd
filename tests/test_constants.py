"""
Tests for the model constants module.

Validates the fixed domain, initial condition, solver settings and
the per-curve tables shared by every sweep.
"""

from physics.constants import (
    ATOL,
    BETA_VALUES,
    ETA_END,
    ETA_START,
    FACTORS,
    HS_VALUES,
    LABELS,
    LAMBDA_VALUES,
    LINE_STYLES,
    MAX_STEP,
    OMEGA_A_VALUES,
    RTOL,
    STATE_NAMES,
    STATE_SIZE,
    WE_VALUES,
    Y0,
)


class TestDomainAndState:

    def test_domain(self):
        assert ETA_START == 0.0
        assert ETA_END == 1.5

    def test_state_layout(self):
        assert STATE_SIZE == 5
        assert STATE_NAMES == ("F", "Fp", "G", "Gp", "theta")

    def test_initial_condition(self):
        assert Y0 == (0.0, 1.0, 0.0, 1.0, 1.0)
        assert len(Y0) == STATE_SIZE

    def test_tolerances(self):
        assert RTOL == 1e-3
        assert ATOL == 1e-5
        assert MAX_STEP == 0.1


class TestTables:

    def test_parameter_tables(self):
        for table in (WE_VALUES, BETA_VALUES, LAMBDA_VALUES, HS_VALUES, OMEGA_A_VALUES):
            assert table == (0.5, 1.0, 1.5)

    def test_curve_tables_aligned(self):
        assert FACTORS == (1.0, 1.02, 1.04, 1.06)
        assert len(LABELS) == len(LINE_STYLES) == len(FACTORS) == 4

    def test_curve_tables_distinct(self):
        assert len(set(LABELS)) == 4
        assert len(set(LINE_STYLES)) == 4
