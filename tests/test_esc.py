"""Tests for the ESC SCORE and SCORE2 charts and models."""
import logging
import warnings

import numpy as np
import pandas as pd
import pytest

from cvdrisk.errors import DomainError, InvalidOption, InvalidStratum, MissingInput, ShapeError
from cvdrisk.reference import esc as ref
from cvdrisk.scoring.esc import (
    EscScore2016Table,
    EscScore2Formula,
    EscScore2OPTable,
    EscScore2Table,
    EscScoreGer2016Table,
    EscScoreOPTable,
    _chart_array,
    esc_score2_formula,
    esc_score2_op_formula,
    esc_score2_op_table,
    esc_score2_table,
    esc_score_2016_table,
    esc_score_ger_2016_table,
    esc_score_op_table,
)


# ============================================================================
# Published examples
# ============================================================================

class TestPublishedExamples:
    """Worked examples from the ESC guideline charts and SCORE2 papers."""

    def test_score_ger_2016(self):
        result = esc_score_ger_2016_table(
            sex=['male', 'female'], age=[60, 40], totchol=[270, 195],
            sbp=[162, 135], smoker=[0, 1], mmol=False,
        )
        assert result.tolist() == [7, 0]

    def test_score_2016_high_risk(self):
        result = esc_score_2016_table(
            sex=['male', 'male'], age=[60, 40], totchol=[4, 6],
            sbp=[120, 180], smoker=[0, 1], risk='high', mmol=True,
        )
        assert result.tolist() == [3, 3]

    def test_score_op_high_risk(self):
        result = esc_score_op_table(
            sex=['male', 'female'], age=[73, 65], totchol=[7, 6],
            sbp=[165, 180], smoker=[1, 0], risk='high', mmol=True,
        )
        assert result.tolist() == [46, 5]

    def test_score2_table_moderate(self):
        result = esc_score2_table(
            sex=['male', 'male'], age=[60, 40], totchol=[4.3, 6.1], hdl=[0.9, 1.7],
            sbp=[120, 180], smoker=[0, 1], risk='moderate', mmol=True,
        )
        assert result.tolist() == [7, 9]

    def test_score2_op_table_moderate(self):
        result = esc_score2_op_table(
            sex=['male', 'female'], age=[73, 84], totchol=[7, 6], hdl=[1.2, 2.1],
            sbp=[165, 180], smoker=[1, 0], risk='moderate', mmol=True,
        )
        assert result.tolist() == [34, 27]

    def test_score2_formula_low(self):
        result = esc_score2_formula(
            sex=['male', 'female'], age=[50, 50], totchol=[6.3, 6.3], hdl=[1.4, 1.4],
            sbp=[140, 140], smoker=[1, 1], diabetic=[0, 0], risk='low', mmol=True,
        )
        assert result.tolist() == [6.31, 4.33]

    def test_score2_op_formula_low(self):
        result = esc_score2_op_formula(
            sex=['male', 'female'], age=[75, 75], totchol=[5.5, 5.5], hdl=[1.3, 1.3],
            sbp=[140, 140], smoker=[1, 1], diabetic=[0, 0], risk='low', mmol=True,
        )
        assert result.tolist() == [18.56, 15.16]


# ============================================================================
# Charts
# ============================================================================

class TestCharts:

    def test_units_are_equivalent(self):
        mmol = esc_score2_table(sex='male', age=55, totchol=6.0, hdl=1.2, sbp=150, smoker=1,
                                risk='high', mmol=True)
        mgdl = esc_score2_table(sex='male', age=55, totchol=6.0 * 38.67, hdl=1.2 * 38.67, sbp=150,
                                smoker=1, risk='high', mmol=False)
        assert mmol.tolist() == mgdl.tolist()

    def test_age_outside_chart_uses_nearest_row(self):
        young = esc_score_2016_table(sex='male', age=30, totchol=6, sbp=150, smoker=1, risk='low', mmol=True)
        forty = esc_score_2016_table(sex='male', age=40, totchol=6, sbp=150, smoker=1, risk='low', mmol=True)
        assert young.tolist() == forty.tolist()

    def test_sbp_band_edges(self):
        # SCORE 2016 bands are right-closed, SCORE2 bands left-closed
        calc = EscScoreGer2016Table()
        at_edge = calc.compute_batch(sex='male', age=60, totchol=270, sbp=150, smoker=1)
        below = calc.compute_batch(sex='male', age=60, totchol=270, sbp=145, smoker=1)
        assert at_edge.tolist() == below.tolist()

        at_edge2 = esc_score2_table(sex='male', age=60, totchol=5.5, hdl=1.0, sbp=140, smoker=1, mmol=True)
        above2 = esc_score2_table(sex='male', age=60, totchol=5.5, hdl=1.0, sbp=150, smoker=1, mmol=True)
        assert at_edge2.tolist() == above2.tolist()

    @pytest.mark.parametrize('chart', [
        ref.SCORE_GER_2016,
        ref.SCORE_2016['low'], ref.SCORE_2016['high'],
        ref.SCORE_OP['low'], ref.SCORE_OP['high'],
        *[ref.SCORE2[region] for region in ('low', 'moderate', 'high', 'very high')],
        *[ref.SCORE2_OP[region] for region in ('low', 'moderate', 'high', 'very high')],
    ])
    def test_charts_monotonic(self, chart):
        grid = _chart_array(chart)
        # Axes: female, smoker, age, sbp, chol
        for axis in (2, 3, 4):
            assert np.all(np.diff(grid, axis=axis) >= 0)

    def test_smoking_never_lowers_score2_risk(self):
        grid = _chart_array(ref.SCORE2['moderate'])
        assert np.all(grid[:, 1] >= grid[:, 0])

    def test_compute_single_record(self):
        result = EscScore2Table().compute(sex='female', age=52, totchol=5.2, hdl=1.5, sbp=128,
                                          smoker=0, risk='low', mmol=True)
        assert result['score'] == 'esc_score2_table'
        assert 'points' not in result

    def test_charts_have_no_points(self):
        with pytest.raises(InvalidOption, match='no point total'):
            EscScore2Table().compute_points(sex='male', age=50, totchol=5, hdl=1, sbp=130, smoker=0, mmol=True)

    @pytest.mark.parametrize('calculator, age', [
        (EscScoreGer2016Table(), 55),
        (EscScore2016Table(), 55),
        (EscScoreOPTable(), 70),
        (EscScore2Table(), 55),
        (EscScore2OPTable(), 75),
    ])
    def test_compute_defaults_to_low_risk_region(self, calculator, age):
        record = dict(sex='male', age=age, totchol=6.0, hdl=1.2, sbp=150, smoker=1, mmol=True)
        if 'hdl' not in calculator.REQUIRED:
            del record['hdl']
        result = calculator.compute(**record)
        expected = calculator.compute_batch(**record)
        assert result['score'] == calculator.name
        assert result['risk'] == expected[0]


class TestChartAgeRange:
    """Ages outside a chart are clamped to its rows and logged."""

    def _ages_logged(self, caplog, func, age, **record):
        with caplog.at_level(logging.WARNING, logger='cvdrisk.normalize'):
            func(age=age, **record)
        return caplog.text

    def test_score_ger(self, caplog):
        text = self._ages_logged(caplog, esc_score_ger_2016_table, [20, 50, 90],
                                 sex='male', totchol=6, sbp=150, smoker=1, mmol=True)
        assert 'outside [40, 65]' in text
        assert '2 record(s)' in text

    def test_score2_table(self, caplog):
        text = self._ages_logged(caplog, esc_score2_table, [30, 85],
                                 sex='female', totchol=5.5, hdl=1.3, sbp=140, smoker=0, mmol=True)
        assert 'outside [40, 69]' in text

    def test_score2_op_table_has_no_upper_bound(self, caplog):
        text = self._ages_logged(caplog, esc_score2_op_table, [50, 95],
                                 sex='male', totchol=5.5, hdl=1.3, sbp=140, smoker=0, mmol=True)
        assert 'outside [70, None]' in text
        assert '1 record(s)' in text

    def test_ages_inside_chart_not_logged(self, caplog):
        text = self._ages_logged(caplog, esc_score2_table, [40, 69],
                                 sex='male', totchol=5.5, hdl=1.3, sbp=140, smoker=0, mmol=True)
        assert 'outside' not in text


# ============================================================================
# Validation
# ============================================================================

class TestValidation:

    def test_unknown_region(self):
        with pytest.raises(InvalidOption, match='risk region'):
            esc_score_2016_table(sex='male', age=50, totchol=5, sbp=130, smoker=0, risk='moderate', mmol=True)

    def test_region_aliases(self):
        spaced = esc_score2_table(sex='male', age=50, totchol=5, hdl=1, sbp=130, smoker=0, risk='very high', mmol=True)
        joined = esc_score2_table(sex='male', age=50, totchol=5, hdl=1, sbp=130, smoker=0, risk='veryhigh', mmol=True)
        assert spaced.tolist() == joined.tolist()

    def test_mmol_flag_must_be_boolean(self):
        with pytest.raises(InvalidOption):
            esc_score_ger_2016_table(sex='male', age=50, totchol=5, sbp=130, smoker=0, mmol='yes')

    def test_shape_mismatch(self):
        with pytest.raises(ShapeError):
            esc_score_ger_2016_table(sex=['male', 'female'], age=[50, 60, 70], totchol=200, sbp=130, smoker=0)

    def test_missing_value(self):
        with pytest.raises(MissingInput) as exc_info:
            esc_score_ger_2016_table(sex='male', age=[50, np.nan], totchol=200, sbp=130, smoker=0)
        assert exc_info.value.indices == [1]

    def test_unknown_sex(self):
        with pytest.raises(InvalidStratum):
            esc_score_ger_2016_table(sex='x', age=50, totchol=200, sbp=130, smoker=0)

    def test_hdl_above_total_cholesterol(self):
        with pytest.raises(DomainError, match='hdl'):
            esc_score2_table(sex='male', age=50, totchol=[5, 1.5], hdl=[1, 2], sbp=130, smoker=0, mmol=True)

    def test_hdl_above_total_cholesterol_masked(self, mask_domain_errors):
        with pytest.warns(UserWarning, match='hdl'):
            result = esc_score2_table(sex='male', age=50, totchol=[5, 1.5], hdl=[1, 2], sbp=130, smoker=0, mmol=True)
        assert not np.isnan(result[0])
        assert np.isnan(result[1])

    def test_score2_formula_age_range(self):
        with pytest.raises(InvalidStratum) as exc_info:
            esc_score2_formula(sex='male', age=[50, 72], totchol=5, hdl=1.3, sbp=130, smoker=0,
                               diabetic=0, mmol=True)
        assert exc_info.value.indices == [1]

    def test_score2_op_formula_age_range(self):
        with pytest.raises(InvalidStratum):
            esc_score2_op_formula(sex='female', age=65, totchol=5, hdl=1.3, sbp=130, smoker=0,
                                  diabetic=0, mmol=True)

    def test_non_positive_sbp(self):
        with pytest.raises(DomainError, match='sbp'):
            esc_score2_formula(sex='male', age=50, totchol=5, hdl=1.3, sbp=0, smoker=0, diabetic=0, mmol=True)


# ============================================================================
# Cohort properties
# ============================================================================

class TestCohortProperties:

    def test_shape_and_idempotence(self, primary_cohort):
        df = primary_cohort
        args = dict(sex=df['sex'], age=df['age'], totchol=df['totchol'], hdl=df['hdl'],
                    sbp=df['sbp'], smoker=df['smoker'], risk='moderate')
        first = esc_score2_table(**args)
        second = esc_score2_table(**args)
        assert len(first) == len(df)
        np.testing.assert_array_equal(first, second)

    def test_formula_and_chart_rank_alike(self, primary_cohort):
        df = primary_cohort
        args = dict(sex=df['sex'], age=df['age'], totchol=df['totchol'], hdl=df['hdl'],
                    sbp=df['sbp'], smoker=df['smoker'], risk='high')
        chart = esc_score2_table(**args)
        model = EscScore2Formula().compute_batch(diabetic=0, **args)
        assert pd.Series(chart).corr(pd.Series(model), method='spearman') > 0.8

    def test_formula_increases_with_sbp(self):
        result = esc_score2_formula(sex='female', age=60, totchol=5.5, hdl=1.4, sbp=[110, 130, 150, 170],
                                    smoker=0, diabetic=0, risk='moderate', mmol=True)
        assert np.all(np.diff(result) > 0)

    def test_no_warnings_for_valid_input(self, primary_cohort):
        df = primary_cohort
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            esc_score_ger_2016_table(sex=df['sex'], age=df['age'], totchol=df['totchol'],
                                     sbp=df['sbp'], smoker=df['smoker'])
