"""Tests for input normalization, errors and configuration."""
import logging

import numpy as np
import pandas as pd
import pytest

from cvdrisk.config import CONFIG, ProjectConfig, validate_config
from cvdrisk.errors import (
    DomainError,
    InvalidOption,
    InvalidStratum,
    MissingInput,
    RiskScoreError,
    ShapeError,
)
from cvdrisk.normalize import (
    REGION_ALIASES,
    DomainGuard,
    band_index,
    band_points,
    broadcast,
    categorical,
    clamp_range,
    female_mask,
    fill_optional,
    indicator,
    numeric,
    require,
    to_mgdl,
    to_mmol,
    validate_flag,
    validate_option,
    SEX_ALIASES,
)


class TestBroadcast:
    """Alignment of scalar and vector inputs."""

    def test_scalars_repeat_to_common_length(self):
        arrays = broadcast({'age': 50, 'sbp': [120, 130, 140]})
        assert arrays['age'].tolist() == [50, 50, 50]
        assert len(arrays['sbp']) == 3

    def test_series_and_lists_mix(self):
        arrays = broadcast({'age': pd.Series([40, 50]), 'smoker': (0, 1)})
        assert arrays['age'].tolist() == [40, 50]
        assert arrays['smoker'].tolist() == [0, 1]

    def test_none_is_kept(self):
        arrays = broadcast({'age': [40, 50], 'ldl': None})
        assert arrays['ldl'] is None

    def test_length_mismatch_raises(self):
        with pytest.raises(ShapeError, match='same length'):
            broadcast({'age': [40, 50], 'sbp': [120, 130, 140]})

    def test_two_dimensional_input_raises(self):
        with pytest.raises(ShapeError):
            broadcast({'age': [[40, 50], [60, 70]]})


class TestMissingValues:

    def test_require_reports_indices(self):
        with pytest.raises(MissingInput) as exc_info:
            require(np.array([1.0, np.nan, 3.0, np.nan]), 'hdl')
        assert exc_info.value.parameter == 'hdl'
        assert exc_info.value.indices == [1, 3]
        assert 'records 1, 3' in str(exc_info.value)

    def test_require_not_supplied(self):
        with pytest.raises(MissingInput, match='not supplied'):
            require(None, 'ldl')

    def test_fill_optional_defaults(self):
        assert fill_optional(None, 0, 3).tolist() == [0.0, 0.0, 0.0]
        assert fill_optional(np.array([1, np.nan]), 0, 2).tolist() == [1.0, 0.0]

    def test_many_indices_are_truncated(self):
        error = DomainError('age', np.arange(25), 'must be positive')
        assert '(25 records)' in str(error)
        assert len(error.indices) == 25

    def test_errors_are_value_errors(self):
        for cls in (ShapeError, InvalidOption, MissingInput, InvalidStratum, DomainError):
            assert issubclass(cls, RiskScoreError)
            assert issubclass(cls, ValueError)


class TestDomainChecks:

    def test_numeric_flags_text(self):
        guard = DomainGuard(2, 'test', policy='raise')
        with pytest.raises(DomainError, match='must be numeric'):
            numeric(np.array(['120', 'high'], dtype=object), 'sbp', guard)

    def test_numeric_parses_numeric_strings(self):
        guard = DomainGuard(2, 'test', policy='raise')
        assert numeric(np.array(['120', '135.5'], dtype=object), 'sbp', guard).tolist() == [120.0, 135.5]

    def test_indicator_accepts_booleans(self):
        guard = DomainGuard(2, 'test', policy='raise')
        assert indicator(np.array([True, False]), 'smoker', guard).tolist() == [1, 0]

    def test_indicator_rejects_other_codes(self):
        guard = DomainGuard(3, 'test', policy='raise')
        with pytest.raises(DomainError) as exc_info:
            indicator(np.array([0, 1, 2]), 'smoker', guard)
        assert exc_info.value.indices == [2]

    def test_mask_policy_blanks_records(self):
        guard = DomainGuard(3, 'test', policy='mask')
        guard.check(np.array([False, True, False]), 'hdl', 'must be positive')
        with pytest.warns(UserWarning, match='1 record'):
            result = guard.finalize(np.array([1.0, 2.0, 3.0]))
        assert result[0] == 1.0
        assert np.isnan(result[1])

    def test_mask_policy_blanks_labels(self):
        guard = DomainGuard(2, 'test', policy='mask')
        guard.check(np.array([True, False]), 'hdl', 'must be positive')
        with pytest.warns(UserWarning):
            result = guard.finalize(np.array(['0-4%', '=30%'], dtype=object))
        assert result.tolist() == [None, '=30%']

    def test_each_problem_reported_once(self):
        guard = DomainGuard(2, 'test', policy='mask')
        guard.check(np.array([False, True]), 'hdl', 'must be positive')
        with pytest.warns(UserWarning) as record:
            risk = guard.finalize(np.array([1.0, 2.0]))
            points = guard.finalize(np.array([3, 4]))
        assert len(record) == 1
        assert np.isnan(risk[1]) and np.isnan(points[1])

    def test_later_problems_still_reported(self):
        guard = DomainGuard(3, 'test', policy='mask')
        guard.check(np.array([True, False, False]), 'hdl', 'must be positive')
        with pytest.warns(UserWarning, match='hdl'):
            guard.finalize(np.array([1.0, 2.0, 3.0]))
        guard.check(np.array([False, False, True]), 'sbp', 'must be positive')
        with pytest.warns(UserWarning) as record:
            result = guard.finalize(np.array([1.0, 2.0, 3.0]))
        assert len(record) == 1
        assert 'sbp' in str(record[0].message)
        assert np.isnan(result[0]) and np.isnan(result[2])

    def test_policy_defaults_to_config(self, mask_domain_errors):
        assert DomainGuard(1, 'test').policy == 'mask'

    def test_unknown_policy_raises(self):
        with pytest.raises(InvalidOption):
            DomainGuard(1, 'test', policy='ignore')


class TestCategories:

    def test_sex_aliases(self):
        assert female_mask(np.array(['Male', 'f', 'WOMAN', 'm'])).tolist() == [False, True, True, False]

    def test_unknown_sex_raises_invalid_stratum(self):
        with pytest.raises(InvalidStratum) as exc_info:
            female_mask(np.array(['male', 'other']))
        assert exc_info.value.indices == [1]

    def test_categorical_canonical_labels(self):
        assert categorical(np.array(['M', 'female']), 'sex', SEX_ALIASES).tolist() == ['male', 'female']

    def test_region_aliases(self):
        regions = ('low', 'moderate', 'high', 'very high')
        assert validate_option('VeryHigh', regions, 'risk region', REGION_ALIASES) == 'very high'
        assert validate_option('very_high', regions, 'risk region', REGION_ALIASES) == 'very high'
        assert validate_option(' Moderate ', regions, 'risk region', REGION_ALIASES) == 'moderate'

    def test_unknown_option_lists_available(self):
        with pytest.raises(InvalidOption, match='Available'):
            validate_option('medium', ('low', 'high'), 'risk region')

    def test_flags_must_be_boolean(self):
        assert validate_flag(True, 'mmol') is True
        with pytest.raises(InvalidOption):
            validate_flag('yes', 'mmol')


class TestUnitsAndBands:

    def test_cholesterol_conversion(self):
        assert to_mgdl(np.array([5.0]), True)[0] == pytest.approx(5.0 * 38.67)
        assert to_mmol(np.array([193.35]), False)[0] == pytest.approx(5.0)
        assert to_mgdl(np.array([200.0]), False)[0] == 200.0

    def test_triglyceride_factor(self):
        assert to_mgdl(np.array([2.0]), True, CONFIG.mgdl_per_mmol_tg)[0] == pytest.approx(177.14)

    def test_left_closed_bands(self):
        assert band_index(np.array([119, 120, 129.9, 130, 500]), (120, 130)).tolist() == [0, 1, 1, 2, 2]

    def test_right_closed_bands(self):
        assert band_index(np.array([119, 120, 121, 130, 131]), (120, 130), closed='right').tolist() == [0, 0, 1, 1, 2]

    def test_band_points(self):
        assert band_points(np.array([30, 45, 70]), (35, 60), (0, 5, 9)).tolist() == [0, 5, 9]

    def test_band_points_length_check(self):
        with pytest.raises(ValueError):
            band_points(np.array([1.0]), (35, 60), (0, 5))

    def test_clamp_range_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger='cvdrisk.normalize'):
            clipped = clamp_range(np.array([30.0, 50.0, 90.0]), 40, 80, 'age', 'test')
        assert clipped.tolist() == [40.0, 50.0, 80.0]
        assert '2 record(s)' in caplog.text

    def test_clamp_range_without_bounds(self):
        values = np.array([1.0, 2.0])
        assert clamp_range(values, None, None, 'age', 'test') is values


class TestConfig:

    def test_defaults(self):
        cfg = ProjectConfig()
        assert cfg.mgdl_per_mmol_chol == pytest.approx(38.67)
        assert cfg.decimals >= 0
        validate_config(cfg)

    def test_invalid_policy(self):
        with pytest.raises(ValueError, match='CVDRISK_DOMAIN_ERRORS'):
            validate_config(ProjectConfig(domain_errors='ignore'))

    def test_invalid_factor(self):
        with pytest.raises(ValueError):
            validate_config(ProjectConfig(mgdl_per_mmol_chol=0))

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match='log level'):
            validate_config(ProjectConfig(log_level='LOUD'))
