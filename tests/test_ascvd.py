"""Tests for the ACC/AHA Pooled Cohort Equations."""
import logging

import numpy as np
import pytest

from cvdrisk.errors import DomainError, InvalidStratum, MissingInput
from cvdrisk.scoring.ascvd import AscvdAccAha, ascvd_acc_aha


def _reference_args(**overrides):
    args = dict(
        ethnicity=['white', 'aa', 'white', 'aa'],
        sex=['female', 'female', 'male', 'male'],
        age=55, totchol=213, hdl=50, sbp=120, smoker=0, diabetic=0, bp_med=0,
    )
    args.update(overrides)
    return args


class TestAscvdAccAha:
    """Pooled Cohort Equations."""

    def test_published_example(self):
        assert ascvd_acc_aha(**_reference_args()).tolist() == [2.05, 3.03, 5.38, 6.07]

    def test_mmol_input(self):
        mgdl = ascvd_acc_aha(**_reference_args())
        mmol = ascvd_acc_aha(**_reference_args(totchol=213 / 38.67, hdl=50 / 38.67), mmol=True)
        np.testing.assert_allclose(mgdl, mmol, atol=0.01)

    def test_risk_factors_increase_risk(self):
        base = ascvd_acc_aha(**_reference_args())
        smoker = ascvd_acc_aha(**_reference_args(smoker=1))
        diabetic = ascvd_acc_aha(**_reference_args(diabetic=1))
        treated = ascvd_acc_aha(**_reference_args(bp_med=1, sbp=140))
        assert np.all(smoker > base)
        assert np.all(diabetic > base)
        assert np.all(treated > base)

    def test_ethnicity_aliases(self):
        aliased = ascvd_acc_aha(**_reference_args(ethnicity=['White', 'African American', 'WHITE', 'AA']))
        assert aliased.tolist() == [2.05, 3.03, 5.38, 6.07]

    def test_unknown_ethnicity(self):
        with pytest.raises(InvalidStratum, match='ethnicity'):
            ascvd_acc_aha(**_reference_args(ethnicity='hispanic'))

    def test_strata_checked_before_domain(self):
        with pytest.raises(InvalidStratum) as exc_info:
            ascvd_acc_aha(**_reference_args(sex=['female', 'x', 'male', 'male'], smoker=[0, 2, 0, 0]))
        assert exc_info.value.parameter == 'sex'
        assert exc_info.value.indices == [1]

    def test_unknown_ethnicity_before_domain(self):
        with pytest.raises(InvalidStratum, match='ethnicity'):
            ascvd_acc_aha(**_reference_args(ethnicity='hispanic', hdl=[50, 0, 50, 50]))

    def test_log_of_non_positive_hdl(self):
        with pytest.raises(DomainError) as exc_info:
            ascvd_acc_aha(**_reference_args(hdl=[50, 0, 50, -1]))
        assert exc_info.value.indices == [1, 3]
        assert 'log' in str(exc_info.value)

    def test_masked_domain_error(self, mask_domain_errors):
        with pytest.warns(UserWarning):
            result = ascvd_acc_aha(**_reference_args(hdl=[50, 0, 50, 50]))
        assert np.isnan(result[1])
        assert result[0] == 2.05

    def test_missing_input(self):
        with pytest.raises(MissingInput, match='bp_med'):
            AscvdAccAha().compute_batch(**_reference_args(bp_med=None))

    def test_age_outside_validated_range_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger='cvdrisk.scoring.ascvd'):
            result = ascvd_acc_aha(**_reference_args(age=[35, 55, 55, 85]))
        assert len(result) == 4
        assert 'outside the validated age range' in caplog.text

    def test_single_record(self):
        result = AscvdAccAha().compute(ethnicity='white', sex='male', age=55, totchol=213, hdl=50,
                                       sbp=120, smoker=0, diabetic=0, bp_med=0)
        assert result == {'score': 'ascvd_acc_aha', 'risk': 5.38}

    def test_shape_preserved(self, primary_cohort):
        df = primary_cohort
        result = ascvd_acc_aha(ethnicity=df['ethnicity'], sex=df['sex'], age=df['age'],
                               totchol=df['totchol'], hdl=df['hdl'], sbp=df['sbp'],
                               smoker=df['smoker'], diabetic=df['diabetic'], bp_med=df['bp_med'])
        assert result.shape == (len(df),)
        assert np.all((result >= 0) & (result <= 100))
