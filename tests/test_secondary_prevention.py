"""Tests for the REACH, TRA2°P and INVEST secondary-prevention scores."""
import numpy as np
import pandas as pd
import pytest

from cvdrisk.errors import DomainError, InvalidStratum, MissingInput
from cvdrisk.reference import secondary_prevention as ref
from cvdrisk.scoring.invest import InvestScore, invest_score
from cvdrisk.scoring.reach import ReachCvDeath, ReachNextCv, reach_cv_history, reach_score_cv_death, reach_score_next_cv
from cvdrisk.scoring.tra2p import Tra2pScore, tra2p_score


REACH_EXAMPLE = dict(sex='male', age=62, smoker=0, diabetic=1, bmi=25, vasc=1, cv_event=1,
                     chf=1, af=0, statin=1, asa=1, region_ee_or_me=1)

TRA2P_EXAMPLE = dict(age=65, chf=1, ah=1, diabetic=1, stroke=0, bypass_surg=0, other_surg=1,
                     egfr=59, smoker=0)

INVEST_EXAMPLE = dict(
    age=[65, 69, 77], ethnicity=['white', 'white', 'nw'], bmi=[33, 25, 18], hr=[79, 85, 100],
    sbp=[120, 105, 144], mi=[1, 0, 1], chf=[0, 0, 1], stroke=[0, 1, 0], smoker=[1, 0, 0],
    diabetic=[0, 1, 1], pad=0, ckd=[1, 0, 1],
)


# ============================================================================
# REACH
# ============================================================================

class TestReach:

    def test_published_example_next_cv(self):
        assert reach_score_next_cv(**REACH_EXAMPLE).tolist() == [11.0]
        assert ReachNextCv().compute_points(**REACH_EXAMPLE).tolist() == [17]

    def test_published_example_cv_death(self):
        assert reach_score_cv_death(**REACH_EXAMPLE).tolist() == [6.2]
        assert ReachCvDeath().compute_points(**REACH_EXAMPLE).tolist() == [16]

    def test_region_defaults_to_zero(self):
        args = {k: v for k, v in REACH_EXAMPLE.items() if k != 'region_ee_or_me'}
        assert ReachNextCv().compute_points(**args).tolist() == [15]
        assert ReachCvDeath().compute_points(**args).tolist() == [15]

    def test_low_bmi_adds_points(self):
        points = ReachNextCv().compute_points(**{**REACH_EXAMPLE, 'bmi': [25, 20, 19]})
        assert points.tolist() == [17, 19, 19]

    def test_totals_beyond_table_clamp(self):
        worst = dict(sex='male', age=90, bmi=18, smoker=1, diabetic=1, vasc=3, cv_event=1,
                     chf=1, af=1, statin=0, asa=0, region_ee_or_me=1)
        best = dict(sex='female', age=20, bmi=26, smoker=0, diabetic=0, vasc=0, cv_event=0,
                    chf=0, af=0, statin=1, asa=1)
        assert reach_score_next_cv(**worst).tolist() == [50.0]
        assert reach_score_cv_death(**worst).tolist() == [50.0]
        assert reach_score_next_cv(**best).tolist() == [0.0]
        assert reach_score_cv_death(**best).tolist() == [0.0]

    def test_vascular_beds_domain(self):
        with pytest.raises(DomainError) as exc_info:
            reach_score_next_cv(**{**REACH_EXAMPLE, 'vasc': [1, 4, 2]})
        assert exc_info.value.parameter == 'vasc'
        assert exc_info.value.indices == [1]

    def test_vascular_beds_masked(self, mask_domain_errors):
        with pytest.warns(UserWarning, match='vasc'):
            result = reach_score_cv_death(**{**REACH_EXAMPLE, 'vasc': [1, 4]})
        assert result[0] == 6.2
        assert np.isnan(result[1])

    def test_risk_tables_monotonic(self):
        for _, risks in ref.REACH_RISK_TABLE.values():
            assert np.all(np.diff(risks) > 0)

    def test_cohort(self, secondary_cohort):
        df = secondary_cohort
        args = {name: df[name] for name in ReachNextCv.REQUIRED}
        next_cv = reach_score_next_cv(**args)
        cv_death = reach_score_cv_death(**args)
        assert len(next_cv) == len(cv_death) == len(df)
        assert np.all((next_cv >= 0) & (next_cv <= 50))


class TestReachHistory:

    def test_derived_beds_and_events(self):
        result = reach_cv_history(
            khk=[1, 0, 0, 1],
            mvcad=[np.nan, 3, 2, 9],
            pad=[0, 1, 0, 0],
            stroke=[0, 0, 1, 0],
            mi=[1, 1, 0, 1],
            date_mi=['2020-01-01', '2018-01-01', None, '2020-06-01'],
            date_invest='2020-06-30',
        )
        assert isinstance(result, pd.DataFrame)
        assert result['vasc'].tolist() == [1, 2, 1, 1]
        assert result['cv_event'].tolist() == [1, 0, 1, 1]

    def test_without_angiography_or_dates(self):
        result = reach_cv_history(khk=[1, 0], mvcad=None, pad=[1, 0], stroke=[0, 0], mi=[1, 0],
                                  date_mi=None, date_invest=['2021-03-01', '2021-03-01'])
        assert result['vasc'].tolist() == [2, 0]
        assert result['cv_event'].tolist() == [0, 0]

    def test_mi_exactly_one_year_counts(self):
        result = reach_cv_history(khk=1, mvcad=None, pad=0, stroke=0, mi=1,
                                  date_mi='2019-03-01', date_invest='2020-02-29')
        assert result['cv_event'].tolist() == [1]

    def test_examination_date_required(self):
        with pytest.raises(MissingInput, match='date_invest'):
            reach_cv_history(khk=1, mvcad=None, pad=0, stroke=0, mi=0, date_mi=None, date_invest=None)

    def test_feeds_reach_score(self):
        history = reach_cv_history(khk=[1, 1], mvcad=None, pad=[0, 1], stroke=[0, 1], mi=[0, 0],
                                   date_mi=None, date_invest='2020-01-01')
        result = reach_score_next_cv(sex='female', age=70, bmi=24, smoker=0, diabetic=0,
                                     vasc=history['vasc'], cv_event=history['cv_event'],
                                     chf=0, af=0, statin=1, asa=1)
        assert result[1] > result[0]


# ============================================================================
# TRA2°P
# ============================================================================

class TestTra2p:

    def test_published_example(self):
        assert tra2p_score(**TRA2P_EXAMPLE).tolist() == [28.8]
        assert Tra2pScore().compute_points(**TRA2P_EXAMPLE).tolist() == [5]

    def test_thresholds(self):
        base = dict(chf=0, ah=0, diabetic=0, stroke=0, bypass_surg=0, other_surg=0, smoker=0)
        points = Tra2pScore().compute_points(age=[74, 75, 60, 60], egfr=[90, 90, 60, 59.9], **base)
        assert points.tolist() == [0, 1, 0, 1]

    def test_peripheral_disease_adds_a_point(self):
        without = tra2p_score(**TRA2P_EXAMPLE)
        with_pad = tra2p_score(**TRA2P_EXAMPLE, pad=1)
        assert without.tolist() == tra2p_score(**TRA2P_EXAMPLE, pad=0).tolist()
        assert with_pad.tolist() == [45.3]

    def test_many_indicators_share_top_risk(self):
        result = tra2p_score(age=80, chf=1, ah=1, diabetic=1, stroke=1, bypass_surg=1, other_surg=1,
                             egfr=30, smoker=1, pad=1)
        assert result.tolist() == [58.6]

    def test_no_indicators(self):
        result = tra2p_score(age=60, chf=0, ah=0, diabetic=0, stroke=0, bypass_surg=0, other_surg=0,
                             egfr=90, smoker=0)
        assert result.tolist() == [3.5]

    def test_missing_egfr(self):
        with pytest.raises(MissingInput) as exc_info:
            tra2p_score(**{**TRA2P_EXAMPLE, 'egfr': [59, np.nan]})
        assert exc_info.value.indices == [1]

    def test_single_record(self):
        result = Tra2pScore().compute(**TRA2P_EXAMPLE)
        assert result == {'score': 'tra2p_score', 'risk': 28.8, 'points': 5}


# ============================================================================
# INVEST
# ============================================================================

class TestInvest:

    def test_published_anchor_points(self):
        # Only the 8- and 12-point risks are published; the other table entries
        # are interpolated. A 14-point total takes the 12-point risk.
        assert ref.INVEST_RISK[8] == 16 and ref.INVEST_RISK[12] == 36
        assert invest_score(**INVEST_EXAMPLE).tolist() == [16.0, 36.0, 36.0]

    def test_points_are_not_capped(self):
        assert InvestScore().compute_points(**INVEST_EXAMPLE).tolist() == [8, 12, 14]

    def test_ethnicity_aliases(self):
        aliased = invest_score(**{**INVEST_EXAMPLE, 'ethnicity': ['White', 'WHITE', 'non-white']})
        assert aliased.tolist() == [16.0, 36.0, 36.0]

    def test_unknown_ethnicity(self):
        with pytest.raises(InvalidStratum, match='ethnicity'):
            invest_score(**{**INVEST_EXAMPLE, 'ethnicity': ['white', 'asian', 'nw']})

    def test_sbp_is_u_shaped(self):
        base = dict(age=60, ethnicity='nw', bmi=32, hr=70, mi=0, chf=0, stroke=0, smoker=0,
                    diabetic=0, pad=0, ckd=0)
        points = InvestScore().compute_points(sbp=[100, 125, 150], **base)
        assert points.tolist() == [2, 0, 1]

    def test_risk_table_monotonic(self):
        assert np.all(np.diff(ref.INVEST_RISK) > 0)
        assert ref.INVEST_RISK[8] == 16
        assert ref.INVEST_RISK[12] == 36

    def test_cohort(self, secondary_cohort):
        df = secondary_cohort
        args = {name: df[name] for name in InvestScore.REQUIRED}
        result = invest_score(**args)
        assert len(result) == len(df)
        assert set(np.unique(result)) <= set(float(r) for r in ref.INVEST_RISK)
