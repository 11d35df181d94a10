"""
Shared pytest fixtures and configuration for all tests.
"""

import pytest
import warnings
import numpy as np
import pandas as pd

from cvdrisk.config import CONFIG


# Configure pytest to handle warnings properly
def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Suppress specific warnings
    warnings.filterwarnings('ignore', category=DeprecationWarning)
    warnings.filterwarnings('ignore', category=FutureWarning)
    warnings.filterwarnings('ignore', category=PendingDeprecationWarning)


# ============================================================================
# Data fixtures
# ============================================================================

@pytest.fixture(scope='session')
def random_seed():
    """Fixed random seed for reproducible tests."""
    return 42


@pytest.fixture
def primary_cohort(random_seed):
    """Generate a synthetic primary-prevention cohort (lipids in mg/dL)."""
    np.random.seed(random_seed)

    n_samples = 200
    totchol = np.random.normal(210, 35, n_samples).clip(130, 320)
    hdl = np.random.normal(52, 12, n_samples).clip(25, 95)

    data = pd.DataFrame({
        'sex': np.random.choice(['male', 'female'], n_samples),
        'ethnicity': np.random.choice(['white', 'aa'], n_samples),
        'age': np.random.randint(40, 70, n_samples),
        'totchol': totchol,
        'hdl': hdl,
        'ldl': (totchol - hdl - 30).clip(60, None),
        'triglycerides': np.random.normal(140, 50, n_samples).clip(40, 400),
        'sbp': np.random.normal(132, 18, n_samples).clip(95, 200),
        'dbp': np.random.normal(82, 10, n_samples).clip(55, 120),
        'smoker': np.random.choice([0, 1], n_samples, p=[0.7, 0.3]),
        'diabetic': np.random.choice([0, 1], n_samples, p=[0.85, 0.15]),
        'bp_med': np.random.choice([0, 1], n_samples, p=[0.75, 0.25]),
        'famMI': np.random.choice([0, 1], n_samples, p=[0.8, 0.2]),
    })

    return data


@pytest.fixture
def secondary_cohort(random_seed):
    """Generate a synthetic cohort of patients with established vascular disease."""
    np.random.seed(random_seed)

    n_samples = 150

    data = pd.DataFrame({
        'sex': np.random.choice(['male', 'female'], n_samples),
        'ethnicity': np.random.choice(['white', 'nw'], n_samples),
        'age': np.random.randint(45, 90, n_samples),
        'bmi': np.random.normal(27, 4, n_samples).clip(16, 45),
        'hr': np.random.randint(50, 110, n_samples),
        'sbp': np.random.normal(135, 20, n_samples).clip(90, 200),
        'egfr': np.random.normal(70, 20, n_samples).clip(15, 120),
        'vasc': np.random.choice([0, 1, 2, 3], n_samples, p=[0.1, 0.6, 0.2, 0.1]),
    })
    for column in ['smoker', 'diabetic', 'cv_event', 'chf', 'af', 'statin', 'asa',
                   'mi', 'ah', 'stroke', 'pad', 'ckd', 'bypass_surg', 'other_surg']:
        data[column] = np.random.choice([0, 1], n_samples, p=[0.7, 0.3])

    return data


# ============================================================================
# Configuration fixtures
# ============================================================================

@pytest.fixture
def mask_domain_errors(monkeypatch):
    """Switch the per-record domain error policy to masking for one test."""
    monkeypatch.setattr(CONFIG, 'domain_errors', 'mask')
    yield CONFIG


# ============================================================================
# Marks and parametrization helpers
# ============================================================================

def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their names."""
    for item in items:
        # Worked examples reproduce published calculations
        if 'published' in item.nodeid.lower():
            item.add_marker(pytest.mark.published)
