"""
Pytest fixtures for UBI feasibility calculator tests.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ubi_model.estimator import UBIEstimator
from ubi_model.scenarios import PRESET_SCENARIOS


# =============================================================================
# PARAMETER FIXTURES
# =============================================================================

@pytest.fixture
def current_params():
    """FY2025 calibration: no UBI is affordable."""
    return PRESET_SCENARIOS["current"].params


@pytest.fixture
def moderate_params():
    """Moderate AI progress: small positive surplus."""
    return PRESET_SCENARIOS["moderate"].params


@pytest.fixture
def advanced_params():
    return PRESET_SCENARIOS["advanced"].params


@pytest.fixture
def proposed_params():
    """Proposed case: large UBI, social insurance fully tax-financed."""
    return PRESET_SCENARIOS["proposed"].params


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def estimator():
    """Five-pass estimator with the reference calibration."""
    return UBIEstimator()
