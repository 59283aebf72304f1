"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from tdstool_app.config.containers import PRESET_20FT_STANDARD
from tdstool_app.models import AssetBox, LashingConfig, LashingDirection, LashingMode, MassPoint
from tdstool_app.services.container_fit_service import get_container_profile


@pytest.fixture
def standard_container():
    """20 ft ISO standard container from the catalogue."""
    return get_container_profile(PRESET_20FT_STANDARD)


@pytest.fixture
def sample_asset():
    """Vehicle that fits a 20 ft standard container as presented."""
    return AssetBox(length=4.5, width=2.1, height=2.0, mass=9500.0)


@pytest.fixture
def sample_points():
    """Three mass points with distinct positions."""
    return [
        MassPoint(name="Hull", mass=6000.0, x=2.0, y=0.1, z=1.2),
        MassPoint(name="Turret", mass=2500.0, x=2.4, y=0.0, z=2.1),
        MassPoint(name="Stowage", mass=500.0, x=4.1, y=-0.6, z=1.5),
    ]


@pytest.fixture
def defence_accels():
    """Defence design accelerations (g)."""
    return {
        LashingDirection.FORWARD: 0.8,
        LashingDirection.REARWARD: 0.5,
        LashingDirection.LATERAL: 0.5,
    }


@pytest.fixture
def auto_configs():
    """Auto-sized 2000 daN straps at 20 degrees in every direction."""
    return {
        direction: LashingConfig(mode=LashingMode.AUTO, strap_rating_dan=2000.0, lashing_angle_deg=20.0)
        for direction in LashingDirection
    }


@pytest.fixture
def data_dir(tmp_path):
    """Writable data directory for historian files."""
    path = tmp_path / "tdstool_app_data"
    path.mkdir()
    return path
