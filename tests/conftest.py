"""
Shared fixtures for refraction tests.

Fixture spacecraft positions are built the way the validation tables were:
the spacecraft flies 500 km above the sphere and its projection lies at a
chord of tan(zenith) * 500 km from an axis-aligned ground station.
"""

from pathlib import Path

import numpy as np
import pytest

EARTH_RADIUS = 6371000.0
FIXTURE_ALTITUDE = 500000.0
# Chords longer than the Earth diameter have no projection above 87 deg
MAX_FIXTURE_ZENITH_DEG = 87

DATA_DIR = Path(__file__).parent / "data"

AXIS_GROUND_STATIONS = {
    "x": (EARTH_RADIUS, 0.0, 0.0),
    "y": (0.0, EARTH_RADIUS, 0.0),
    "z": (0.0, 0.0, EARTH_RADIUS),
}


def synthesize_satellite(ground_station, zenith_deg, altitude=FIXTURE_ALTITUDE, earth_radius=EARTH_RADIUS):
    """Spacecraft position seen at ``zenith_deg`` from an axis-aligned ground station."""
    gs = np.asarray(ground_station, dtype=float)
    axis = int(np.argmax(np.abs(gs)))
    sign = np.sign(gs[axis])
    # Offset the projection toward x, or toward y for an x-axis station
    other = 1 if axis == 0 else 0

    chord = np.tan(np.radians(zenith_deg)) * altitude
    along = (2 * earth_radius**2 - chord**2) / (2 * earth_radius)
    across = np.sqrt(earth_radius**2 - along**2)

    proj = np.zeros(3)
    proj[axis] = sign * along
    proj[other] = across

    return tuple(proj * (earth_radius + altitude) / earth_radius)


@pytest.fixture(scope="session")
def axis_fixture_cases():
    """Literal validation table: zenith angle, ground station, spacecraft."""
    data = np.loadtxt(DATA_DIR / "axis_fixture_cases.csv", delimiter=",", skiprows=1)
    return [
        (float(row[0]), tuple(row[1:4]), tuple(row[4:7]))
        for row in data
    ]


@pytest.fixture(scope="session")
def synthesized_cases():
    """Spacecraft positions for the x, y and z stations at 0..87 degrees."""
    cases = []
    for name, gs in AXIS_GROUND_STATIONS.items():
        for zen in range(MAX_FIXTURE_ZENITH_DEG + 1):
            cases.append((name, float(zen), gs, synthesize_satellite(gs, zen)))
    return cases


@pytest.fixture
def overhead_pair():
    """Spacecraft 500 km directly above an x-axis ground station."""
    return (6871000.0, 0.0, 0.0), (EARTH_RADIUS, 0.0, 0.0)
