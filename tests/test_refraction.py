"""Tests for angular displacement and coordinate correction."""

import logging

import numpy as np
import pytest

from gs_refraction.config import RefractionConfig
from gs_refraction.core.constants import EARTH_RADIUS
from gs_refraction.core.errors import (
    DegenerateInputError,
    DivisionByZeroError,
    GeometryInconsistencyError,
)
from gs_refraction.geometry import Point3D, chord_distance, project_to_sphere, zenith_angle
from gs_refraction.refraction import (
    RefractionModel,
    ConstantShellRefraction,
    SurfaceIndexRefraction,
    CoordinateCorrector,
    refraction_geometry,
    delta_angle,
    correct_ground_station,
    correct_ground_station_detailed,
)


def per_axis_translation(proj, gs, linear, distance):
    """Reference axis-by-axis translation of the ground station."""
    out = []
    for p, g in zip(proj, gs):
        diff = abs(p - g)
        step = (linear / distance) * diff
        out.append(g + step if p > g else g - step)
    return np.array(out)


class OffsetRefraction(RefractionModel):
    """Strategy that always bends by a fixed angle."""

    name = "OFFSET"

    def __init__(self, offset):
        self.offset = offset

    def apparent_zenith(self, closure_angle, ground_station=None):
        return closure_angle - self.offset


class TestDeltaAngle:
    """Tests for the angular displacement."""

    def test_overhead_is_zero(self, overhead_pair):
        sat, gs = overhead_pair
        assert np.isclose(delta_angle(sat, gs), 0.0, atol=1e-15)

    def test_closure_angle(self):
        """z0 is the zenith angle plus the central angle."""
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        geom = refraction_geometry(sat, gs)
        zen, dist = zenith_angle(sat, gs)
        assert np.isclose(geom.zenith_angle, zen)
        assert np.isclose(geom.central_angle, dist / EARTH_RADIUS)
        assert np.isclose(geom.closure_angle, zen + dist / EARTH_RADIUS)
        assert np.isclose(geom.delta_angle, geom.closure_angle - geom.apparent_angle)

    def test_constant_shell_formula(self):
        """Displacement follows asin(sin(z0) * R / (R + 15))."""
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        geom = refraction_geometry(sat, gs)
        z0 = geom.closure_angle
        expected = z0 - np.arcsin(np.sin(z0) * EARTH_RADIUS / (EARTH_RADIUS + 15))
        assert np.isclose(delta_angle(sat, gs), expected, rtol=1e-12)

    def test_default_is_constant_shell(self):
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        assert delta_angle(sat, gs) == delta_angle(sat, gs, ConstantShellRefraction())

    def test_monotonic_with_zenith(self, synthesized_cases):
        """Displacement never decreases as the spacecraft sinks toward the horizon."""
        for axis in ("x", "y", "z"):
            cases = [c for c in synthesized_cases if c[0] == axis]
            d_ang = [delta_angle(sat, gs) for _, _, gs, sat in cases]
            assert np.all(np.diff(d_ang) >= 0)

    def test_sharp_growth_near_horizon(self, synthesized_cases):
        """Displacement near the horizon dwarfs the mid-sky value."""
        by_angle = {zen: (gs, sat) for axis, zen, gs, sat in synthesized_cases if axis == "x"}
        mid = delta_angle(by_angle[45.0][1], by_angle[45.0][0])
        low = delta_angle(by_angle[85.0][1], by_angle[85.0][0])
        assert mid > 0
        assert low > 100 * mid

    def test_surface_index_stronger_than_shell(self):
        """The full surface index bends more than a 15 m shell."""
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        assert delta_angle(sat, gs, SurfaceIndexRefraction()) > delta_angle(sat, gs)

    def test_degenerate_propagates(self):
        with pytest.raises(DegenerateInputError):
            delta_angle((EARTH_RADIUS, 0.0, 0.0), (EARTH_RADIUS, 0.0, 0.0))


class TestCoordinateCorrector:
    """Tests for refracted ground-station coordinates."""

    @pytest.fixture
    def corrector(self):
        return CoordinateCorrector()

    def test_overhead_unchanged(self, corrector, overhead_pair):
        """Overhead spacecraft leaves the ground station exactly in place."""
        sat, gs = overhead_pair
        result = corrector.correct_detailed(sat, gs)
        assert np.isclose(result.zenith_angle, 0.0, atol=1e-12)
        assert np.isclose(result.delta_angle, 0.0, atol=1e-15)
        assert np.isclose(result.linear_displacement, 0.0, atol=1e-9)
        assert result.refracted == Point3D(*gs)

    def test_zero_zenith_cases_unchanged(self, corrector, synthesized_cases):
        """All zenith-0 cases return the input ground station."""
        for _, zen, gs, sat in synthesized_cases:
            if zen == 0.0:
                assert corrector.correct(sat, gs) == Point3D(*gs)

    def test_displacement_magnitude(self, corrector):
        """The ground station moves by R * dAng."""
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        result = corrector.correct_detailed(sat, gs)
        assert np.isclose(result.linear_displacement, EARTH_RADIUS * result.delta_angle)
        assert np.isclose(result.displacement, abs(result.linear_displacement))

    def test_moves_toward_projection(self, corrector):
        """Refraction pulls the apparent station toward the spacecraft projection."""
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        refracted = corrector.correct(sat, gs)
        proj = project_to_sphere(sat)
        assert chord_distance(refracted, proj) < chord_distance(gs, proj)

    def test_very_distant_satellite(self, corrector):
        """A far-away spacecraft still projects onto the sphere before correction."""
        gs = (EARTH_RADIUS, 0.0, 0.0)
        result = corrector.correct_detailed((1e200, 1e200, 0.0), gs)
        assert np.isclose(result.projection.magnitude, EARTH_RADIUS)
        assert result.linear_displacement > 0
        assert chord_distance(result.refracted, result.projection) < chord_distance(gs, result.projection)

    def test_matches_per_axis_translation(self, corrector):
        """Vector translation agrees with the axis-by-axis rule off the axes too."""
        gs = EARTH_RADIUS * np.array([1.0, 1.0, 1.0]) / np.sqrt(3)
        direction = gs / EARTH_RADIUS + np.array([0.03, -0.05, 0.01])
        sat = 6871000.0 * direction / np.linalg.norm(direction)

        result = corrector.correct_detailed(sat, gs)
        expected = per_axis_translation(
            np.array(result.projection), gs, result.linear_displacement, result.chord_distance,
        )
        assert np.allclose(result.refracted, expected, rtol=0, atol=1e-6)

    def test_detailed_fields(self, corrector):
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        result = corrector.correct_detailed(sat, gs)
        assert result.satellite == Point3D(*sat)
        assert result.ground_station == Point3D(*gs)
        assert np.isclose(result.projection.magnitude, EARTH_RADIUS)
        assert np.isclose(result.zenith_angle_deg, np.degrees(result.zenith_angle))
        assert result.delta_angle_arcsec > 0

    def test_module_functions(self):
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        assert correct_ground_station(sat, gs) == correct_ground_station_detailed(sat, gs).refracted

    def test_coincident_projection_raises(self):
        """Nonzero displacement with no direction to move in is reported."""
        corrector = CoordinateCorrector(model=OffsetRefraction(1e-4))
        # R / (2R) is exact, so the projection lands on the station
        with pytest.raises(DivisionByZeroError) as exc:
            corrector.correct((2 * EARTH_RADIUS, 0.0, 0.0), (EARTH_RADIUS, 0.0, 0.0))
        assert "linear_displacement_m" in exc.value.inputs

    def test_arcsine_domain_error_propagates(self):
        """A refractive index below one breaks Snell's relation near the horizon."""
        from gs_refraction.atmosphere import LapseRateAtmosphere

        model = SurfaceIndexRefraction(LapseRateAtmosphere(refractivity_scale=-0.5))
        corrector = CoordinateCorrector(model=model)
        sat = (6800000.0, 2500000.0, 0.0)
        with pytest.raises(GeometryInconsistencyError):
            corrector.correct(sat, (EARTH_RADIUS, 0.0, 0.0))

    def test_satellite_on_sphere_raises(self, corrector):
        with pytest.raises(DegenerateInputError):
            corrector.correct((0.0, 0.0, EARTH_RADIUS), (EARTH_RADIUS, 0.0, 0.0))

    def test_small_angle_warning(self, corrector, caplog):
        """Large displacements are flagged in the log."""
        sat = (2000000.0, 6500000.0, 0.0)
        with caplog.at_level(logging.WARNING, logger="gs_refraction.refraction.correction"):
            corrector.correct(sat, (EARTH_RADIUS, 0.0, 0.0))
        assert "small-angle limit" in caplog.text

    def test_custom_shell_height(self):
        """A taller shell bends more."""
        sat = (6800000.0, 900000.0, 0.0)
        gs = (EARTH_RADIUS, 0.0, 0.0)
        tall = RefractionConfig.from_dict({"refraction": {"shell_height_m": 150.0}})
        d_default = CoordinateCorrector().correct_detailed(sat, gs).delta_angle
        d_tall = CoordinateCorrector(tall).correct_detailed(sat, gs).delta_angle
        assert d_tall > d_default
