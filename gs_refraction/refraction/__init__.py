"""
Refraction Correction
=====================

Angular displacement of the line of sight caused by atmospheric
refraction, and the resulting apparent ground-station coordinates.

- Refraction strategies (constant shell, surface refractive index)
- Angular displacement between refracted and unrefracted directions
- Coordinate correction of the ground station
- Fault-isolated batch correction
"""

from gs_refraction.refraction.models import (
    RefractionModel,
    ConstantShellRefraction,
    SurfaceIndexRefraction,
    build_refraction_model,
)
from gs_refraction.refraction.angles import (
    RefractionGeometry,
    refraction_geometry,
    delta_angle,
)
from gs_refraction.refraction.correction import (
    RefractionResult,
    CoordinateCorrector,
    correct_ground_station,
    correct_ground_station_detailed,
)
from gs_refraction.refraction.batch import BatchOutcome, correct_batch

__all__ = [
    # Strategies
    "RefractionModel",
    "ConstantShellRefraction",
    "SurfaceIndexRefraction",
    "build_refraction_model",
    # Angles
    "RefractionGeometry",
    "refraction_geometry",
    "delta_angle",
    # Correction
    "RefractionResult",
    "CoordinateCorrector",
    "correct_ground_station",
    "correct_ground_station_detailed",
    # Batch
    "BatchOutcome",
    "correct_batch",
]
