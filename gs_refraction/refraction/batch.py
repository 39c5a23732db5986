"""
Batch refraction correction.

Each (spacecraft, ground station) pair is corrected independently. A
failure on one pair is recorded in its outcome and logged; the remaining
pairs are still processed.
"""

import concurrent.futures
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from gs_refraction.config.settings import RefractionConfig
from gs_refraction.core.errors import RefractionError
from gs_refraction.refraction.correction import CoordinateCorrector, RefractionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchOutcome:
    """
    Outcome of one pair in a batch.

    Attributes:
        index: Position of the pair in the input sequences
        satellite: Spacecraft position as given
        ground_station: Ground-station position as given
        result: Correction result, None if the pair failed
        error: Raised error, None if the pair succeeded
    """
    index: int
    satellite: tuple
    ground_station: tuple
    result: Optional[RefractionResult] = None
    error: Optional[RefractionError] = None

    @property
    def ok(self) -> bool:
        """Whether the pair was corrected."""
        return self.error is None


def _correct_pair(corrector: CoordinateCorrector, index: int, satellite, ground_station) -> BatchOutcome:
    sat, gs = tuple(satellite), tuple(ground_station)
    try:
        result = corrector.correct_detailed(satellite, ground_station)
    except RefractionError as e:
        logger.warning(f"Pair {index} failed: {e}")
        return BatchOutcome(index=index, satellite=sat, ground_station=gs, error=e)
    return BatchOutcome(index=index, satellite=sat, ground_station=gs, result=result)


def correct_batch(
    satellites: Sequence,
    ground_stations: Sequence,
    config: Optional[RefractionConfig] = None,
    max_workers: Optional[int] = None,
) -> List[BatchOutcome]:
    """
    Correct many spacecraft/ground-station pairs.

    Parameters
    ----------
    satellites : sequence of array_like
        Spacecraft positions in meters
    ground_stations : sequence of array_like
        Unrefracted ground-station positions in meters, same length
    config : RefractionConfig, optional
        Pipeline configuration
    max_workers : int, optional
        Number of worker threads; serial when None or 1

    Returns
    -------
    outcomes : list of BatchOutcome
        One outcome per pair, in input order

    Raises
    ------
    ValueError
        If the input sequences differ in length
    """
    if len(satellites) != len(ground_stations):
        raise ValueError(
            f"Got {len(satellites)} spacecraft positions but "
            f"{len(ground_stations)} ground stations"
        )

    corrector = CoordinateCorrector(config)
    pairs = list(zip(satellites, ground_stations))

    if max_workers is None or max_workers <= 1:
        outcomes = [
            _correct_pair(corrector, i, sat, gs) for i, (sat, gs) in enumerate(pairs)
        ]
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers) as pool:
            futures = [
                pool.submit(_correct_pair, corrector, i, sat, gs)
                for i, (sat, gs) in enumerate(pairs)
            ]
            outcomes = [f.result() for f in futures]

    n_failed = sum(1 for o in outcomes if not o.ok)
    if n_failed:
        logger.info(f"Batch finished: {len(outcomes) - n_failed} corrected, {n_failed} failed")

    return outcomes
