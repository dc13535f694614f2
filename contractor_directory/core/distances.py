"""Zip-code distance annotation for contractor search results."""

import dataclasses
import logging
import math
from typing import Callable, List, Optional, Sequence

from contractor_directory.models import Contractor

logger = logging.getLogger(__name__)

DistanceLookup = Callable[[Contractor, str], Optional[float]]


class AnnotationError(RuntimeError):
    """Raised when a distance could not be attached to a contractor."""


def _sort_key(contractor: Contractor) -> float:
    return contractor.distance if contractor.distance is not None else math.inf


def sort_by_distance_from_zip(
    contractors: Sequence[Contractor],
    zip_code: str,
    distance_lookup: Optional[DistanceLookup] = None,
) -> List[Contractor]:
    """Attach a distance to each contractor and order them nearest first.

    Without a ``distance_lookup`` no distance is known, so the input order is
    returned unchanged. Contractors whose distance stays unknown sort last.
    """
    if distance_lookup is None:
        return list(contractors)

    annotated = []
    for contractor in contractors:
        try:
            distance = distance_lookup(contractor, zip_code)
        except Exception as exc:  # noqa: BLE001
            raise AnnotationError(f"distance lookup failed for contractor {contractor.id}: {exc}") from exc
        annotated.append(dataclasses.replace(contractor, distance=distance))

    logger.debug("Annotated %d contractors with distance from %s", len(annotated), zip_code)
    return sorted(annotated, key=_sort_key)
