"""Contractor queries backed by the WordPress REST API."""

import logging
from typing import Callable, List, Optional, Sequence

from contractor_directory.core.distances import sort_by_distance_from_zip
from contractor_directory.etl.transform import to_contractor
from contractor_directory.models import (
    Contractor,
    ContractorFilters,
    ContractorResponse,
    ServiceType,
    WordPressFilters,
)
from contractor_directory.vendors import wordpress

logger = logging.getLogger(__name__)

Annotator = Callable[[Sequence[Contractor], str], Sequence[Contractor]]


class QueryError(RuntimeError):
    """Raised when contractor data could not be loaded from WordPress."""


def to_wordpress_filters(filters: ContractorFilters, page: int, page_size: int) -> WordPressFilters:
    """Map application filters onto what the WordPress endpoint can filter by.

    The taxonomy supports a single term per request, so only the first
    selected service is forwarded. Zip and certifications stay local.
    """
    return WordPressFilters(
        service_type=filters.services[0] if filters.services else "",
        location=filters.state_served,
        page=page,
        per_page=page_size,
    )


def get_contractors(
    filters: ContractorFilters,
    page: int = 1,
    page_size: int = 10,
    annotate: Annotator = sort_by_distance_from_zip,
) -> ContractorResponse:
    wp_filters = to_wordpress_filters(filters, page, page_size)
    try:
        wp_page = wordpress.fetch_contractors(wp_filters)
    except wordpress.RemoteAPIError as exc:
        logger.error("Error fetching contractors from WordPress: %s", exc)
        raise QueryError("Failed to fetch contractors from WordPress") from exc

    contractors = [to_contractor(record) for record in wp_page.records]

    if filters.zip:
        try:
            contractors = list(annotate(contractors, filters.zip))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Error fetching distances from zip %s: %s", filters.zip, exc)

    return ContractorResponse(
        contractors=tuple(contractors),
        total_pages=wp_page.total_pages,
        current_page=wp_page.current_page,
    )


def get_contractor_by_id(contractor_id: str) -> Contractor:
    try:
        numeric_id = int(contractor_id)
    except (TypeError, ValueError) as exc:
        raise QueryError(f"Invalid contractor id: {contractor_id!r}") from exc

    try:
        record = wordpress.fetch_contractor_by_id(numeric_id)
    except wordpress.RemoteAPIError as exc:
        logger.error("Error fetching contractor by ID %s: %s", contractor_id, exc)
        raise QueryError("Failed to fetch contractor") from exc
    return to_contractor(record)


def get_contractor_by_name(name: str) -> Optional[Contractor]:
    """Return the first contractor matching ``name`` in a WordPress search."""
    try:
        wp_page = wordpress.fetch_contractors(WordPressFilters(search=name))
    except wordpress.RemoteAPIError as exc:
        logger.error("Error fetching contractor by name %s: %s", name, exc)
        raise QueryError("Failed to fetch contractor") from exc

    if not wp_page.records:
        return None
    return to_contractor(wp_page.records[0])


def get_service_types() -> List[ServiceType]:
    try:
        return wordpress.fetch_service_types()
    except wordpress.RemoteAPIError as exc:
        logger.error("Error fetching service types from WordPress: %s", exc)
        raise QueryError("Failed to fetch service types") from exc
