"""Client utilities for the WordPress REST API serving contractor records."""

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from contractor_directory.core.config import get_settings
from contractor_directory.models import ServiceType, WordPressFilters, WordPressPage

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_SESSION.headers.update({"Accept": "application/json"})


class RemoteAPIError(RuntimeError):
    """Raised when the WordPress API is unreachable or returns an unusable response."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


def build_params(filters: WordPressFilters) -> List[Tuple[str, str]]:
    params = [
        ("per_page", str(filters.per_page)),
        ("page", str(filters.page)),
        ("_embed", "true"),
    ]
    if filters.search:
        params.append(("search", filters.search))
    if filters.service_type:
        params.append(("contractor_service_type", filters.service_type))
    if filters.location:
        params.append(("meta_key", "contractor_location"))
        params.append(("meta_value", filters.location))
    return params


def _header_int(response: requests.Response, name: str, default: int) -> int:
    try:
        return int(response.headers.get(name, ""))
    except (TypeError, ValueError):
        return default


def _get_json(path: str, params: Optional[List[Tuple[str, str]]] = None) -> Tuple[Any, requests.Response]:
    """GET ``path`` under the API base and return ``(payload, response)``."""
    settings = get_settings()
    url = f"{settings.wordpress_api_url}/{path}"
    logger.info("Fetching from WordPress API: %s params=%s", url, params)
    try:
        response = _SESSION.get(url, params=params, timeout=settings.request_timeout)
    except requests.RequestException as exc:
        logger.error("WordPress API request failed for %s: %s", url, exc)
        raise RemoteAPIError(f"WordPress API request failed: {exc}") from exc

    logger.debug("WordPress API response status: %s", response.status_code)
    if not 200 <= response.status_code < 300:
        logger.error("WordPress API error response (%s): %s", response.status_code, response.text[:500])
        raise RemoteAPIError(
            f"WordPress API error: {response.status_code} {response.reason}",
            status=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        logger.error("WordPress API returned invalid JSON for %s: %s", url, exc)
        raise RemoteAPIError("WordPress API returned invalid JSON", status=response.status_code) from exc
    return payload, response


def fetch_contractors(filters: Optional[WordPressFilters] = None) -> WordPressPage:
    filters = filters or WordPressFilters()
    payload, response = _get_json("contractor", build_params(filters))
    if not isinstance(payload, list):
        raise RemoteAPIError("WordPress API returned a non-list contractor payload", status=response.status_code)

    logger.info("WordPress API returned %d contractors", len(payload))
    return WordPressPage(
        records=payload,
        total_pages=_header_int(response, "X-WP-TotalPages", 1),
        total_items=_header_int(response, "X-WP-Total", 0),
        current_page=filters.page,
    )


def fetch_contractor_by_id(contractor_id: int) -> Dict[str, Any]:
    payload, response = _get_json(f"contractor/{contractor_id}", [("_embed", "true")])
    if not isinstance(payload, dict):
        raise RemoteAPIError(f"WordPress API returned a malformed contractor {contractor_id}", status=response.status_code)
    return payload


def fetch_service_types() -> List[ServiceType]:
    """Return the service-type taxonomy terms used by the filter dropdown."""
    payload, response = _get_json("contractor_service_type")
    if not isinstance(payload, list):
        raise RemoteAPIError("WordPress API returned a non-list taxonomy payload", status=response.status_code)
    return [
        ServiceType(id=term.get("id"), name=term.get("name") or "", slug=term.get("slug") or "")
        for term in payload
        if isinstance(term, dict)
    ]
