"""Form parsing for the contractor search page."""

import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from contractor_directory.core.config import get_settings
from contractor_directory.core.contractors import get_contractors
from contractor_directory.models import ContractorFilters, ContractorResponse

logger = logging.getLogger(__name__)

ZIP_LENGTH = 5


def _unique(values: Iterable[Any]) -> Tuple[str, ...]:
    seen = []
    for value in values:
        text = str(value).strip()
        if text and text not in seen:
            seen.append(text)
    return tuple(seen)


def _getlist(form: Any, key: str) -> list:
    if hasattr(form, "getlist"):
        return form.getlist(key)
    value = form.get(key)
    if value is None:
        return []
    return list(value) if isinstance(value, (list, tuple)) else [value]


def parse_zip(raw: Any) -> str:
    """Keep a zip only when it is exactly five characters; digits are not checked here."""
    value = str(raw or "")
    return value if len(value) == ZIP_LENGTH else ""


def parse_page_number(raw: Any) -> int:
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def parse_filters(form: Any) -> ContractorFilters:
    return ContractorFilters(
        zip=parse_zip(form.get("zip")),
        state_served=str(form.get("state") or "").strip(),
        services=_unique(_getlist(form, "services")),
        certifications=_unique(_getlist(form, "certifications")),
    )


def handle_search(
    form: Any,
    *,
    query: Optional[Callable[..., ContractorResponse]] = None,
) -> ContractorResponse:
    """Run a directory search from submitted form fields.

    ``form`` is a multi-dict such as ``request.form``; plain mappings work too.
    """
    filters = parse_filters(form)
    page = parse_page_number(form.get("page-number"))
    logger.info("Contractor search page=%d filters=%s", page, filters)
    query = query or get_contractors
    return query(filters, page, get_settings().page_size)


def initial_page() -> ContractorResponse:
    # Data is loaded by the first client-driven search, not on initial render.
    return ContractorResponse(contractors=(), total_pages=0, current_page=1)
