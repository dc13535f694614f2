"""Utilities for transforming WordPress contractor records into view-models."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup

from contractor_directory.models import Contractor, Service

logger = logging.getLogger(__name__)

# ACF capability flag -> (display name, description); position defines the service id.
SERVICE_FLAGS: Tuple[Tuple[str, str, str], ...] = (
    ("energy_audit", "Energy Audit", "Energy audit services"),
    ("weatherization", "Weatherization", "Weatherization services"),
    ("hvac_heat_pump", "HVAC / Heat Pump", "HVAC and heat pump services"),
    ("electrical", "Electrical", "Electrical services"),
    ("water_heater", "Water Heater", "Water heater services"),
    ("appliances", "Appliances", "Appliance services"),
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str:
    if value is None or value is False:
        return ""
    return str(value).strip()


def strip_markup(html: Any) -> str:
    """Return the plain text of a rendered WordPress field."""
    text = _as_str(html)
    if not text:
        return ""
    return BeautifulSoup(text, "html.parser").get_text().strip()


def _rendered(record: Dict[str, Any], key: str) -> str:
    return strip_markup(_as_dict(record.get(key)).get("rendered"))


def extract_featured_image(record: Dict[str, Any]) -> Optional[str]:
    embedded = _as_dict(record.get("_embedded"))
    media = embedded.get("wp:featuredmedia")
    if isinstance(media, list) and media:
        source_url = _as_dict(media[0]).get("source_url")
        if source_url:
            return str(source_url)
    legacy_url = record.get("featured_media_url")
    return str(legacy_url) if legacy_url else None


def extract_services(acf: Dict[str, Any]) -> List[Service]:
    services = []
    for position, (flag, name, description) in enumerate(SERVICE_FLAGS, start=1):
        if acf.get(flag):
            services.append(Service(id=position, name=name, description=description))
    return services


def to_contractor(record: Dict[str, Any]) -> Contractor:
    record = _as_dict(record)
    acf = _as_dict(record.get("acf"))

    return Contractor(
        id=_as_str(record.get("id")),
        name=_rendered(record, "title"),
        description=_rendered(record, "content"),
        email=_as_str(acf.get("email")),
        phone=_as_str(acf.get("phone_number")),
        website=_as_str(acf.get("website")),
        address_line1=_as_str(acf.get("street_1")),
        address_line2=_as_str(acf.get("street_2")),
        city=_as_str(acf.get("city")),
        state=_as_str(acf.get("state")),
        zip=_as_str(acf.get("zip_code")),
        featured_image_url=extract_featured_image(record),
        services=tuple(extract_services(acf)),
        states_served=(),
        certifications=(),
    )
