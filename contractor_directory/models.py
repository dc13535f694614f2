"""Value objects shared by the contractor directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Service:
    id: int
    name: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True, slots=True)
class Certification:
    name: str
    short_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "shortName": self.short_name}


@dataclass(frozen=True, slots=True)
class ServiceType:
    """Taxonomy term used to filter contractors by service."""

    id: int
    name: str
    slug: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "slug": self.slug}


@dataclass(frozen=True, slots=True)
class Contractor:
    """Normalized contractor as consumed by the presentation layer."""

    id: str
    name: str = ""
    description: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    featured_image_url: Optional[str] = None
    services: Tuple[Service, ...] = ()
    states_served: Tuple[str, ...] = ()
    certifications: Tuple[Certification, ...] = ()
    distance: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "email": self.email,
            "phone": self.phone,
            "website": self.website,
            "addressLine1": self.address_line1,
            "addressLine2": self.address_line2,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "featuredImageUrl": self.featured_image_url,
            "services": [service.to_dict() for service in self.services],
            "statesServed": list(self.states_served),
            "certifications": [cert.to_dict() for cert in self.certifications],
        }
        # distance is only present once an annotation step has set it
        if self.distance is not None:
            payload["distance"] = self.distance
        return payload


@dataclass(frozen=True, slots=True)
class ContractorFilters:
    """Application-level search filters built from a submitted form."""

    zip: str = ""
    state_served: str = ""
    services: Tuple[str, ...] = ()
    certifications: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ContractorResponse:
    contractors: Tuple[Contractor, ...] = ()
    total_pages: int = 0
    current_page: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contractors": [contractor.to_dict() for contractor in self.contractors],
            "totalPages": self.total_pages,
            "currentPage": self.current_page,
        }


@dataclass(frozen=True, slots=True)
class WordPressFilters:
    """Filter subset understood by the WordPress contractor endpoint."""

    search: str = ""
    service_type: str = ""
    location: str = ""
    page: int = 1
    per_page: int = 10


@dataclass(frozen=True, slots=True)
class WordPressPage:
    """One page of raw contractor records plus pagination metadata."""

    records: List[Dict[str, Any]] = field(default_factory=list, repr=False)
    total_pages: int = 1
    total_items: int = 0
    current_page: int = 1
