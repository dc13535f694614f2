"""CLI job to run a contractor search against the WordPress API."""

import argparse
import json
import logging
from typing import List, Optional

from contractor_directory.core.config import get_settings
from contractor_directory.core.contractors import QueryError, get_contractors
from contractor_directory.core.search import parse_zip
from contractor_directory.models import ContractorFilters, ContractorResponse

logger = logging.getLogger(__name__)


def run_search(
    *,
    zip_code: Optional[str],
    state: Optional[str],
    services: Optional[List[str]],
    certifications: Optional[List[str]],
    page: int,
    page_size: int,
) -> ContractorResponse:
    filters = ContractorFilters(
        zip=parse_zip(zip_code),
        state_served=(state or "").strip(),
        services=tuple(services or ()),
        certifications=tuple(certifications or ()),
    )
    logger.info("Running contractor search page=%d filters=%s", page, filters)
    response = get_contractors(filters, page, page_size)
    logger.info(
        "Fetched %d contractors (page %d of %d)",
        len(response.contractors),
        response.current_page,
        response.total_pages,
    )
    return response


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search the contractor directory")
    parser.add_argument("--zip", dest="zip_code", help="Five character zip code used for distance sorting")
    parser.add_argument("--state", dest="state", help="State served, e.g. DC")
    parser.add_argument("--service", dest="services", action="append", help="Service type slug (repeatable)")
    parser.add_argument(
        "--certification",
        dest="certifications",
        action="append",
        help="Certification label (repeatable)",
    )
    parser.add_argument("--page", dest="page", type=int, default=1, help="Page number to fetch")
    parser.add_argument(
        "--page-size",
        dest="page_size",
        type=int,
        default=get_settings().page_size,
        help="Number of contractors per page",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.page < 1 or args.page_size < 1:
        parser.error("--page and --page-size must be positive")

    try:
        response = run_search(
            zip_code=args.zip_code,
            state=args.state,
            services=args.services,
            certifications=args.certifications,
            page=args.page,
            page_size=args.page_size,
        )
    except QueryError as exc:
        logger.error("Contractor search failed: %s", exc)
        return 1

    print(json.dumps(response.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
