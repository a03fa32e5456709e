"""Account-details fetcher producing the price catalog."""

import logging

from combo_pricing.fetchers.client import post_for_content
from combo_pricing.models import AccountSession, PriceCatalog

logger = logging.getLogger(__name__)

ACCOUNT_DETAILS_ENDPOINT = "GetAccountDetails"


def fetch_price_catalog(session: AccountSession | None) -> PriceCatalog:
    """Fetch the current per-photo prices for the logged-in account."""
    content = post_for_content(session, ACCOUNT_DETAILS_ENDPOINT)
    catalog = PriceCatalog.from_payload(content)
    logger.info(
        "Price catalog: base=%s face=%s hd=%s auto=%s ocr=%s dist=%s",
        catalog.base_photo_price,
        catalog.face_relevance_detection_price,
        catalog.hd_backup_price,
        catalog.auto_treatment_price,
        catalog.ocr_price,
        catalog.photo_distribution_price,
    )
    return catalog
