"""Server-defined combo list (GetCompanyComboPrices)."""

import logging

from combo_pricing.errors import CatalogFetchFailed
from combo_pricing.fetchers.client import post_for_content
from combo_pricing.models import AccountSession, ServerCombo

logger = logging.getLogger(__name__)

COMBO_PRICES_ENDPOINT = "GetCompanyComboPrices"


def fetch_server_combos(session: AccountSession | None) -> list[ServerCombo]:
    """
    Fetch the company's combos with their per-photo prices.

    Entries that cannot be decoded are logged and skipped.
    """
    content = post_for_content(session, COMBO_PRICES_ENDPOINT)
    if not isinstance(content, list):
        raise CatalogFetchFailed(f"{COMBO_PRICES_ENDPOINT} content is not a list")

    combos: list[ServerCombo] = []
    for item in content:
        try:
            combos.append(ServerCombo.from_payload(item))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping malformed combo %r: %s", item, e)
            continue

    for combo in combos:
        logger.info("  - %s: %.4f per photo (cents)", combo.combo_name, combo.price)
    return combos
