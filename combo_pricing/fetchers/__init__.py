"""Fetchers for account prices and server combos."""

from combo_pricing.fetchers.account import fetch_price_catalog
from combo_pricing.fetchers.client import session_from_env
from combo_pricing.fetchers.combos import fetch_server_combos

__all__ = ["fetch_price_catalog", "fetch_server_combos", "session_from_env"]
