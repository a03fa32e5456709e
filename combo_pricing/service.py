"""Combo price refresh service."""

import asyncio
import logging
from typing import Callable, Iterable

from combo_pricing.cache import PriceCache
from combo_pricing.calculator import calculate_combo_price
from combo_pricing.combos import combo_from_server, default_combos
from combo_pricing.errors import PricingError
from combo_pricing.fetchers.account import fetch_price_catalog
from combo_pricing.fetchers.combos import fetch_server_combos
from combo_pricing.models import AccountSession, ComboOptions, PriceCatalog, ServerCombo

logger = logging.getLogger(__name__)

SessionProvider = Callable[[], AccountSession | None]


class ComboPriceService:
    """
    Keeps combo prices in sync with the account's price catalog.

    One cache per service instance; concurrent fetches are single-flighted
    by a lock and the last stored catalog wins.
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        cache: PriceCache[PriceCatalog] | None = None,
        fetch_catalog: Callable[[AccountSession | None], PriceCatalog] = fetch_price_catalog,
        fetch_combos: Callable[[AccountSession | None], list[ServerCombo]] = fetch_server_combos,
        combo_cache: PriceCache[list[ServerCombo]] | None = None,
    ) -> None:
        self._session_provider = session_provider
        self.cache = cache if cache is not None else PriceCache()
        self.combo_cache = combo_cache if combo_cache is not None else PriceCache(ttl=self.cache.ttl)
        self._fetch_catalog = fetch_catalog
        self._fetch_combos = fetch_combos
        self._catalog_lock = asyncio.Lock()
        self._combos_lock = asyncio.Lock()

    async def get_catalog(self) -> PriceCatalog:
        """Return a fresh catalog, fetching it if the cache has none. Errors propagate."""
        catalog = self.cache.get()
        if catalog is not None:
            logger.debug("Using cached price catalog")
            return catalog

        async with self._catalog_lock:
            catalog = self.cache.get()
            if catalog is not None:
                return catalog
            logger.info("Fetching price catalog from server...")
            catalog = await asyncio.to_thread(self._fetch_catalog, self._session_provider())
            self.cache.set(catalog)
            return catalog

    async def update_all(self, combos: Iterable[ComboOptions]) -> int:
        """
        Recompute ``computed_price`` for every combo from one catalog.

        Fetch failures leave all prices untouched; a failing combo is
        skipped without affecting the others. Returns the number updated.
        """
        combos = list(combos)
        try:
            catalog = await self.get_catalog()
        except PricingError as e:
            logger.warning("Price catalog unavailable, keeping current prices: %s", e)
            return 0
        except Exception as e:
            logger.error("Unexpected error fetching price catalog: %s", e, exc_info=True)
            return 0

        updated = 0
        for combo in combos:
            try:
                price = calculate_combo_price(catalog, combo)
                combo.set_computed_price(price)
            except Exception as e:
                logger.exception("Could not price combo %r: %s", getattr(combo, "title", combo), e)
                continue
            updated += 1
            logger.debug("Combo '%s' priced at %.4f", combo.title, price)

        logger.info("%d/%d combo prices updated", updated, len(combos))
        return updated

    def invalidate(self) -> None:
        """Drop cached catalog and combos, e.g. after a currency or account change."""
        self.cache.invalidate()
        self.combo_cache.invalidate()

    async def refresh(self, combos: Iterable[ComboOptions]) -> int:
        """Manual "refresh prices" action."""
        self.invalidate()
        return await self.update_all(combos)

    async def get_server_combos(self) -> list[ServerCombo]:
        cached = self.combo_cache.get()
        if cached is not None:
            logger.debug("Using cached server combos")
            return cached

        async with self._combos_lock:
            cached = self.combo_cache.get()
            if cached is not None:
                return cached
            logger.info("Fetching combos from server...")
            server_combos = await asyncio.to_thread(self._fetch_combos, self._session_provider())
            self.combo_cache.set(server_combos)
            logger.info("%d combos fetched", len(server_combos))
            return server_combos

    async def get_dynamic_combos(self) -> list[ComboOptions]:
        """Server combos converted for display; empty on any failure."""
        try:
            server_combos = await self.get_server_combos()
        except PricingError as e:
            logger.warning("Server combos unavailable: %s", e)
            return []
        except Exception as e:
            logger.error("Unexpected error fetching server combos: %s", e, exc_info=True)
            return []

        combos: list[ComboOptions] = []
        for server_combo in server_combos:
            try:
                combo = combo_from_server(server_combo)
            except Exception as e:
                logger.error("Could not convert combo '%s': %s", server_combo.combo_name, e)
                continue
            combos.append(combo)
            logger.debug("Combo '%s' created at %s", combo.title, combo.display_price)
        return combos

    async def load_combos(self) -> list[ComboOptions]:
        """Dynamic combos, or the static set priced from the catalog."""
        combos = await self.get_dynamic_combos()
        if combos:
            return combos
        logger.info("Using static combos")
        combos = default_combos()
        await self.update_all(combos)
        return combos

    async def reload_combos(self) -> list[ComboOptions]:
        """
        Manual refresh of the combo list.

        Server combos keep their server price; only the static fallback set
        goes through the catalog calculator.
        """
        self.invalidate()
        return await self.load_combos()
