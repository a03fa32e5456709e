"""Entry point and scheduler for combo price refreshes."""

import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from combo_pricing.fetchers.client import session_from_env
from combo_pricing.models import ComboOptions
from combo_pricing.service import ComboPriceService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def log_combos(combos: list[ComboOptions]) -> None:
    for combo in combos:
        logger.info("%s: %s / 1000 fotos", combo.title, combo.display_price)


def run_refresh(service: ComboPriceService, combos: list[ComboOptions]) -> None:
    """Reload combos from the server and replace the current list in place."""
    combos[:] = asyncio.run(service.reload_combos())
    log_combos(combos)


def get_refresh_minutes() -> int:
    val = os.environ.get("PRICE_REFRESH_MINUTES", "0")
    try:
        return int(val)
    except ValueError:
        return 0


def main() -> None:
    """Load combos once, then keep refreshing prices if an interval is set."""
    if not os.environ.get("LESSER_LOGIN_TOKEN"):
        logger.warning("LESSER_LOGIN_TOKEN not set — prices cannot be fetched")

    service = ComboPriceService(session_from_env)
    combos = asyncio.run(service.load_combos())
    log_combos(combos)

    interval_minutes = get_refresh_minutes()
    if interval_minutes <= 0:
        return

    logger.info("Scheduler: refreshing prices every %d min", interval_minutes)
    scheduler = BlockingScheduler()
    scheduler.add_job(
        run_refresh,
        trigger=IntervalTrigger(minutes=interval_minutes),
        args=[service, combos],
        id="price_refresh",
        max_instances=1,          # Prevent overlapping runs
        misfire_grace_time=300,
    )
    scheduler.start()


if __name__ == "__main__":
    main()
