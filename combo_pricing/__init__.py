"""Dynamic combo pricing for photo collections."""

from combo_pricing.cache import PriceCache
from combo_pricing.calculator import calculate_combo_price
from combo_pricing.models import ComboOptions, PriceCatalog
from combo_pricing.service import ComboPriceService

__all__ = ["ComboOptions", "ComboPriceService", "PriceCache", "PriceCatalog", "calculate_combo_price"]
