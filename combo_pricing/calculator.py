"""Combo price calculation."""

from combo_pricing.errors import ComboCalculationError
from combo_pricing.models import DEFAULT_OCR_PRICE_CENTS, ComboOptions, PriceCatalog

BASKET_PHOTOS = 1000


def price_for_basket(cents_per_photo: float, photos: int = BASKET_PHOTOS) -> float:
    """Convert a per-photo price in cents to major units for a basket of photos."""
    return (cents_per_photo / 100.0) * photos


def calculate_combo_price(catalog: PriceCatalog, combo: ComboOptions) -> float:
    """
    Price of a 1000-photo basket for a combo, in major currency units.

    Base price and face relevance detection are charged for every combo;
    the remaining add-ons follow the combo's flags. Never negative.
    """
    try:
        backup_hd = bool(combo.backup_hd)
        auto_treatment = bool(combo.auto_treatment)
        ocr = bool(combo.ocr)
        distribution = bool(combo.allow_cpfs_to_see_all_photos)
    except AttributeError as e:
        raise ComboCalculationError(f"Malformed combo {combo!r}: {e}") from e

    total_cents = 0.0
    total_cents += catalog.base_photo_price or 0
    total_cents += catalog.face_relevance_detection_price or 0
    if backup_hd:
        total_cents += catalog.hd_backup_price or 0
    if auto_treatment:
        total_cents += catalog.auto_treatment_price or 0
    if ocr:
        total_cents += (
            catalog.ocr_price if catalog.ocr_price is not None else DEFAULT_OCR_PRICE_CENTS
        )
    if distribution:
        total_cents += catalog.photo_distribution_price or 0

    # Discount subtraction is intentionally not applied.

    return max(0.0, price_for_basket(total_cents))
