"""Data models for combo pricing."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from combo_pricing.errors import CatalogFetchFailed

# Historical OCR price (cents per photo) used when the account omits it
DEFAULT_OCR_PRICE_CENTS = 1.15

# Static combo prices shown while no dynamic price is available
STATIC_FACE_RECOGNITION_PRICE = 0.0353
STATIC_BACKUP_HD_PRICE = 0.0107
STATIC_AUTO_TREATMENT_PRICE = 0.0287
STATIC_OCR_PRICE = 0.0214


class Currency(str, Enum):
    """Account currency."""

    BRL = "BRL"
    USD = "USD"

    @property
    def symbol(self) -> str:
        return "R$" if self is Currency.BRL else "$"

    @classmethod
    def from_coin(cls, coin: str | None) -> "Currency":
        """Map the server's coin code to a Currency, BRL when unknown."""
        if coin and coin.strip().upper() in ("USD", "US$", "$"):
            return cls.USD
        return cls.BRL

    def format_price(self, value: float) -> str:
        """Render a price with four decimals the way the dashboard shows it."""
        text = f"{value:.4f}"
        if self is Currency.BRL:
            text = text.replace(".", ",")
        return f"{self.symbol} {text}"


def _optional_price(payload: dict, key: str) -> float | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogFetchFailed(f"{key} is not numeric: {value!r}")
    if value < 0:
        raise CatalogFetchFailed(f"{key} is negative: {value!r}")
    return float(value)


@dataclass(frozen=True)
class PriceCatalog:
    """Per-photo add-on prices for one account, in cents."""

    base_photo_price: float | None = None
    face_relevance_detection_price: float | None = None
    hd_backup_price: float | None = None
    auto_treatment_price: float | None = None
    ocr_price: float | None = None
    photo_distribution_price: float | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "PriceCatalog":
        """Build a catalog from the account-details ``content`` object."""
        if not isinstance(payload, dict):
            raise CatalogFetchFailed(f"account details content is not an object: {payload!r}")
        return cls(
            base_photo_price=_optional_price(payload, "basePhotoPrice"),
            face_relevance_detection_price=_optional_price(payload, "faceRelevanceDetectionPrice"),
            hd_backup_price=_optional_price(payload, "hdBackupPrice"),
            auto_treatment_price=_optional_price(payload, "autoTreatmentPrice"),
            ocr_price=_optional_price(payload, "ocrPrice"),
            photo_distribution_price=_optional_price(payload, "photoDistributionPrice"),
        )


@dataclass
class ComboOptions:
    """
    A purchasable feature bundle.

    The feature flags are fixed at construction; pricing only ever writes
    ``computed_price`` (major currency units for a 1000-photo basket).
    """

    title: str
    description: str
    accent_color: str
    backup_hd: bool = False
    auto_treatment: bool = False
    ocr: bool = False
    enable_photo_sales: bool = False
    allow_cpfs_to_see_all_photos: bool = False
    allow_deleted_production_to_be_found_by_anyone: bool = False
    uploaded_photos_are_already_sorted: bool = False
    is_treatment_only: bool = False
    combo_id: int = 0
    currency: Currency = Currency.BRL
    computed_price: float = 0.0

    @property
    def static_price(self) -> float:
        """Offline price built from the historical per-feature values."""
        total = STATIC_FACE_RECOGNITION_PRICE
        if self.backup_hd:
            total += STATIC_BACKUP_HD_PRICE
        if self.auto_treatment:
            total += STATIC_AUTO_TREATMENT_PRICE
        if self.ocr:
            total += STATIC_OCR_PRICE
        return total

    def set_computed_price(self, price: float) -> None:
        self.computed_price = price

    def clear_computed_price(self) -> None:
        """Drop the dynamic price and go back to the static one."""
        self.computed_price = self.static_price

    @property
    def display_price(self) -> str:
        return self.currency.format_price(self.computed_price)


@dataclass
class ServerComboFeatures:
    """Feature switches of a server-defined combo."""

    upload_hd: bool = False
    auto_treatment: bool = False
    ocr: bool = False
    upload_photos_are_already_sorted: bool = False
    allow_cpfs_to_see_all_photos: bool = False
    enable_photos_sales: bool = False
    enable_face_relevance_detection: bool = False
    allow_deleted_production_to_be_found_anyone: bool = False
    backup_five_years: bool = False

    @classmethod
    def from_payload(cls, data: dict | None) -> "ServerComboFeatures":
        data = data or {}
        return cls(
            upload_hd=bool(data.get("uploadHD", False)),
            auto_treatment=bool(data.get("autoTreatment", False)),
            ocr=bool(data.get("ocr", False)),
            upload_photos_are_already_sorted=bool(data.get("uploadPhotosAreAlreadySorted", False)),
            allow_cpfs_to_see_all_photos=bool(data.get("allowCPFsToSeeAllPhotos", False)),
            enable_photos_sales=bool(data.get("enablePhotosSales", False)),
            enable_face_relevance_detection=bool(data.get("enableFaceRelevanceDetection", False)),
            allow_deleted_production_to_be_found_anyone=bool(
                data.get("allowDeletedProductionToBeFoundAnyone", False)
            ),
            backup_five_years=bool(data.get("backupFiveYears", False)),
        )


@dataclass
class ServerCombo:
    """
    Combo as returned by GetCompanyComboPrices (price in cents per photo).

    Every response field is decoded so the typed model mirrors the payload;
    the discount and the face-relevance and five-year-backup switches are
    carried but not used for pricing.
    """

    id: int
    combo_name: str
    price: float
    coin: str | None = None
    description: str = ""
    discount_percentage: float = 0.0
    features: ServerComboFeatures = field(default_factory=ServerComboFeatures)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ServerCombo":
        """Decode one response entry. Raises KeyError/ValueError/TypeError if malformed."""
        return cls(
            id=int(data.get("id") or 0),
            combo_name=str(data["comboName"]),
            price=float(data["price"]),
            coin=data.get("coin"),
            description=data.get("description") or "",
            discount_percentage=float(data.get("discountPercentage") or 0.0),
            features=ServerComboFeatures.from_payload(data.get("features")),
        )


@dataclass
class AccountSession:
    """Authenticated account context used to query the functions API."""

    login_token: str
    api_base: str
