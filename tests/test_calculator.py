import itertools

import pytest

from combo_pricing.calculator import calculate_combo_price, price_for_basket
from combo_pricing.errors import ComboCalculationError
from combo_pricing.models import ComboOptions, PriceCatalog

FLAGS = ("backup_hd", "auto_treatment", "ocr", "allow_cpfs_to_see_all_photos")

SCENARIO_CATALOG = PriceCatalog(
    base_photo_price=10,
    face_relevance_detection_price=5,
    hd_backup_price=20,
    auto_treatment_price=0,
    ocr_price=None,
    photo_distribution_price=0,
)


def _combo(**flags) -> ComboOptions:
    return ComboOptions(title="t", description="d", accent_color="#000000", **flags)


def test_backup_hd_adds_hd_price():
    price = calculate_combo_price(SCENARIO_CATALOG, _combo(backup_hd=True))
    assert price == pytest.approx(350.0)


def test_no_flags_charges_base_and_face_detection():
    assert calculate_combo_price(SCENARIO_CATALOG, _combo()) == pytest.approx(150.0)


def test_missing_ocr_price_uses_historical_default():
    catalog = PriceCatalog(
        base_photo_price=0,
        face_relevance_detection_price=0,
        hd_backup_price=0,
        auto_treatment_price=0,
        ocr_price=None,
        photo_distribution_price=0,
    )
    assert calculate_combo_price(catalog, _combo(ocr=True)) == pytest.approx(11.5)


def test_missing_ocr_price_ignored_when_flag_off():
    assert calculate_combo_price(PriceCatalog(), _combo()) == 0.0


def test_distribution_price_follows_cpf_flag():
    catalog = PriceCatalog(photo_distribution_price=3)
    assert calculate_combo_price(catalog, _combo(enable_photo_sales=True)) == 0.0
    assert calculate_combo_price(
        catalog, _combo(allow_cpfs_to_see_all_photos=True)
    ) == pytest.approx(30.0)


@pytest.mark.parametrize("values", list(itertools.product([False, True], repeat=len(FLAGS))))
def test_zero_catalog_is_always_free(values):
    catalog = PriceCatalog(0, 0, 0, 0, 0, 0)
    price = calculate_combo_price(catalog, _combo(**dict(zip(FLAGS, values))))
    assert price == 0.0


def test_never_negative_for_empty_catalog():
    for values in itertools.product([False, True], repeat=len(FLAGS)):
        assert calculate_combo_price(PriceCatalog(), _combo(**dict(zip(FLAGS, values)))) >= 0


@pytest.mark.parametrize("flag", FLAGS)
def test_enabling_a_flag_never_lowers_price(flag):
    catalog = PriceCatalog(
        base_photo_price=1.5,
        face_relevance_detection_price=2,
        hd_backup_price=0.7,
        auto_treatment_price=4,
        ocr_price=2.25,
        photo_distribution_price=0.1,
    )
    for values in itertools.product([False, True], repeat=len(FLAGS)):
        flags = dict(zip(FLAGS, values))
        off = calculate_combo_price(catalog, _combo(**{**flags, flag: False}))
        on = calculate_combo_price(catalog, _combo(**{**flags, flag: True}))
        assert on >= off


def test_calculation_is_pure():
    combo = _combo(backup_hd=True, ocr=True)
    first = calculate_combo_price(SCENARIO_CATALOG, combo)
    second = calculate_combo_price(SCENARIO_CATALOG, combo)
    assert first == second
    assert combo.computed_price == 0.0
    assert combo.backup_hd is True and combo.ocr is True


def test_malformed_combo_raises_calculation_error():
    with pytest.raises(ComboCalculationError):
        calculate_combo_price(SCENARIO_CATALOG, object())


def test_price_for_basket_scales_cents_to_thousand_photos():
    assert price_for_basket(35) == pytest.approx(350.0)
    assert price_for_basket(35, photos=100) == pytest.approx(35.0)
