import pytest

from combo_pricing import main as main_module
from combo_pricing.models import ComboOptions, ServerCombo
from combo_pricing.service import ComboPriceService


def test_get_refresh_minutes(monkeypatch):
    monkeypatch.delenv("PRICE_REFRESH_MINUTES", raising=False)
    assert main_module.get_refresh_minutes() == 0

    monkeypatch.setenv("PRICE_REFRESH_MINUTES", "15")
    assert main_module.get_refresh_minutes() == 15

    monkeypatch.setenv("PRICE_REFRESH_MINUTES", "often")
    assert main_module.get_refresh_minutes() == 0


def test_run_refresh_replaces_list_with_server_combos():
    def _catalog(session):
        raise AssertionError("server combos must not be repriced from the catalog")

    def _server(session):
        return [ServerCombo(id=9, combo_name="Completo", price=3.0)]

    service = ComboPriceService(lambda: None, fetch_catalog=_catalog, fetch_combos=_server)
    stale = ComboOptions(title="old", description="", accent_color="#000")
    combos = [stale]

    main_module.run_refresh(service, combos)

    assert len(combos) == 1
    assert combos[0] is not stale
    assert combos[0].combo_id == 9
    assert combos[0].computed_price == pytest.approx(30.0)
