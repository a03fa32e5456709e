"""Static combo definitions and server-combo conversion."""

from combo_pricing.calculator import price_for_basket
from combo_pricing.models import ComboOptions, Currency, ServerCombo

DEFAULT_ACCENT = "#6495ED"


def default_combos() -> list[ComboOptions]:
    """The bundles offered when the server list is unavailable, at static prices."""
    combos = [
        ComboOptions(
            title="Básico",
            description="Nenhum recurso adicional habilitado. Apenas armazenamento local padrão.",
            accent_color="#B0B0B0",
        ),
        ComboOptions(
            title="Backup HD",
            description=(
                "Inclui backup automático em HD, garantindo segurança das fotos "
                "contra perda de dados."
            ),
            accent_color="#6495ED",
            backup_hd=True,
        ),
        ComboOptions(
            title="Reconhecimento facial + BackupHD + Tratamento com IA",
            description=(
                "Detecta rostos automaticamente, faz backup das fotos em HD e aplica "
                "ajustes automáticos de brilho e saturação usando IA."
            ),
            accent_color="#FF8C00",
            backup_hd=True,
            auto_treatment=True,
        ),
        ComboOptions(
            title="Tratamento avançado + Venda de fotos",
            description=(
                "Aplica tratamento automático nas fotos e habilita a venda de fotos, "
                "permitindo que CPFs específicos vejam todas as imagens."
            ),
            accent_color="#32CD32",
            backup_hd=True,
            auto_treatment=True,
            enable_photo_sales=True,
            allow_cpfs_to_see_all_photos=True,
        ),
        ComboOptions(
            title="Completo: OCR + IA + Backup + Venda",
            description=(
                "Inclui todos os recursos: backup em HD, tratamento automático com IA, "
                "reconhecimento de texto (OCR), venda de fotos e acesso completo para "
                "CPFs autorizados."
            ),
            accent_color="#8A2BE2",
            backup_hd=True,
            auto_treatment=True,
            enable_photo_sales=True,
            allow_cpfs_to_see_all_photos=True,
            ocr=True,
        ),
    ]
    for combo in combos:
        combo.clear_computed_price()
    return combos


def color_for_combo(name: str) -> str:
    """Pick an accent colour from keywords in the combo name."""
    n = name.lower()
    if "reconhecimento facial" in n and "visualização" not in n:
        return "#B0B0B0"
    if "visualização online" in n:
        return "#6495ED"
    if "tratamento" in n and "ia" in n:
        return "#FF8C00"
    if "venda" in n:
        return "#32CD32"
    if "completo" in n or "ocr" in n:
        return "#8A2BE2"
    if "apenas tratamento" in n:
        return "Orange"
    if "gratuitamente" in n:
        return "Pink"
    return DEFAULT_ACCENT


def is_treatment_only(name: str) -> bool:
    """Treatment-only combos skip face recognition."""
    return "apenas tratamento" in name.lower()


def combo_from_server(server_combo: ServerCombo) -> ComboOptions:
    """Convert a server combo; its price is cents per photo."""
    features = server_combo.features
    combo = ComboOptions(
        title=server_combo.combo_name,
        description=server_combo.description,
        accent_color=color_for_combo(server_combo.combo_name),
        backup_hd=features.upload_hd,
        auto_treatment=features.auto_treatment,
        ocr=features.ocr,
        enable_photo_sales=features.enable_photos_sales,
        allow_cpfs_to_see_all_photos=features.allow_cpfs_to_see_all_photos,
        allow_deleted_production_to_be_found_by_anyone=(
            features.allow_deleted_production_to_be_found_anyone
        ),
        uploaded_photos_are_already_sorted=features.upload_photos_are_already_sorted,
        is_treatment_only=is_treatment_only(server_combo.combo_name),
        combo_id=server_combo.id,
        currency=Currency.from_coin(server_combo.coin),
    )
    combo.set_computed_price(price_for_basket(server_combo.price))
    return combo
