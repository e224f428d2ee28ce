# models/qr_draft.py
# =============================================================================
# ✏️ Bearbeitungszustand eines QR-Codes (Qrius QR)
# -----------------------------------------------------------------------------
# Hält den aktiven Typ, einen Datensatz pro Typ und die Stiloptionen.
# Nichts davon wird gespeichert; der Zustand lebt nur während der Bearbeitung.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from models.qr_data import (
    RECORD_TYPES,
    QRCodeType,
    QRData,
    record_from_mapping,
    record_to_dict,
)
from utils.qr_engine import encode_record


@dataclass(frozen=True)
class StyleOptions:
    dots_color: str = "#000000"
    background_color: str = "#ffffff"
    dots_type: str = "square"
    corners_square_type: str = "square"
    corners_dot_type: str = "square"
    error_correction_level: str = "H"
    logo_url: Optional[str] = None
    logo_size: Optional[float] = None
    frame_style: Optional[str] = None
    frame_label: Optional[str] = None
    frame_color: Optional[str] = None


def _require_type(qr_type: Union[QRCodeType, str]) -> QRCodeType:
    parsed = QRCodeType.parse(qr_type)
    if parsed is None:
        raise ValueError(f"Unbekannter QR-Typ: {qr_type!r}")
    return parsed


class QRDraft:
    """
    Entwurf, wie ihn der Editor bei jedem Tastendruck aktualisiert.

    update() mischt Teilwerte in den Datensatz des Typs, andere Felder
    bleiben erhalten. Ein Typwechsel verwirft keine Daten.
    """

    def __init__(self) -> None:
        self.active_type: QRCodeType = QRCodeType.URL
        self.records: Dict[QRCodeType, QRData] = {
            qr_type: record_cls() for qr_type, record_cls in RECORD_TYPES.items()
        }
        self.style_options = StyleOptions()

    # ------------------------------------------------------------------
    # Daten
    # ------------------------------------------------------------------
    def set_active_type(self, qr_type: Union[QRCodeType, str]) -> None:
        self.active_type = _require_type(qr_type)

    def update(self, qr_type: Union[QRCodeType, str], **values: Any) -> QRData:
        """Unbekannte Feldnamen -> TypeError (wie dataclasses.replace)."""
        parsed = _require_type(qr_type)
        self.records[parsed] = replace(self.records[parsed], **values)
        return self.records[parsed]

    def update_from_mapping(self, qr_type: Union[QRCodeType, str], data: Mapping[str, Any]) -> QRData:
        """Wie update(), aber für Formular-/JSON-Daten (camelCase erlaubt)."""
        parsed = _require_type(qr_type)
        merged = {**record_to_dict(self.records[parsed]), **dict(data)}
        self.records[parsed] = record_from_mapping(parsed, merged)
        return self.records[parsed]

    def current_data(self) -> Tuple[QRCodeType, QRData]:
        return self.active_type, self.records[self.active_type]

    def payload(self) -> str:
        return encode_record(self.records[self.active_type])

    # ------------------------------------------------------------------
    # Stil
    # ------------------------------------------------------------------
    def set_style_options(self, **options: Any) -> StyleOptions:
        self.style_options = replace(self.style_options, **options)
        return self.style_options

    def apply_preset(self, preset: Mapping[str, Any]) -> StyleOptions:
        """Preset (z. B. Brand-Kit) übernehmen; unbekannte Schlüssel ignorieren."""
        known = {f.name for f in fields(StyleOptions)}
        return self.set_style_options(**{k: v for k, v in preset.items() if k in known})

    def reset_to_defaults(self) -> None:
        """Nur die Stiloptionen; Daten und aktiver Typ bleiben."""
        self.style_options = StyleOptions()

    # ------------------------------------------------------------------
    # Verlauf
    # ------------------------------------------------------------------
    def restore(self, entry: Mapping[str, Any]) -> None:
        """
        Stellt einen Verlaufseintrag in einem Schritt wieder her:
        {"type": ..., "data": Datensatz oder Dict, "style_options": StyleOptions oder Dict}
        """
        qr_type = _require_type(entry["type"])
        data = entry.get("data")
        if isinstance(data, RECORD_TYPES[qr_type]):
            record = data
        else:
            # Dict, Datensatz eines anderen Typs oder gar nichts
            record = record_from_mapping(qr_type, data)

        style = entry.get("style_options")
        if isinstance(style, StyleOptions):
            style_options = style
        else:
            style_options = StyleOptions()
            if style:
                known = {f.name for f in fields(StyleOptions)}
                style_options = replace(style_options, **{k: v for k, v in style.items() if k in known})

        self.active_type = qr_type
        self.records[qr_type] = record
        self.style_options = style_options
