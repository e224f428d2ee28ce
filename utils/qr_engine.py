"""
utils/qr_engine.py
────────────────────────────────────────────
Zentrale QR-Engine für Qrius QR.
- build_qr_payload: wählt den Encoder für den aktiven Typ
- build_qr_code: Payload + Theme + Renderer (utils/qr_generator)
────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from dataclasses import is_dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from models.qr_data import QRCodeType, QRData, record_from_mapping
from utils.qr_config import get_qr_style
from utils.qr_generator import generate_qr_png
from utils.qr_payload import (
    DEFAULT_PAYLOADS,
    encode_email,
    encode_event,
    encode_location,
    encode_phone,
    encode_sms,
    encode_text,
    encode_url,
    encode_vcard,
    encode_wifi,
)

logger = logging.getLogger(__name__)

ENCODERS: Dict[QRCodeType, Callable[[Any], str]] = {
    QRCodeType.URL: encode_url,
    QRCodeType.TEXT: encode_text,
    QRCodeType.EMAIL: encode_email,
    QRCodeType.PHONE: encode_phone,
    QRCodeType.SMS: encode_sms,
    QRCodeType.WIFI: encode_wifi,
    QRCodeType.VCARD: encode_vcard,
    QRCodeType.EVENT: encode_event,
    QRCodeType.LOCATION: encode_location,
}


def _coerce_record(qr_type: QRCodeType, data: Union[QRData, Mapping[str, Any], None]) -> QRData:
    """Dict oder Datensatz eines anderen Typs -> Datensatz für qr_type."""
    if is_dataclass(data) and getattr(data, "qr_type", None) is qr_type:
        return data  # type: ignore[return-value]
    return record_from_mapping(qr_type, data)


def encode_record(record: QRData) -> str:
    """Payload für einen typisierten Datensatz (Typ steckt im Dataclass)."""
    return ENCODERS[record.qr_type](record)


def build_qr_payload(
    qr_type: Union[QRCodeType, str, None],
    data: Union[QRData, Mapping[str, Any], None] = None,
) -> str:
    """
    Liefert den Payload-String für Typ + Daten.
    Unbekannte Typen ergeben den URL-Standard; es wird nie eine Exception geworfen.
    """
    parsed = QRCodeType.parse(qr_type)
    if parsed is None:
        logger.warning(f"⚠️ Unbekannter QR-Typ: {qr_type!r}")
        return DEFAULT_PAYLOADS[QRCodeType.URL]
    return ENCODERS[parsed](_coerce_record(parsed, data))


def build_qr_code(
    qr_type: Union[QRCodeType, str],
    data: Union[QRData, Mapping[str, Any], None],
    style_name: str = "classic",
    qr_size: Optional[int] = None,
    color_fg: Optional[str] = None,
    color_bg: Optional[str] = None,
    logo_path: Optional[str] = None,
    error_correction: Optional[str] = None,
    save: bool = False,
) -> Dict[str, Any]:
    """
    Erstellt Payload und PNG in einem Schritt.
    Gibt {"payload": str, "path": str | None, "bytes": bytes} zurück.
    """

    # 1️⃣ Stilkonfiguration laden
    style = get_qr_style(style_name)

    # 2️⃣ QR-Inhalt generieren
    payload = build_qr_payload(qr_type, data)

    # 3️⃣ QR-Code rendern
    qr_result = generate_qr_png(
        payload=payload,
        size=qr_size or style["size"],
        fg=color_fg or style["fg"],
        bg=color_bg or style["bg"],
        gradient=style.get("gradient"),
        logo_path=logo_path,
        frame_color=str(style.get("frame_color", "#000000")),
        module_style=style.get("module_style", "square"),
        eye_style=style.get("eye_style", "square"),
        frame_text=style.get("frame_text"),
        error_correction=error_correction or style["error_correction"],
        save=save,
    )

    logger.info(f"✅ QR-Code erstellt: {qr_type} ({len(payload)} Zeichen)")
    return {"payload": payload, **qr_result}
