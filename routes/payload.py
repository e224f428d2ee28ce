# routes/payload.py
# =============================================================================
# 🚀 Payload API (Qrius QR)
# -----------------------------------------------------------------------------
# Zustandslose JSON-Endpunkte: Payload bauen, prüfen, als PNG rendern, URL kürzen.
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field
from qrcode.exceptions import DataOverflowError

from models.qr_data import QRCodeType
from utils.qr_config import ERROR_CORRECTION_LEVELS
from utils.qr_engine import build_qr_code, build_qr_payload
from utils.qr_payload import DEFAULT_PAYLOADS
from utils.scannability import analyze_scannability
from utils.url_shortener import PROVIDERS, is_absolute_url, shorten_url
from utils.validators import validate_record

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Payload API"])

EC_PATTERN = f"^[{''.join(ERROR_CORRECTION_LEVELS)}]$"

TYPE_INFO = {
    QRCodeType.URL: ("URL", "Website link"),
    QRCodeType.TEXT: ("Text", "Plain text message"),
    QRCodeType.EMAIL: ("Email", "Email address"),
    QRCodeType.PHONE: ("Phone", "Phone number"),
    QRCodeType.SMS: ("SMS", "Text message"),
    QRCodeType.WIFI: ("WiFi", "Network credentials"),
    QRCodeType.VCARD: ("vCard", "Contact card"),
    QRCodeType.EVENT: ("Event", "Calendar event"),
    QRCodeType.LOCATION: ("Location", "Map coordinates"),
}


class PayloadIn(BaseModel):
    type: str = Field(..., description="QR type, e.g. url, wifi, vcard")
    data: dict[str, Any] = Field(default_factory=dict)


class RenderIn(PayloadIn):
    style: str = Field(default="classic")
    size: Optional[int] = Field(default=None, ge=64, le=2048)
    error_correction: Optional[str] = Field(default=None, pattern=EC_PATTERN)
    fg: Optional[str] = None
    bg: Optional[str] = None


class ScannabilityIn(PayloadIn):
    dots_color: str = "#000000"
    background_color: str = "#ffffff"
    has_logo: bool = False
    logo_size: Optional[float] = Field(default=None, ge=0, le=1)
    error_correction_level: str = Field(default="H", pattern=EC_PATTERN)


class ShortenIn(BaseModel):
    url: str
    provider: Optional[str] = None


@router.get("/types")
def list_types() -> list[dict[str, str]]:
    """Alle Inhaltstypen mit ihrem Standard-Payload."""
    return [
        {
            "id": qr_type.value,
            "label": label,
            "description": description,
            "default_payload": DEFAULT_PAYLOADS[qr_type],
        }
        for qr_type, (label, description) in TYPE_INFO.items()
    ]


@router.post("/payload")
def create_payload(body: PayloadIn) -> dict[str, str]:
    """Baut den Payload-String. Unbekannte Typen ergeben den URL-Standard."""
    return {"type": body.type, "payload": build_qr_payload(body.type, body.data)}


@router.post("/validate")
def validate_payload(body: PayloadIn) -> dict[str, Any]:
    errors = validate_record(body.type, body.data)
    return {"valid": not errors, "errors": errors}


@router.post("/render")
def render_payload(body: RenderIn) -> Response:
    """Rendert den Payload als PNG (Vorschau, nichts wird gespeichert)."""
    try:
        result = build_qr_code(
            body.type,
            body.data,
            style_name=body.style,
            qr_size=body.size,
            color_fg=body.fg,
            color_bg=body.bg,
            error_correction=body.error_correction,
        )
    except DataOverflowError:
        logger.warning(f"⚠️ Payload zu lang für QR-Code (Typ {body.type})")
        raise HTTPException(status_code=422, detail="Payload too long for a QR code")
    except ValueError as exc:
        # z. B. ungültige Farbangabe
        raise HTTPException(status_code=422, detail=str(exc))

    return Response(
        content=result["bytes"],
        media_type="image/png",
        headers={"X-QR-Payload-Length": str(len(result["payload"]))},
    )


@router.post("/scannability")
def scannability(body: ScannabilityIn) -> dict[str, Any]:
    """Scanbarkeit von Design + Payload (0-100, mit Verbesserungsvorschlägen)."""
    payload = build_qr_payload(body.type, body.data)
    result = analyze_scannability(
        dots_color=body.dots_color,
        background_color=body.background_color,
        logo_size=body.logo_size,
        has_logo=body.has_logo,
        data_length=len(payload),
        error_correction_level=body.error_correction_level,
    )
    return {"payload_length": len(payload), **asdict(result)}


@router.post("/shorten")
def shorten(body: ShortenIn) -> dict[str, str]:
    if not is_absolute_url(body.url):
        raise HTTPException(status_code=400, detail="Invalid URL")
    if body.provider and body.provider not in PROVIDERS:
        raise HTTPException(status_code=400, detail="Unknown provider")

    result = shorten_url(body.url, body.provider)
    if not result.success:
        raise HTTPException(status_code=502, detail=result.error or "Failed to shorten URL")
    return {"url": body.url, "short_url": result.short_url or ""}
