# =============================================================================
# 📦 models/__init__.py
# -----------------------------------------------------------------------------
# Datensätze pro QR-Typ (QRDraft liegt in models/qr_draft.py)
# =============================================================================

from .qr_data import (
    QRCodeType,
    QRData,
    URLData,
    TextData,
    EmailData,
    PhoneData,
    SMSData,
    WiFiData,
    VCardData,
    EventData,
    LocationData,
    RECORD_TYPES,
)

__all__ = [
    "QRCodeType",
    "QRData",
    "URLData",
    "TextData",
    "EmailData",
    "PhoneData",
    "SMSData",
    "WiFiData",
    "VCardData",
    "EventData",
    "LocationData",
    "RECORD_TYPES",
]
