# models/qr_data.py
# =============================================================================
# 🧩 Datensätze pro QR-Typ (Qrius QR)
# -----------------------------------------------------------------------------
# Ein Dataclass pro Inhaltstyp. Alle Felder sind optional, fehlende Werte
# sind None. Die Encoder in utils/qr_payload.py entscheiden, was leer ist.
# =============================================================================

from __future__ import annotations

import re
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Type, Union


class QRCodeType(str, Enum):
    URL = "url"
    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    SMS = "sms"
    WIFI = "wifi"
    VCARD = "vcard"
    EVENT = "event"
    LOCATION = "location"

    @classmethod
    def parse(cls, value: Any) -> Optional["QRCodeType"]:
        """Liefert den Enum-Wert oder None für unbekannte Typ-Tags."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class URLData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.URL

    url: Optional[str] = None
    shortened: Optional[str] = None
    use_shortened: bool = False


@dataclass(frozen=True)
class TextData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.TEXT

    text: Optional[str] = None


@dataclass(frozen=True)
class EmailData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.EMAIL

    email: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None


@dataclass(frozen=True)
class PhoneData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.PHONE

    phone: Optional[str] = None


@dataclass(frozen=True)
class SMSData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.SMS

    phone: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class WiFiData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.WIFI

    ssid: Optional[str] = None
    password: Optional[str] = None
    encryption: str = "WPA"  # "WPA" | "WEP" | "nopass"
    hidden: bool = False


@dataclass(frozen=True)
class VCardData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.VCARD

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    organization: Optional[str] = None
    title: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class EventData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.EVENT

    title: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None  # YYYY-MM-DD
    start_time: Optional[str] = None  # HH:MM
    end_date: Optional[str] = None
    end_time: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class LocationData:
    qr_type: ClassVar[QRCodeType] = QRCodeType.LOCATION

    latitude: Optional[str] = None
    longitude: Optional[str] = None


QRData = Union[
    URLData,
    TextData,
    EmailData,
    PhoneData,
    SMSData,
    WiFiData,
    VCardData,
    EventData,
    LocationData,
]

RECORD_TYPES: Dict[QRCodeType, Type[Any]] = {
    QRCodeType.URL: URLData,
    QRCodeType.TEXT: TextData,
    QRCodeType.EMAIL: EmailData,
    QRCodeType.PHONE: PhoneData,
    QRCodeType.SMS: SMSData,
    QRCodeType.WIFI: WiFiData,
    QRCodeType.VCARD: VCardData,
    QRCodeType.EVENT: EventData,
    QRCodeType.LOCATION: LocationData,
}

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")
_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _snake_case(key: str) -> str:
    """useShortened -> use_shortened, firstName -> first_name"""
    return _CAMEL_RE.sub("_", key).lower()


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def record_from_mapping(qr_type: QRCodeType, data: Any) -> QRData:
    """
    Baut den Datensatz für `qr_type` aus einem Dict (JSON / Formular).
    Akzeptiert snake_case und camelCase, ignoriert unbekannte Schlüssel.
    Datensätze anderer Typen werden über die Feldnamen übernommen,
    alles andere (None, Strings, Listen) zählt als leeres Formular.
    """
    if is_dataclass(data) and not isinstance(data, type):
        data = record_to_dict(data)
    if not isinstance(data, Mapping):
        data = {}

    record_cls = RECORD_TYPES[qr_type]
    known = {f.name: f for f in fields(record_cls)}
    values: Dict[str, Any] = {}

    for raw_key, value in data.items():
        name = _snake_case(str(raw_key))
        field = known.get(name)
        if field is None:
            continue
        if field.type in ("bool", bool):
            values[name] = _as_bool(value)
        elif name == "encryption":
            values[name] = _as_text(value) or "WPA"
        else:
            values[name] = _as_text(value)

    return record_cls(**values)


def record_to_dict(record: QRData) -> Dict[str, Any]:
    """Gegenstück zu record_from_mapping (snake_case-Schlüssel)."""
    return {f.name: getattr(record, f.name) for f in fields(record)}
