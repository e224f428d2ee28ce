"""
utils/validators.py
────────────────────────────────────────────
Eingabeprüfung pro QR-Typ.

Läuft vor dem Encoding. Die Encoder selbst prüfen nichts und
kodieren auch unsinnige Werte; hier werden sie abgefangen.
Keine Funktion wirft, Fehler kommen als ValidationResult zurück.
────────────────────────────────────────────
"""

from __future__ import annotations

import re
from dataclasses import dataclass, is_dataclass
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import urlparse

from models.qr_data import (
    EmailData,
    EventData,
    LocationData,
    PhoneData,
    QRCodeType,
    QRData,
    SMSData,
    TextData,
    URLData,
    VCardData,
    WiFiData,
    record_from_mapping,
)

# fullmatch: "$" allein ließe ein abschließendes "\n" durch
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_STRIP_RE = re.compile(r"[\s\-().+]")
PHONE_DIGITS_RE = re.compile(r"\d{7,15}", re.ASCII)

MAX_SSID_LENGTH = 32
WEP_KEY_LENGTHS = {5, 10, 13, 26}
WPA_MIN_LENGTH = 8
WPA_MAX_LENGTH = 63
MAX_TEXT_LENGTH = 2953  # Byte-Modus, Version 40, Level L
MAX_SMS_LENGTH = 160


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


OK = ValidationResult(True)


def _fail(message: str) -> ValidationResult:
    return ValidationResult(False, message)


# ─────────────────────────────────────────────
# 🔗 URL / E-Mail / Telefon
# ─────────────────────────────────────────────
def validate_url(url: Optional[str]) -> ValidationResult:
    if not (url or "").strip():
        return OK

    test_url = url.strip()
    if not re.match(r"^https?://", test_url, re.IGNORECASE) and not test_url.startswith("//"):
        test_url = "https://" + test_url

    try:
        parsed = urlparse(test_url)
        hostname = parsed.hostname
    except ValueError:
        return _fail("Please enter a valid URL")
    if not hostname or any(ch.isspace() for ch in hostname):
        return _fail("Please enter a valid URL")
    if "." not in hostname:
        return _fail("Please enter a valid URL with a domain")
    return OK


def validate_email(email: Optional[str]) -> ValidationResult:
    if not (email or "").strip():
        return OK
    if not EMAIL_RE.fullmatch(email):
        return _fail("Please enter a valid email address")
    return OK


def validate_phone(phone: Optional[str]) -> ValidationResult:
    if not (phone or "").strip():
        return OK
    if not PHONE_DIGITS_RE.fullmatch(PHONE_STRIP_RE.sub("", phone)):
        return _fail("Please enter a valid phone number (7-15 digits)")
    return OK


# ─────────────────────────────────────────────
# 📶 WLAN
# ─────────────────────────────────────────────
def validate_ssid(ssid: Optional[str]) -> ValidationResult:
    if not (ssid or "").strip():
        return _fail("Network name is required")
    if len(ssid) > MAX_SSID_LENGTH:
        return _fail(f"Network name must be {MAX_SSID_LENGTH} characters or less")
    return OK


def validate_wifi_password(password: Optional[str], encryption: str) -> ValidationResult:
    if encryption == "nopass":
        return OK
    if not password:
        return _fail("Password is required for secured networks")

    if encryption == "WEP":
        if len(password) not in WEP_KEY_LENGTHS:
            return _fail("WEP key must be 5, 10, 13, or 26 characters")
    elif encryption == "WPA":
        if len(password) < WPA_MIN_LENGTH:
            return _fail(f"WPA password must be at least {WPA_MIN_LENGTH} characters")
        if len(password) > WPA_MAX_LENGTH:
            return _fail(f"WPA password must be {WPA_MAX_LENGTH} characters or less")
    return OK


# ─────────────────────────────────────────────
# 👤 vCard / 📅 Event
# ─────────────────────────────────────────────
def validate_name(first_name: Optional[str], last_name: Optional[str]) -> ValidationResult:
    if not (first_name or "").strip() and not (last_name or "").strip():
        return _fail("At least first or last name is required")
    return OK


def validate_event_title(title: Optional[str]) -> ValidationResult:
    if not (title or "").strip():
        return _fail("Event title is required")
    return OK


def validate_event_date(start_date: Optional[str], end_date: Optional[str] = None) -> ValidationResult:
    if not start_date:
        return _fail("Start date is required")

    try:
        start = date.fromisoformat(start_date)
    except ValueError:
        return _fail("Start date must be a valid date (YYYY-MM-DD)")

    if end_date:
        try:
            end = date.fromisoformat(end_date)
        except ValueError:
            return _fail("End date must be a valid date (YYYY-MM-DD)")
        if end < start:
            return _fail("End date must be after start date")
    return OK


# ─────────────────────────────────────────────
# 📍 Koordinaten
# ─────────────────────────────────────────────
def _parse_coordinate(value: str) -> Optional[float]:
    # parseFloat-ähnlich: führende Zahl reicht ("51.5abc" -> 51.5)
    match = re.match(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?", value)
    return float(match.group(0)) if match else None


def validate_latitude(lat: Optional[str]) -> ValidationResult:
    if not (lat or "").strip():
        return _fail("Latitude is required")
    num = _parse_coordinate(lat)
    if num is None or not -90 <= num <= 90:
        return _fail("Latitude must be between -90 and 90")
    return OK


def validate_longitude(lng: Optional[str]) -> ValidationResult:
    if not (lng or "").strip():
        return _fail("Longitude is required")
    num = _parse_coordinate(lng)
    if num is None or not -180 <= num <= 180:
        return _fail("Longitude must be between -180 and 180")
    return OK


# ─────────────────────────────────────────────
# 📝 Text / SMS
# ─────────────────────────────────────────────
def validate_text(text: Optional[str]) -> ValidationResult:
    if not (text or "").strip():
        return OK
    if len(text) > MAX_TEXT_LENGTH:
        return _fail(f"Text is too long for QR code (max ~{MAX_TEXT_LENGTH} characters)")
    return OK


def validate_sms_message(message: Optional[str]) -> ValidationResult:
    if not message:
        return OK
    if len(message) > MAX_SMS_LENGTH:
        return _fail(f"SMS message should be {MAX_SMS_LENGTH} characters or less for best compatibility")
    return OK


# ─────────────────────────────────────────────
# 🧾 Ganzer Datensatz
# ─────────────────────────────────────────────
def _check_url(d: URLData) -> Dict[str, ValidationResult]:
    return {"url": validate_url(d.url), "shortened": validate_url(d.shortened)}


def _check_text(d: TextData) -> Dict[str, ValidationResult]:
    return {"text": validate_text(d.text)}


def _check_email(d: EmailData) -> Dict[str, ValidationResult]:
    return {"email": validate_email(d.email)}


def _check_phone(d: PhoneData) -> Dict[str, ValidationResult]:
    return {"phone": validate_phone(d.phone)}


def _check_sms(d: SMSData) -> Dict[str, ValidationResult]:
    return {"phone": validate_phone(d.phone), "message": validate_sms_message(d.message)}


def _check_wifi(d: WiFiData) -> Dict[str, ValidationResult]:
    return {
        "ssid": validate_ssid(d.ssid),
        "password": validate_wifi_password(d.password, d.encryption),
    }


def _check_vcard(d: VCardData) -> Dict[str, ValidationResult]:
    return {
        "name": validate_name(d.first_name, d.last_name),
        "phone": validate_phone(d.phone),
        "email": validate_email(d.email),
        "website": validate_url(d.website),
    }


def _check_event(d: EventData) -> Dict[str, ValidationResult]:
    return {
        "title": validate_event_title(d.title),
        "start_date": validate_event_date(d.start_date, d.end_date),
    }


def _check_location(d: LocationData) -> Dict[str, ValidationResult]:
    return {
        "latitude": validate_latitude(d.latitude),
        "longitude": validate_longitude(d.longitude),
    }


RECORD_CHECKS: Dict[QRCodeType, Callable[[Any], Dict[str, ValidationResult]]] = {
    QRCodeType.URL: _check_url,
    QRCodeType.TEXT: _check_text,
    QRCodeType.EMAIL: _check_email,
    QRCodeType.PHONE: _check_phone,
    QRCodeType.SMS: _check_sms,
    QRCodeType.WIFI: _check_wifi,
    QRCodeType.VCARD: _check_vcard,
    QRCodeType.EVENT: _check_event,
    QRCodeType.LOCATION: _check_location,
}


def validate_record(
    qr_type: Union[QRCodeType, str],
    data: Union[QRData, Mapping[str, Any], None],
) -> Dict[str, str]:
    """
    Prüft einen ganzen Datensatz.
    Gibt {feld: fehlermeldung} zurück; leeres Dict = gültig.
    """
    parsed = QRCodeType.parse(qr_type)
    if parsed is None:
        return {"type": f"Unknown QR type: {qr_type}"}

    if not (is_dataclass(data) and getattr(data, "qr_type", None) is parsed):
        data = record_from_mapping(parsed, data)

    results = RECORD_CHECKS[parsed](data)
    return {name: result.error or "" for name, result in results.items() if not result.is_valid}

