"""
utils/qr_payload.py
────────────────────────────────────────────
Payload-Encoder pro QR-Typ.

Jeder Encoder bekommt seinen Datensatz (models/qr_data.py) und liefert
den exakten String, der im QR-Code landet. Ist das Schlüsselfeld leer,
kommt der feste Standard-Payload aus DEFAULT_PAYLOADS zurück.

Die Formate müssen Byte für Byte stabil bleiben, da bereits gedruckte
Codes von Scanner-Apps so gelesen werden.
────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import quote

from models.qr_data import (
    EmailData,
    EventData,
    LocationData,
    PhoneData,
    QRCodeType,
    SMSData,
    TextData,
    URLData,
    VCardData,
    WiFiData,
)
from utils.qr_escape import escape_icalendar, escape_vcard, escape_wifi

# ─────────────────────────────────────────────
# 📌 Standard-Payloads (leerer Datensatz)
# ─────────────────────────────────────────────
DEFAULT_PHONE = "+1234567890"

DEFAULT_PAYLOADS: Dict[QRCodeType, str] = {
    QRCodeType.URL: "https://example.com",
    QRCodeType.TEXT: "Hello World",
    QRCodeType.EMAIL: "mailto:example@example.com",
    QRCodeType.PHONE: f"tel:{DEFAULT_PHONE}",
    QRCodeType.SMS: f"sms:{DEFAULT_PHONE}",
    QRCodeType.WIFI: "WIFI:S:MyNetwork;T:WPA;P:password;;",
    QRCodeType.VCARD: "BEGIN:VCARD\nVERSION:3.0\nN:Doe;John\nFN:John Doe\nEND:VCARD",
    QRCodeType.EVENT: "BEGIN:VEVENT\nSUMMARY:Event\nDTSTART:20250101T090000\nEND:VEVENT",
    QRCodeType.LOCATION: "geo:40.7128,-74.0060",
}

# Zeichen, die encodeURIComponent unverändert lässt (neben A-Z a-z 0-9)
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Prozent-Kodierung wie JavaScripts encodeURIComponent (Leerzeichen -> %20)."""
    # Einzelne Surrogates sind nicht als UTF-8 kodierbar -> Ersatzzeichen statt Exception.
    return quote(value, safe=_URI_COMPONENT_SAFE, errors="replace")


def format_ics_datetime(date: str, time: Optional[str] = None) -> str:
    """
    "2025-06-15", "09:30" -> "20250615T093000"
    "2025-12-25", None    -> "20251225T000000"
    """
    compact_date = date.replace("-", "")
    compact_time = f"{time.replace(':', '')}00" if time else "000000"
    return f"{compact_date}T{compact_time}"


# ─────────────────────────────────────────────
# 🔗 URL / Text
# ─────────────────────────────────────────────
def encode_url(data: URLData) -> str:
    if data.use_shortened and data.shortened:
        url = data.shortened
    else:
        url = data.url
    return url or DEFAULT_PAYLOADS[QRCodeType.URL]


def encode_text(data: TextData) -> str:
    return data.text or DEFAULT_PAYLOADS[QRCodeType.TEXT]


# ─────────────────────────────────────────────
# 📧 E-Mail / Telefon / SMS
# ─────────────────────────────────────────────
def encode_email(data: EmailData) -> str:
    """mailto:-URI nach RFC 6068, subject vor body."""
    if not data.email:
        return DEFAULT_PAYLOADS[QRCodeType.EMAIL]

    mailto = f"mailto:{data.email}"
    params: List[str] = []
    if data.subject:
        params.append(f"subject={encode_uri_component(data.subject)}")
    if data.body:
        params.append(f"body={encode_uri_component(data.body)}")
    if params:
        mailto += "?" + "&".join(params)
    return mailto


def encode_phone(data: PhoneData) -> str:
    return f"tel:{data.phone or DEFAULT_PHONE}"


def encode_sms(data: SMSData) -> str:
    sms = f"sms:{data.phone or DEFAULT_PHONE}"
    if data.message:
        sms += f"?body={encode_uri_component(data.message)}"
    return sms


# ─────────────────────────────────────────────
# 📶 WLAN
# ─────────────────────────────────────────────
def encode_wifi(data: WiFiData) -> str:
    """WIFI:S:<ssid>;T:<auth>;P:<pass>;H:true;;"""
    if not data.ssid:
        return DEFAULT_PAYLOADS[QRCodeType.WIFI]

    wifi = f"WIFI:S:{escape_wifi(data.ssid)};T:{data.encryption};"
    if data.password and data.encryption != "nopass":
        wifi += f"P:{escape_wifi(data.password)};"
    if data.hidden:
        wifi += "H:true;"
    return wifi + ";"


# ─────────────────────────────────────────────
# 👤 vCard 3.0
# ─────────────────────────────────────────────
def encode_vcard(data: VCardData) -> str:
    if not data.first_name and not data.last_name:
        return DEFAULT_PAYLOADS[QRCodeType.VCARD]

    first = data.first_name or ""
    last = data.last_name or ""

    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"N:{escape_vcard(last)};{escape_vcard(first)}",
        # FN bleibt unmaskiert, bestehende Codes wurden so erzeugt.
        f"FN:{first} {last}",
    ]

    optional = (
        ("ORG:{}", data.organization),
        ("TITLE:{}", data.title),
        ("TEL:{}", data.phone),
        ("EMAIL:{}", data.email),
        ("URL:{}", data.website),
        ("ADR:;;{};;;;", data.address),
        ("NOTE:{}", data.note),
    )
    for template, value in optional:
        if value:
            lines.append(template.format(escape_vcard(value)))

    lines.append("END:VCARD")
    return "\n".join(lines)


# ─────────────────────────────────────────────
# 📅 Kalender (VEVENT)
# ─────────────────────────────────────────────
def encode_event(data: EventData) -> str:
    if not data.title:
        return DEFAULT_PAYLOADS[QRCodeType.EVENT]

    lines = ["BEGIN:VEVENT", f"SUMMARY:{escape_icalendar(data.title)}"]
    if data.location:
        lines.append(f"LOCATION:{escape_icalendar(data.location)}")
    if data.start_date:
        lines.append(f"DTSTART:{format_ics_datetime(data.start_date, data.start_time)}")
    if data.end_date:
        lines.append(f"DTEND:{format_ics_datetime(data.end_date, data.end_time)}")
    if data.description:
        lines.append(f"DESCRIPTION:{escape_icalendar(data.description)}")
    lines.append("END:VEVENT")
    return "\n".join(lines)


# ─────────────────────────────────────────────
# 📍 Standort (geo: URI, RFC 5870)
# ─────────────────────────────────────────────
def encode_location(data: LocationData) -> str:
    # Eine fehlende Koordinate -> Standard für beide.
    if not data.latitude or not data.longitude:
        return DEFAULT_PAYLOADS[QRCodeType.LOCATION]
    return f"geo:{data.latitude},{data.longitude}"
