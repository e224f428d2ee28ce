"""
utils/qr_escape.py
────────────────────────────────────────────
Escape-Funktionen für die QR-Payload-Formate.

Jedes Format reserviert ein paar Zeichen als Syntax. Benutzerwerte
werden hier maskiert, bevor sie in den Payload eingesetzt werden.
Der Backslash wird immer zuerst ersetzt, sonst würden die später
erzeugten Escape-Sequenzen erneut maskiert.
────────────────────────────────────────────
"""

from __future__ import annotations
from typing import Optional


def escape_vcard(value: Optional[str]) -> str:
    """vCard 3.0: Backslash, Semikolon, Komma und Zeilenumbruch maskieren."""
    if not value:
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def escape_wifi(value: Optional[str]) -> str:
    """WIFI:-Konfiguration: Backslash, Semikolon, Doppelpunkt und Komma maskieren."""
    if not value:
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(":", "\\:")
        .replace(",", "\\,")
    )


def escape_icalendar(value: Optional[str]) -> str:
    """iCalendar (VEVENT): Backslash, Semikolon, Komma und Zeilenumbruch maskieren."""
    if not value:
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )
