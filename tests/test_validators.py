from __future__ import annotations

import pytest

from models.qr_data import WiFiData
from utils.validators import (
    validate_email,
    validate_event_date,
    validate_event_title,
    validate_latitude,
    validate_longitude,
    validate_name,
    validate_phone,
    validate_record,
    validate_sms_message,
    validate_ssid,
    validate_text,
    validate_url,
    validate_wifi_password,
)


@pytest.mark.parametrize("url", ["", "   ", "example.com", "https://example.com/x", "//cdn.example.com/a"])
def test_valid_urls(url):
    assert validate_url(url).is_valid


def test_url_without_domain():
    result = validate_url("localhost")
    assert not result.is_valid
    assert result.error == "Please enter a valid URL with a domain"


def test_url_with_space_in_host():
    assert not validate_url("https://exa mple.com").is_valid


def test_email():
    assert validate_email("").is_valid
    assert validate_email("john@acme.com").is_valid
    assert not validate_email("john@acme").is_valid
    assert not validate_email("jo hn@acme.com").is_valid


def test_email_rejects_trailing_newline():
    assert not validate_email("a@b.co\n").is_valid
    assert not validate_email("a@b.co\nx@y.z").is_valid


@pytest.mark.parametrize("phone, ok", [("", True), ("+1 (555) 123-4567", True), ("123", False), ("abc1234567", False)])
def test_phone(phone, ok):
    assert validate_phone(phone).is_valid is ok


def test_phone_only_counts_ascii_digits():
    # Arabisch-indische Ziffern sind kein gültiger Wählstring
    assert not validate_phone("\u0661\u0662\u0663\u0664\u0665\u0666\u0667").is_valid


def test_ssid():
    assert not validate_ssid("").is_valid
    assert not validate_ssid("x" * 33).is_valid
    assert validate_ssid("x" * 32).is_valid


def test_wifi_password_rules():
    assert validate_wifi_password("", "nopass").is_valid
    assert not validate_wifi_password("", "WPA").is_valid
    assert not validate_wifi_password("short", "WPA").is_valid
    assert validate_wifi_password("longenough", "WPA").is_valid
    assert not validate_wifi_password("x" * 64, "WPA").is_valid
    assert validate_wifi_password("abcde", "WEP").is_valid
    assert not validate_wifi_password("abcdef", "WEP").is_valid


def test_name_and_title_are_trimmed():
    assert not validate_name("  ", "").is_valid
    assert validate_name("", "Lee").is_valid
    assert not validate_event_title("   ").is_valid


def test_event_dates():
    assert not validate_event_date("").is_valid
    assert validate_event_date("2025-06-15").is_valid
    assert validate_event_date("2025-06-15", "2025-06-15").is_valid
    assert validate_event_date("2025-06-15", "2025-06-14").error == "End date must be after start date"
    assert not validate_event_date("15.06.2025").is_valid


def test_coordinates():
    assert validate_latitude("51.5074").is_valid
    assert not validate_latitude("91").is_valid
    assert not validate_latitude("abc").is_valid
    assert not validate_latitude("").is_valid
    assert validate_longitude("-179.9").is_valid
    assert not validate_longitude("180.5").is_valid
    assert not validate_latitude("\u0665\u0661").is_valid
    assert validate_latitude("51.5abc").is_valid


def test_text_and_sms_lengths():
    assert validate_text("").is_valid
    assert not validate_text("x" * 2954).is_valid
    assert validate_sms_message(None).is_valid
    assert not validate_sms_message("x" * 161).is_valid


def test_validate_record_collects_field_errors():
    errors = validate_record("wifi", {"ssid": "", "password": "short", "encryption": "WPA"})
    assert set(errors) == {"ssid", "password"}


def test_validate_record_valid_wifi_record():
    assert validate_record("wifi", WiFiData(ssid="Home", password="12345678")) == {}


def test_validate_record_location_and_unknown_type():
    assert set(validate_record("location", {"latitude": "100"})) == {"latitude", "longitude"}
    assert "type" in validate_record("pdf", {})


def test_validate_record_does_not_block_encoding():
    # Prüfung und Encoding sind getrennt
    from utils.qr_engine import build_qr_payload

    data = {"latitude": "not-a-number", "longitude": "also-not-a-number"}
    assert validate_record("location", data)
    assert build_qr_payload("location", data) == "geo:not-a-number,also-not-a-number"


def test_validate_record_with_other_record_type_or_garbage():
    # Gleichnamige Felder werden übernommen, Nicht-Dicts zählen als leer
    assert validate_record("phone", WiFiData(ssid="Home")) == {}
    assert set(validate_record("wifi", "oops")) == {"ssid", "password"}
