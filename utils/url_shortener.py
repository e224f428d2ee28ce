"""
utils/url_shortener.py
────────────────────────────────────────────
Kürzt lange URLs über öffentliche Dienste (TinyURL, is.gd).

Das Ergebnis landet in URLData.shortened; mit use_shortened=True
wird dann die kurze URL kodiert (kleinere QR-Version).
Netzwerkfehler werden hier abgefangen und als ShortenResult gemeldet.
────────────────────────────────────────────
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

SHORTENER_PROVIDER = os.getenv("SHORTENER_PROVIDER", "tinyurl")
SHORTENER_TIMEOUT = float(os.getenv("SHORTENER_TIMEOUT", "10"))

TINYURL_ENDPOINT = "https://tinyurl.com/api-create.php"
ISGD_ENDPOINT = "https://is.gd/create.php"


@dataclass(frozen=True)
class ShortenResult:
    success: bool
    short_url: Optional[str] = None
    error: Optional[str] = None


def is_absolute_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def _request_short_url(
    client: httpx.Client, provider_name: str, endpoint: str, params: Dict[str, str]
) -> ShortenResult:
    try:
        resp = client.get(endpoint, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning(f"⚠️ {provider_name} nicht erreichbar: {exc}")
        return ShortenResult(False, error=f"{provider_name} API error")

    short_url = resp.text.strip()
    if not short_url.startswith("http"):
        logger.warning(f"⚠️ Ungültige Antwort von {provider_name}: {short_url[:80]!r}")
        return ShortenResult(False, error=f"Invalid response from {provider_name}")
    return ShortenResult(True, short_url=short_url)


def shorten_with_tinyurl(url: str, client: httpx.Client) -> ShortenResult:
    return _request_short_url(client, "TinyURL", TINYURL_ENDPOINT, {"url": url})


def shorten_with_isgd(url: str, client: httpx.Client) -> ShortenResult:
    return _request_short_url(client, "is.gd", ISGD_ENDPOINT, {"format": "simple", "url": url})


PROVIDERS: Dict[str, Callable[[str, httpx.Client], ShortenResult]] = {
    "tinyurl": shorten_with_tinyurl,
    "isgd": shorten_with_isgd,
}


def shorten_url(
    url: str,
    provider: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> ShortenResult:
    """
    Kürzt `url` mit dem gewählten Anbieter (Standard: SHORTENER_PROVIDER).
    `client` kann für Tests mit einem httpx.MockTransport übergeben werden.
    """
    if not is_absolute_url(url or ""):
        return ShortenResult(False, error="Invalid URL")

    shorten = PROVIDERS.get(provider or SHORTENER_PROVIDER)
    if shorten is None:
        return ShortenResult(False, error="Unknown provider")

    if client is not None:
        return shorten(url, client)
    with httpx.Client(timeout=SHORTENER_TIMEOUT, follow_redirects=True) as own_client:
        return shorten(url, own_client)
