# =============================================================================
# 🔍 Scanbarkeits-Analyse – Qrius QR
# -----------------------------------------------------------------------------
# Schätzt aus Farben, Logo, Fehlerkorrektur und Payload-Länge, wie gut ein
# QR-Code scannbar ist. Reine Logik, es wird nichts gerendert.
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from PIL import ImageColor

from models.qr_draft import QRDraft, StyleOptions

logger = logging.getLogger(__name__)

# Kontrast-Schwellen (WCAG-Verhältnis) und Abzüge
CONTRAST_POOR = 3.0
CONTRAST_FAIR = 4.5
CONTRAST_GOOD = 7.0

LOGO_LARGE = 0.25
LOGO_MEDIUM = 0.2
LONG_DATA = 200

SCORE_LEVELS = ((85, "excellent"), (70, "good"), (50, "warning"))


@dataclass(frozen=True)
class ScannabilityIssue:
    type: str  # contrast | logo | color | complexity
    severity: str  # low | medium | high
    message: str


@dataclass
class ScannabilityResult:
    score: str
    percentage: int
    issues: List[ScannabilityIssue] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# 🎨 Farben
# ---------------------------------------------------------------------------
def _rgb(color: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """Farbangabe wie beim Rendern (Pillow); ungültig -> None."""
    if not color:
        return None
    try:
        return ImageColor.getrgb(color)[:3]
    except ValueError:
        return None


def relative_luminance(rgb: Tuple[int, int, int]) -> float:
    def channel(c: int) -> float:
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (channel(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color1: Optional[str], color2: Optional[str]) -> float:
    """1.0 (kein Kontrast) bis 21.0; nicht lesbare Farben zählen als 1.0."""
    rgb1, rgb2 = _rgb(color1), _rgb(color2)
    if rgb1 is None or rgb2 is None:
        return 1.0
    l1, l2 = relative_luminance(rgb1), relative_luminance(rgb2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_red_green(fg: Optional[str], bg: Optional[str]) -> bool:
    """Rot auf Grün oder umgekehrt (Rot-Grün-Sehschwäche)."""
    fg_rgb, bg_rgb = _rgb(fg), _rgb(bg)
    if fg_rgb is None or bg_rgb is None:
        return False

    def red(c):
        return c[0] > 150 and c[1] < 100

    def green(c):
        return c[1] > 150 and c[0] < 100

    return (red(fg_rgb) and green(bg_rgb)) or (red(bg_rgb) and green(fg_rgb))


# ---------------------------------------------------------------------------
# 🧮 Hauptfunktion
# ---------------------------------------------------------------------------
def analyze_scannability(
    dots_color: str,
    background_color: str,
    logo_size: Optional[float] = None,
    has_logo: bool = False,
    data_length: Optional[int] = None,
    error_correction_level: Optional[str] = None,
) -> ScannabilityResult:
    """
    Bewertet ein QR-Design mit 0-100 Punkten.

    Jeder gefundene Mangel zieht Punkte ab und liefert ein Issue samt
    Verbesserungsvorschlag. Stufen: excellent >= 85, good >= 70,
    warning >= 50, sonst poor.
    """
    issues: List[ScannabilityIssue] = []
    suggestions: List[str] = []
    deductions = 0

    # === 1️⃣ Kontrast ===
    ratio = contrast_ratio(dots_color, background_color)
    if ratio < CONTRAST_POOR:
        issues.append(ScannabilityIssue("contrast", "high", "Very low contrast between QR code and background"))
        suggestions.append("Increase contrast by using darker QR code or lighter background")
        deductions += 40
    elif ratio < CONTRAST_FAIR:
        issues.append(ScannabilityIssue("contrast", "medium", "Contrast could be improved for better scanning"))
        suggestions.append("Consider using higher contrast colors")
        deductions += 20
    elif ratio < CONTRAST_GOOD:
        deductions += 5

    # === 2️⃣ Farbkombination ===
    if is_red_green(dots_color, background_color):
        issues.append(ScannabilityIssue("color", "medium", "Color combination may be difficult for colorblind users"))
        suggestions.append("Avoid red-green color combinations")
        deductions += 15

    # === 3️⃣ Invertiert (hell auf dunkel) ===
    fg_rgb, bg_rgb = _rgb(dots_color), _rgb(background_color)
    if fg_rgb and bg_rgb and relative_luminance(fg_rgb) > relative_luminance(bg_rgb):
        issues.append(ScannabilityIssue("contrast", "low", "Light QR code on dark background (inverted)"))
        suggestions.append("Some scanners work better with dark QR codes on light backgrounds")
        deductions += 10

    # === 4️⃣ Logo (Anteil an der Kantenlänge) ===
    if has_logo and logo_size:
        if logo_size > LOGO_LARGE:
            issues.append(ScannabilityIssue("logo", "medium", "Logo is quite large and may affect scanning"))
            suggestions.append("Consider reducing logo size or using High error correction")
            deductions += 15
            if error_correction_level != "H":
                issues.append(ScannabilityIssue("logo", "high", "Large logo without High error correction"))
                suggestions.append("Set error correction to High (30%) when using large logos")
                deductions += 20
        elif logo_size > LOGO_MEDIUM and error_correction_level == "L":
            issues.append(ScannabilityIssue("logo", "medium", "Logo with Low error correction may cause scanning issues"))
            suggestions.append("Increase error correction level to Medium or higher")
            deductions += 15

    # === 5️⃣ Datenmenge ===
    if data_length and data_length > LONG_DATA:
        issues.append(ScannabilityIssue("complexity", "low", "Long data creates a dense QR code"))
        suggestions.append("Consider shortening the URL for easier scanning at small sizes")
        deductions += 10

    percentage = max(0, min(100, 100 - deductions))
    score = next((name for limit, name in SCORE_LEVELS if percentage >= limit), "poor")
    logger.debug(f"🔍 Scanbarkeit {percentage}% ({score}), Kontrast {ratio:.2f}")
    return ScannabilityResult(score, percentage, issues, suggestions)


def analyze_style(style: StyleOptions, payload: str) -> ScannabilityResult:
    """Bewertung für gespeicherte Stiloptionen + fertigen Payload."""
    return analyze_scannability(
        dots_color=style.dots_color,
        background_color=style.background_color,
        logo_size=style.logo_size,
        has_logo=bool(style.logo_url),
        data_length=len(payload),
        error_correction_level=style.error_correction_level,
    )


def analyze_draft(draft: QRDraft) -> ScannabilityResult:
    return analyze_style(draft.style_options, draft.payload())
