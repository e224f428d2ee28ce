"""
utils/qr_config.py
────────────────────────────────────────────
Globale QR-Code-Design- und Stilkonfiguration
für Qrius QR.

Die Themes betreffen nur das Rendering. Der Payload-String
hängt nie vom gewählten Design ab.
────────────────────────────────────────────
"""

from typing import Any, Dict, Tuple

# ─────────────────────────────────────────────
# 🎨 STANDARDDESIGN (Basis)
# ─────────────────────────────────────────────
QR_DEFAULT_STYLE: Dict[str, Any] = {
    "size": 600,
    "fg": "#000000",
    "bg": "#FFFFFF",
    "gradient": None,
    "frame_color": "#000000",
    "module_style": "square",
    "eye_style": "square",
    "frame_text": None,
    # Immer H (30 %), damit ein Logo in der Mitte Platz hat
    "error_correction": "H",
}

ERROR_CORRECTION_LEVELS: Tuple[str, ...] = ("L", "M", "Q", "H")

# ─────────────────────────────────────────────
# 🪄 THEMES
# ─────────────────────────────────────────────
QR_THEMES: Dict[str, Dict[str, Any]] = {
    "classic": {
        "fg": "#000000",
        "bg": "#FFFFFF",
        "module_style": "square",
        "eye_style": "square",
    },
    "modern": {
        "fg": "#0D2A78",
        "bg": "#FFFFFF",
        "gradient": ("#2563EB", "#F472B6"),
        "frame_color": "#4F46E5",
        "module_style": "rounded",
        "eye_style": "dots",
    },
    "rounded": {
        "fg": "#0D2A78",
        "bg": "#F8FAFC",
        "frame_color": "#1E3A8A",
        "module_style": "extra-rounded",
        "eye_style": "rounded",
    },
    "dots": {
        "fg": "#2563EB",
        "bg": "#E0E7FF",
        "frame_color": "#3B82F6",
        "module_style": "dots",
        "eye_style": "square",
    },
    "classy": {
        "fg": "#4F46E5",
        "bg": "#EEF2FF",
        "frame_color": "#4F46E5",
        "module_style": "classy",
        "eye_style": "rounded",
    },
    "dark": {
        "fg": "#FFFFFF",
        "bg": "#0D0D0D",
        "frame_color": "#FFFFFF",
        "module_style": "square",
        "eye_style": "square",
        "frame_text": "Scan me",
    },
    "neon": {
        "fg": "#22D3EE",
        "bg": "#0F172A",
        "gradient": ("#06B6D4", "#67E8F9"),
        "frame_color": "#22D3EE",
        "module_style": "dots",
        "eye_style": "square",
    },
    "sunset": {
        "fg": "#F97316",
        "bg": "#FFF7ED",
        "gradient": ("#FB7185", "#F59E0B"),
        "frame_color": "#F97316",
        "module_style": "rounded",
        "eye_style": "rounded",
    },
    "ocean": {
        "fg": "#0EA5E9",
        "bg": "#E0F2FE",
        "gradient": ("#0EA5E9", "#22D3EE"),
        "frame_color": "#0EA5E9",
        "module_style": "dots",
        "eye_style": "square",
    },
    "forest": {
        "fg": "#15803D",
        "bg": "#ECFDF5",
        "gradient": ("#16A34A", "#22C55E"),
        "frame_color": "#15803D",
        "module_style": "rounded",
        "eye_style": "rounded",
    },
}


# ─────────────────────────────────────────────
# 🧠 FUNKTION: Design abrufen
# ─────────────────────────────────────────────
def get_qr_style(style_name: str = "classic") -> Dict[str, Any]:
    """
    Gibt das gewünschte QR-Design als Dictionary zurück.
    Unbekannte Themes fallen auf das Standard-Design zurück.
    """
    style = QR_THEMES.get(style_name, {})
    return {**QR_DEFAULT_STYLE, **style}
