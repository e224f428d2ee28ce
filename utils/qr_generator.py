# =============================================================================
# 🧠 QR-Code Renderer – Qrius QR
# -----------------------------------------------------------------------------
# Übergibt den fertigen Payload an die qrcode-Bibliothek und gestaltet das
# Bild mit Pillow (Farben, Verlauf, Modulform, Logo, Rahmentext).
# =============================================================================

from __future__ import annotations
from typing import Optional, Tuple, Dict, Union
from io import BytesIO
from pathlib import Path
import os, time, logging
import qrcode
import qrcode.image.styledpil
import qrcode.image.styles.moduledrawers as mod
import qrcode.image.styles.colormasks as mask
from qrcode.constants import ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q, ERROR_CORRECT_H
from qrcode.exceptions import DataOverflowError
from PIL import Image, ImageDraw, ImageFont, ImageOps, ImageColor

# ---------------------------------------------------------------------------
# ⚙️ Logging / Konfiguration
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)

QR_OUTPUT_DIR = Path(os.getenv("QR_OUTPUT_DIR", "static/generated_qr"))

ERROR_CORRECTION = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def _module_drawer(style: str):
    """Modulform (Punkte) – Namen wie im Web-Client."""
    return {
        "square": mod.SquareModuleDrawer(),
        "dots": mod.CircleModuleDrawer(),
        "rounded": mod.RoundedModuleDrawer(radius_ratio=0.5),
        "extra-rounded": mod.RoundedModuleDrawer(radius_ratio=1),
        "classy": mod.GappedSquareModuleDrawer(),
        "classy-rounded": mod.VerticalBarsDrawer(),
    }.get(style, mod.SquareModuleDrawer())


def _eye_drawer(style: str):
    """Form der drei Positionsmarken."""
    return {
        "square": mod.SquareModuleDrawer(),
        "dots": mod.CircleModuleDrawer(),
        "rounded": mod.RoundedModuleDrawer(radius_ratio=1),
    }.get(style, mod.SquareModuleDrawer())


# ---------------------------------------------------------------------------
# 🧩 Hauptfunktion: generate_qr_png
# ---------------------------------------------------------------------------

def generate_qr_png(
    payload: str,
    size: int = 600,
    fg: str = "#000000",
    bg: str = "#FFFFFF",
    logo_path: Optional[str] = None,
    module_style: str = "square",
    eye_style: str = "square",
    frame_text: Optional[str] = None,
    frame_color: str = "#000000",
    gradient: Optional[Tuple[str, str]] = None,
    error_correction: str = "H",
    save: bool = False,
    filename: Optional[str] = None,
) -> Dict[str, Union[str, bytes, None]]:
    """
    Rendert den Payload als PNG.
    Gibt {'path': str | None, 'bytes': bytes} zurück; 'path' nur bei save=True.

    Zu lange Payloads lösen qrcode.exceptions.DataOverflowError aus.
    """

    # === 1️⃣ QR-Matrix (komplett von qrcode berechnet) ===
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECTION.get(error_correction.upper(), ERROR_CORRECT_H),
        box_size=10,
        border=4,
    )
    qr.add_data(payload)
    try:
        qr.make(fit=True)
    except ValueError as exc:
        # qrcode 8 meldet "Invalid version (was 41, ...)" statt DataOverflowError
        raise DataOverflowError(f"Payload passt in keine QR-Version (1-40): {len(payload)} Zeichen") from exc

    # === 2️⃣ Farbmaske (Gradient oder statisch) ===
    if gradient and len(gradient) == 2:
        color_mask = mask.RadialGradiantColorMask(
            back_color=ImageColor.getrgb(bg),
            center_color=ImageColor.getrgb(gradient[0]),
            edge_color=ImageColor.getrgb(gradient[1]),
        )
    else:
        color_mask = mask.SolidFillColorMask(
            front_color=ImageColor.getrgb(fg),
            back_color=ImageColor.getrgb(bg),
        )

    img = qr.make_image(
        image_factory=qrcode.image.styledpil.StyledPilImage,
        module_drawer=_module_drawer(module_style),
        eye_drawer=_eye_drawer(eye_style),
        color_mask=color_mask,
    ).convert("RGBA")
    img = img.resize((size, size), Image.Resampling.LANCZOS)

    # === 3️⃣ Logo einfügen ===
    if logo_path and os.path.exists(logo_path):
        try:
            logo = Image.open(logo_path).convert("RGBA")
            logo_size = int(size * 0.2)
            logo = logo.resize((logo_size, logo_size), Image.Resampling.LANCZOS)
            pos = ((img.width - logo_size) // 2, (img.height - logo_size) // 2)
            img.alpha_composite(logo, dest=pos)
        except OSError as e:
            logger.warning(f"⚠️ Logo konnte nicht eingebettet werden: {e}")

    # === 4️⃣ Rahmen / Text unten ===
    if frame_text:
        padding = 80
        framed_img = Image.new("RGBA", (img.width, img.height + padding), bg)
        framed_img.paste(img, (0, 0))

        draw = ImageDraw.Draw(framed_img)
        try:
            font = ImageFont.truetype("arial.ttf", 28)
        except OSError:
            font = ImageFont.load_default()

        text_w = draw.textlength(frame_text, font=font)
        draw.text(
            ((img.width - text_w) // 2, img.height + 10),
            frame_text,
            fill=frame_color,
            font=font,
        )
        img = framed_img

    img = ImageOps.expand(img, border=8, fill=bg)

    buffer = BytesIO()
    img.save(buffer, format="PNG")

    # === 5️⃣ Optional speichern ===
    file_path: Optional[Path] = None
    if save:
        QR_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        file_path = QR_OUTPUT_DIR / (filename or f"qr_{int(time.time())}.png")
        file_path.write_bytes(buffer.getvalue())
        logger.info(f"✅ QR-Code gespeichert unter: {file_path}")

    return {"path": str(file_path) if file_path else None, "bytes": buffer.getvalue()}
