import io
from pathlib import Path

import pytest
from PIL import Image
from qrcode.exceptions import DataOverflowError

import utils.qr_generator as qr_generator
from utils.qr_config import QR_DEFAULT_STYLE, QR_THEMES, get_qr_style
from utils.qr_generator import generate_qr_png


def test_qr_generator_returns_png_bytes_without_saving():
    result = generate_qr_png(payload="https://example.com/test", size=300)
    assert isinstance(result, dict)
    assert result["path"] is None
    img = Image.open(io.BytesIO(result["bytes"]))
    assert img.format == "PNG"
    # 300 px + 8 px Rand auf jeder Seite
    assert img.size == (316, 316)


def test_qr_generator_creates_file(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(qr_generator, "QR_OUTPUT_DIR", tmp_path)
    result = generate_qr_png(payload="tel:+1234567890", size=200, save=True, filename="tel.png")
    assert Path(result["path"]).exists(), f"Datei fehlt: {result['path']}"
    assert Path(result["path"]).read_bytes() == result["bytes"]


@pytest.mark.parametrize("level", ["L", "M", "Q", "H", "x"])
def test_qr_generator_accepts_error_correction_levels(level):
    result = generate_qr_png(payload="Hello World", size=120, error_correction=level)
    assert result["bytes"]


def test_frame_text_adds_label_area():
    result = generate_qr_png(payload="Hello World", size=200, frame_text="Scan me")
    img = Image.open(io.BytesIO(result["bytes"]))
    assert img.size[1] > img.size[0]


def test_oversized_payload_raises_data_overflow():
    # 3000 Zeichen Text passen auch mit Level L in keine Version bis 40
    with pytest.raises(DataOverflowError):
        generate_qr_png(payload="x" * 3000, size=100, error_correction="L")
    with pytest.raises(DataOverflowError):
        generate_qr_png(payload="x" * 1300, size=100, error_correction="H")


def test_invalid_color_raises_value_error():
    with pytest.raises(ValueError):
        generate_qr_png(payload="x", size=100, fg="not-a-color")


@pytest.mark.parametrize("theme", sorted(QR_THEMES))
def test_every_theme_renders(theme):
    style = get_qr_style(theme)
    result = generate_qr_png(
        payload="geo:40.7128,-74.0060",
        size=120,
        fg=style["fg"],
        bg=style["bg"],
        gradient=style["gradient"],
        module_style=style["module_style"],
        eye_style=style["eye_style"],
    )
    assert result["bytes"]


def test_unknown_theme_uses_default_style():
    assert get_qr_style("does-not-exist") == QR_DEFAULT_STYLE
    assert get_qr_style("does-not-exist")["error_correction"] == "H"
