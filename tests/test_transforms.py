from io import BytesIO

import pytest
from PIL import Image

from circular_gallery.transforms import fit_cover, round_corners, prepare_card_image


def test_fit_cover_fills_square_without_letterbox():
    # Wide image: left half red, right half blue, a green band in the middle
    img = Image.new("RGB", (300, 100), (255, 0, 0))
    img.paste((0, 0, 255), (150, 0, 300, 100))
    out = fit_cover(img, 64)
    assert out.size == (64, 64)
    assert out.mode == "RGBA"
    # Centre crop keeps both colours, nothing transparent at the edges
    assert out.getpixel((2, 32))[3] == 255
    assert out.getpixel((2, 32))[:3] == (255, 0, 0)
    assert out.getpixel((61, 32))[:3] == (0, 0, 255)


def test_fit_cover_tall_image():
    out = fit_cover(Image.new("L", (40, 400), 128), 32)
    assert out.size == (32, 32)
    assert out.getpixel((16, 0)) == (128, 128, 128, 255)


def test_round_corners_masks_only_corners():
    img = Image.new("RGBA", (64, 64), (10, 20, 30, 255))
    out = round_corners(img, 0.25)
    assert out.getpixel((0, 0))[3] == 0
    assert out.getpixel((63, 63))[3] == 0
    assert out.getpixel((32, 32)) == (10, 20, 30, 255)
    # Edge midpoints are inside the rounded rectangle
    assert out.getpixel((32, 0))[3] == 255
    assert out.getpixel((0, 32))[3] == 255
    # Source is untouched
    assert img.getpixel((0, 0))[3] == 255


def test_round_corners_keeps_existing_transparency():
    img = Image.new("RGBA", (64, 64), (0, 0, 0, 100))
    out = round_corners(img, 0.2)
    assert out.getpixel((32, 32))[3] == 100


def test_zero_radius_is_unchanged():
    img = Image.new("RGBA", (16, 16), (1, 2, 3, 255))
    assert round_corners(img, 0) is img


def test_prepare_card_image_produces_png():
    png, w, h = prepare_card_image(Image.new("RGB", (120, 80), "white"), 0.2, size=48)
    assert (w, h) == (48, 48)
    decoded = Image.open(BytesIO(png))
    assert decoded.format == "PNG"
    assert decoded.size == (48, 48)
    assert decoded.convert("RGBA").getpixel((0, 0))[3] == 0
