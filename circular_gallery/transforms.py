"""Card image shaping with Pillow.

Cards are square: the source is cover-cropped around its centre (no
letterboxing) and the corners are masked to the configured radius, which is
a fraction of the card edge.
"""

from __future__ import annotations
from io import BytesIO
from typing import Tuple

from PIL import Image, ImageDraw, ImageOps

from .config import TEXTURE_SIZE


def fit_cover(img: Image.Image, size: int = TEXTURE_SIZE) -> Image.Image:
    """Scale and centre-crop an image to fill a size x size square."""
    img = ImageOps.exif_transpose(img)
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return ImageOps.fit(img, (size, size), method=Image.LANCZOS, centering=(0.5, 0.5))


def round_corners(img: Image.Image, radius_frac: float) -> Image.Image:
    """Make the corners outside a rounded rectangle transparent.

    Args:
        img: RGBA image.
        radius_frac: Corner radius as a fraction of the shorter side (0..0.5).
    """
    if radius_frac <= 0:
        return img
    w, h = img.size
    radius = int(round(min(w, h) * min(radius_frac, 0.5)))
    mask = Image.new("L", (w, h), 0)
    ImageDraw.Draw(mask).rounded_rectangle((0, 0, w - 1, h - 1), radius=radius, fill=255)

    alpha = img.getchannel("A")
    out = img.copy()
    out.putalpha(Image.composite(alpha, mask, mask))
    return out


def encode_png(img: Image.Image) -> bytes:
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def prepare_card_image(img: Image.Image, radius_frac: float,
                       size: int = TEXTURE_SIZE) -> Tuple[bytes, int, int]:
    """Full pipeline: cover crop, round corners, encode. Returns (png, w, h)."""
    card = round_corners(fit_cover(img, size), radius_frac)
    return (encode_png(card), card.width, card.height)
