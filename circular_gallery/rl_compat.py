"""Raylib compatibility layer - one API over python-raylib and raylibpy.

Struct values (Rectangle, Vector2, Color) are built with whatever the
loaded binding offers: a Python constructor, a cffi allocation, or a plain
ctypes structure as a last resort.
"""

from __future__ import annotations
import ctypes
from typing import Any, Dict, Optional, Sequence, Tuple

try:
    import raylib as rl
    RL_VERSION = "python-raylib"
except ImportError:
    import raylibpy as rl
    RL_VERSION = "raylibpy"


def _ctypes_struct(name: str, fields: Sequence[str], ctype: Any) -> type:
    return type(name, (ctypes.Structure,), {"_fields_": [(f, ctype) for f in fields]})


_FIELDS: Dict[str, Tuple[str, ...]] = {
    "Rectangle": ("x", "y", "width", "height"),
    "Vector2": ("x", "y"),
    "Color": ("r", "g", "b", "a"),
}
_FALLBACK = {
    "Rectangle": _ctypes_struct("_Rect", _FIELDS["Rectangle"], ctypes.c_float),
    "Vector2": _ctypes_struct("_Vec2", _FIELDS["Vector2"], ctypes.c_float),
    "Color": _ctypes_struct("_Color", _FIELDS["Color"], ctypes.c_ubyte),
}


def _make_struct(name: str, *values: Any) -> Any:
    """Build a raylib struct by value for the current binding."""
    ctor = getattr(rl, name, None)
    if ctor is not None:
        try:
            return ctor(*values)
        except Exception:
            pass
    if hasattr(rl, 'ffi'):
        ptr = rl.ffi.new(f"{name} *")
        for field_name, value in zip(_FIELDS[name], values):
            setattr(ptr[0], field_name, value)
        return ptr[0]
    return _FALLBACK[name](*values)


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    return _make_struct("Rectangle", float(x), float(y), float(w), float(h))


def make_vec2(x: float, y: float) -> Any:
    return _make_struct("Vector2", float(x), float(y))


def make_color(r: int, g: int, b: int, a: int) -> Any:
    return _make_struct("Color", int(r), int(g), int(b), int(a))


def rgba(color: Tuple[int, int, int, int], alpha: float = 1.0) -> Any:
    """Colour tuple with its alpha scaled by ``alpha``."""
    r, g, b, a = color
    return make_color(r, g, b, int(a * max(0.0, min(1.0, alpha))))


def _text_arg(text: str) -> Any:
    return text.encode('utf-8') if RL_VERSION == "python-raylib" else text


def default_font() -> Any:
    return rl.GetFontDefault()


def load_font(path: str, size: int) -> Optional[Any]:
    """Load a TTF/OTF font. Returns None if raylib could not load it."""
    try:
        font = rl.LoadFontEx(_text_arg(path), size, rl.ffi.NULL if hasattr(rl, 'ffi') else None, 0)
    except TypeError:
        font = rl.LoadFontEx(path, size, None, 0)
    if getattr(getattr(font, 'texture', None), 'id', 0):
        rl.SetTextureFilter(font.texture, rl.TEXTURE_FILTER_BILINEAR)
        return font
    return None


def measure_text_ex(font: Any, text: str, size: float, spacing: float) -> Tuple[float, float]:
    """Measure text with a font; returns (width, height) in pixels."""
    v = rl.MeasureTextEx(font, _text_arg(text), float(size), float(spacing))
    return (v.x, v.y)


def draw_text_pro(font: Any, text: str, cx: float, cy: float, size: float,
                  rotation_deg: float, color: Any, spacing: float = 1.0) -> None:
    """Draw text centred on (cx, cy), rotated around that centre."""
    tw, th = measure_text_ex(font, text, size, spacing)
    rl.DrawTextPro(font, _text_arg(text), make_vec2(cx, cy), make_vec2(tw / 2.0, th / 2.0),
                   float(rotation_deg), float(size), float(spacing), color)


def load_texture_from_png(png: bytes) -> Any:
    """Upload PNG bytes as a GPU texture (render thread only)."""
    img = rl.LoadImageFromMemory(_text_arg(".png"), png, len(png))
    try:
        tex = rl.LoadTextureFromImage(img)
    finally:
        rl.UnloadImage(img)
    if not get_texture_id(tex):
        return tex
    try:
        rl.GenTextureMipmaps(rl.ffi.addressof(tex) if hasattr(rl, 'ffi') else ctypes.byref(tex))
        rl.SetTextureFilter(tex, rl.TEXTURE_FILTER_TRILINEAR)
    except Exception:
        # No mipmap support in this binding
        rl.SetTextureFilter(tex, rl.TEXTURE_FILTER_BILINEAR)
    return tex


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'make_color',
    'rgba',
    'default_font',
    'load_font',
    'measure_text_ex',
    'draw_text_pro',
    'load_texture_from_png',
    'get_texture_id',
    'is_texture_valid',
]
