"""
Color space conversions between sRGB hex, linear RGB, Oklab and OKLCH.

Provides:
- hex parsing and emission
- sRGB gamma encoding/decoding
- Oklab <-> linear RGB using the published OKLab matrices
- gamut testing, chroma clamping and max-chroma search
"""

import math
import re
from collections import namedtuple

import numpy as np

from ..errors import InvalidColorError
from .hue import normalize_hue

Oklch = namedtuple("Oklch", ["l", "c", "h"])
Oklab = namedtuple("Oklab", ["L", "a", "b"])
LinearRgb = namedtuple("LinearRgb", ["r", "g", "b"])

HEX_PATTERN = re.compile(r"^#?[0-9a-fA-F]{6}$")

GAMUT_EPSILON = 1e-4
CHROMA_TOLERANCE = 1e-4
# Above the highest chroma any sRGB color reaches
MAX_SEARCH_CHROMA = 0.4

# Oklab -> non-linear LMS
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

# LMS -> linear sRGB
_LMS_TO_LINEAR_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# linear sRGB -> LMS
_LINEAR_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)

# non-linear LMS -> Oklab
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)


# =============================================================================
# Hex
# =============================================================================


def is_valid_hex(value):
    """True if value is a 6-digit hex color, with or without the leading #."""
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def hex_to_rgb(hex_color):
    """Parse a hex color into an (r, g, b) tuple of 0-255 ints.

    Raises:
        InvalidColorError: if hex_color is not a 6-digit hex string
    """
    if not is_valid_hex(hex_color):
        raise InvalidColorError(hex_color)
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def _to_byte(channel):
    clamped = max(0.0, min(1.0, channel))
    return int(math.floor(clamped * 255 + 0.5))


# =============================================================================
# Gamma
# =============================================================================


def linear_to_srgb(c):
    """Apply the sRGB transfer curve to a linear channel value."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1 / 2.4) - 0.055


def srgb_to_linear(c):
    """Remove the sRGB transfer curve from an encoded channel value."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def hex_to_linear_rgb(hex_color):
    r, g, b = hex_to_rgb(hex_color)
    return LinearRgb(
        srgb_to_linear(r / 255), srgb_to_linear(g / 255), srgb_to_linear(b / 255)
    )


def linear_rgb_to_hex(rgb):
    """Encode linear RGB as hex, clamping each channel into range first."""
    return rgb_to_hex(
        _to_byte(linear_to_srgb(rgb.r)),
        _to_byte(linear_to_srgb(rgb.g)),
        _to_byte(linear_to_srgb(rgb.b)),
    )


# =============================================================================
# Oklab / OKLCH
# =============================================================================


def oklch_to_oklab(oklch):
    h_rad = math.radians(oklch.h)
    return Oklab(oklch.l, oklch.c * math.cos(h_rad), oklch.c * math.sin(h_rad))


def oklab_to_oklch(oklab):
    c = math.hypot(oklab.a, oklab.b)
    h = normalize_hue(math.degrees(math.atan2(oklab.b, oklab.a)))
    return Oklch(oklab.L, c, h)


def oklab_to_linear_rgb(oklab):
    lms_ = _OKLAB_TO_LMS @ np.array(oklab, dtype=np.float64)
    r, g, b = _LMS_TO_LINEAR_RGB @ (lms_**3)
    return LinearRgb(float(r), float(g), float(b))


def linear_rgb_to_oklab(rgb):
    lms = _LINEAR_RGB_TO_LMS @ np.array(rgb, dtype=np.float64)
    L, a, b = _LMS_TO_OKLAB @ np.cbrt(lms)
    return Oklab(float(L), float(a), float(b))


def oklch_to_linear_rgb(oklch):
    return oklab_to_linear_rgb(oklch_to_oklab(oklch))


def hex_to_oklch(hex_color):
    """Convert a hex color to OKLCH.

    Raises:
        InvalidColorError: if hex_color is malformed
    """
    return oklab_to_oklch(linear_rgb_to_oklab(hex_to_linear_rgb(hex_color)))


def oklch_to_hex(oklch):
    """Convert OKLCH to hex, reducing chroma first if it is out of gamut."""
    return linear_rgb_to_hex(oklch_to_linear_rgb(clamp_to_gamut(oklch)))


# =============================================================================
# Gamut
# =============================================================================


def is_in_gamut(rgb):
    """True if every linear channel lies within [0, 1] (with a small epsilon)."""
    return all(-GAMUT_EPSILON <= channel <= 1 + GAMUT_EPSILON for channel in rgb)


def _search_max_chroma(lightness, hue, high):
    """Binary search the largest in-gamut chroma in [0, high]."""
    low = 0.0
    while high - low > CHROMA_TOLERANCE:
        mid = (low + high) / 2
        if is_in_gamut(oklch_to_linear_rgb(Oklch(lightness, mid, hue))):
            low = mid
        else:
            high = mid
    return low


def clamp_to_gamut(oklch):
    """Reduce chroma until the color fits in sRGB.

    Lightness and hue are always preserved; only chroma changes.
    """
    l, c, h = oklch
    if l <= 0:
        return Oklch(0.0, 0.0, h)
    if l >= 1:
        return Oklch(1.0, 0.0, h)
    if c <= 0:
        return oklch
    if is_in_gamut(oklch_to_linear_rgb(oklch)):
        return oklch
    return Oklch(l, _search_max_chroma(l, h, c), h)


def max_chroma(lightness, hue):
    """Largest in-gamut chroma for the given lightness and hue."""
    if lightness <= 0 or lightness >= 1:
        return 0.0
    return _search_max_chroma(lightness, hue, MAX_SEARCH_CHROMA)
