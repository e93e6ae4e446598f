from ...errors import InvalidColorError
from ..convert import LinearRgb, hex_to_linear_rgb, linear_rgb_to_hex
from .definitions import clamp_blend_factor


def overlay_blend(tint_oklch, tint_hex, theme_hex, factor, hue_only=False, majority_dir=None):
    """Composite the tint over the theme color in linear sRGB.

    factor=0 returns the tint, factor=1 the theme color. Hue handling is
    irrelevant here, so hue_only and majority_dir are accepted and ignored.
    An unparseable hex on either side returns the tint hex unchanged.
    """
    try:
        tint_rgb = hex_to_linear_rgb(tint_hex)
        theme_rgb = hex_to_linear_rgb(theme_hex)
    except InvalidColorError:
        return tint_hex

    f = clamp_blend_factor(factor)
    inv = 1 - f
    return linear_rgb_to_hex(
        LinearRgb(
            tint_rgb.r * inv + theme_rgb.r * f,
            tint_rgb.g * inv + theme_rgb.g * f,
            tint_rgb.b * inv + theme_rgb.b * f,
        )
    )
