from collections import namedtuple

from ...errors import InvalidColorError
from ...theme.color_keys import validate_theme_type
from ..convert import Oklch, hex_to_oklch, max_chroma
from ..hue import apply_hue_offset
from .tables import PASTEL

StyleResolution = namedtuple("StyleResolution", ["tint_oklch", "hue_only"])


def static_resolver(table):
    """Build a resolver that reads lightness and chroma from a style table.

    Chroma is chroma_factor times the maximum in-gamut chroma at the
    table's lightness and the (offset) element hue, so the tint is always
    displayable.
    """

    def resolve(theme_type, key, element_hue, theme_hex=None):
        config = table[validate_theme_type(theme_type)][key]
        hue = apply_hue_offset(element_hue, config.hue_offset)
        chroma = max_chroma(config.lightness, hue) * config.chroma_factor
        return StyleResolution(Oklch(config.lightness, chroma, hue), False)

    return resolve


pastel_resolver = static_resolver(PASTEL)


def adaptive_resolver(theme_type, key, element_hue, theme_hex=None):
    """Keep the theme color's lightness and chroma, replace its hue with the element hue.

    Blending then only moves the hue, so factor 0 shows the full tint hue
    and factor 1 restores the theme's own hue. A missing or malformed
    theme color falls back to pastel.
    """
    if theme_hex is None:
        return pastel_resolver(theme_type, key, element_hue)
    try:
        theme = hex_to_oklch(theme_hex)
    except InvalidColorError:
        return pastel_resolver(theme_type, key, element_hue)
    return StyleResolution(Oklch(theme.l, theme.c, element_hue), True)
