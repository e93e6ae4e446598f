from .definitions import (
    ALL_BLEND_METHODS,
    BLEND_METHOD_DEFINITIONS,
    BLEND_METHOD_LABELS,
    DEFAULT_BLEND_METHOD,
    clamp_blend_factor,
    is_valid_blend_method,
)
from .hue_shift import (
    MAX_FORCED_ARC_DEGREES,
    blend_directed_oklch,
    blend_hue,
    blend_hue_directed,
    blend_with_theme_oklch,
    effective_hue_direction,
    get_hue_blend_direction,
    hue_shift_blend,
    majority_hue_direction,
)
from .overlay import overlay_blend

_BLEND_FUNCTIONS = {
    "overlay": overlay_blend,
    "hueShift": hue_shift_blend,
}


def get_blend_function(method):
    """Return the blend strategy for a method name, or the default one."""
    return _BLEND_FUNCTIONS.get(method, _BLEND_FUNCTIONS[DEFAULT_BLEND_METHOD])


__all__ = [
    "ALL_BLEND_METHODS",
    "BLEND_METHOD_DEFINITIONS",
    "BLEND_METHOD_LABELS",
    "DEFAULT_BLEND_METHOD",
    "MAX_FORCED_ARC_DEGREES",
    "blend_directed_oklch",
    "blend_hue",
    "blend_hue_directed",
    "blend_with_theme_oklch",
    "clamp_blend_factor",
    "effective_hue_direction",
    "get_blend_function",
    "get_hue_blend_direction",
    "hue_shift_blend",
    "is_valid_blend_method",
    "majority_hue_direction",
    "overlay_blend",
]
