"""Blend method definitions: labels, descriptions and display order."""

BLEND_METHOD_DEFINITIONS = {
    "overlay": {
        "label": "Overlay",
        "description": "Alpha compositing in linear sRGB for colors closer to the theme",
        "order": 0,
    },
    "hueShift": {
        "label": "Hue Shift",
        "description": "OKLCH interpolation with directed hue for perceptually uniform blending",
        "order": 1,
    },
}

DEFAULT_BLEND_METHOD = "hueShift"

ALL_BLEND_METHODS = tuple(
    sorted(BLEND_METHOD_DEFINITIONS, key=lambda m: BLEND_METHOD_DEFINITIONS[m]["order"])
)

BLEND_METHOD_LABELS = {m: BLEND_METHOD_DEFINITIONS[m]["label"] for m in ALL_BLEND_METHODS}


def is_valid_blend_method(value):
    return value in BLEND_METHOD_DEFINITIONS


def clamp_blend_factor(factor):
    """Clamp a blend factor into [0, 1]."""
    return max(0.0, min(1.0, factor))
