from .convert import (
    LinearRgb,
    Oklab,
    Oklch,
    clamp_to_gamut,
    hex_to_oklch,
    hex_to_rgb,
    is_in_gamut,
    is_valid_hex,
    max_chroma,
    oklch_to_hex,
    rgb_to_hex,
)
from .harmony import ALL_HARMONIES, DEFAULT_HARMONY, harmony_hue_offset
from .hash import compute_base_hue, hash_string
from .hue import apply_hue_offset, normalize_hue

__all__ = [
    "ALL_HARMONIES",
    "DEFAULT_HARMONY",
    "LinearRgb",
    "Oklab",
    "Oklch",
    "apply_hue_offset",
    "clamp_to_gamut",
    "compute_base_hue",
    "harmony_hue_offset",
    "hash_string",
    "hex_to_oklch",
    "hex_to_rgb",
    "is_in_gamut",
    "is_valid_hex",
    "max_chroma",
    "normalize_hue",
    "oklch_to_hex",
    "rgb_to_hex",
]
