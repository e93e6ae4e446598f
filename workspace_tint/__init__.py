from .color.tint import (
    DEFAULT_BLEND_FACTOR,
    TintDetail,
    TintResult,
    compute_base_tint_hex,
    compute_tint,
    tint_result_to_element_colors,
    tint_result_to_palette,
)
from .errors import ConfigError, InvalidColorError, MissingConfigurationError, TintError

__all__ = [
    "ConfigError",
    "DEFAULT_BLEND_FACTOR",
    "InvalidColorError",
    "MissingConfigurationError",
    "TintDetail",
    "TintError",
    "TintResult",
    "compute_base_tint_hex",
    "compute_tint",
    "tint_result_to_element_colors",
    "tint_result_to_palette",
]
