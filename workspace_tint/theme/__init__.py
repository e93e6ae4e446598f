from .color_keys import (
    COLOR_KEY_DEFINITIONS,
    DEFAULT_THEME_TYPE,
    ELEMENTS,
    MANAGED_COLOR_KEYS,
    THEME_TYPES,
    TINT_TARGETS,
    validate_theme_type,
)
from .colors import (
    ThemeInfo,
    get_color_for_key,
    get_theme_info,
    parse_custom_themes,
    resolve_theme_color,
)
from .providers import (
    AppearanceSource,
    MappingThemeColorSource,
    OsAppearanceSource,
    RegistryThemeColorSource,
    ThemeColorSource,
    collect_theme_colors,
    resolve_theme_type,
)

__all__ = [
    "AppearanceSource",
    "COLOR_KEY_DEFINITIONS",
    "DEFAULT_THEME_TYPE",
    "ELEMENTS",
    "MANAGED_COLOR_KEYS",
    "MappingThemeColorSource",
    "OsAppearanceSource",
    "RegistryThemeColorSource",
    "THEME_TYPES",
    "TINT_TARGETS",
    "ThemeColorSource",
    "ThemeInfo",
    "collect_theme_colors",
    "get_color_for_key",
    "get_theme_info",
    "parse_custom_themes",
    "resolve_theme_color",
    "resolve_theme_type",
    "validate_theme_type",
]
