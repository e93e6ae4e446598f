from .definitions import (
    ALL_COLOR_STYLES,
    COLOR_STYLE_DEFINITIONS,
    COLOR_STYLE_LABELS,
    DEFAULT_COLOR_STYLE,
    is_valid_color_style,
    validate_color_style,
)
from .resolvers import StyleResolution, adaptive_resolver, static_resolver
from .tables import STATIC_STYLE_TABLES, ElementConfig

_STYLE_RESOLVERS = {style: static_resolver(table) for style, table in STATIC_STYLE_TABLES.items()}
_STYLE_RESOLVERS["adaptive"] = adaptive_resolver


def get_style_resolver(style):
    """Return the resolver for a color style; unknown styles get the default."""
    return _STYLE_RESOLVERS.get(style, _STYLE_RESOLVERS[DEFAULT_COLOR_STYLE])


__all__ = [
    "ALL_COLOR_STYLES",
    "COLOR_STYLE_DEFINITIONS",
    "COLOR_STYLE_LABELS",
    "DEFAULT_COLOR_STYLE",
    "ElementConfig",
    "STATIC_STYLE_TABLES",
    "StyleResolution",
    "adaptive_resolver",
    "get_style_resolver",
    "is_valid_color_style",
    "static_resolver",
    "validate_color_style",
]
