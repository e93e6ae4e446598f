"""
Theme color lookup, validation and the theme registry.

A theme is described by a ThemeInfo: its type and a dict of color key to
hex. Themes come from two places, checked in order:
1. custom entries supplied through settings (`theme.colors`)
2. the built-in compact table in builtin.py
"""

import logging
from collections import namedtuple
from functools import lru_cache

from ..color.convert import is_valid_hex
from .builtin import BUILTIN_THEME_DATA, COMPACT_COLOR_KEY_ORDER
from .color_keys import (
    COLOR_KEY_FALLBACKS,
    EDITOR_BACKGROUND,
    EDITOR_FOREGROUND,
    THEME_COLOR_KEYS,
    THEME_TYPES,
    is_foreground_key,
)

logger = logging.getLogger(__name__)

ThemeInfo = namedtuple("ThemeInfo", ["colors", "type"])


def get_color_for_key(key, colors):
    """Get the theme color that applies to a managed key.

    Lookup order:
    1. the key itself
    2. its element-level fallback (e.g. sideBar.background for the section header)
    3. editor.foreground for foreground keys, editor.background otherwise

    Returns None when nothing applies. The value is not validated.
    """
    if not colors:
        return None
    direct = colors.get(key)
    if direct:
        return direct

    fallback = COLOR_KEY_FALLBACKS.get(key)
    if fallback and colors.get(fallback):
        return colors[fallback]

    if is_foreground_key(key):
        return colors.get(EDITOR_FOREGROUND) or None
    return colors.get(EDITOR_BACKGROUND) or None


def resolve_theme_color(key, colors):
    """Like get_color_for_key, but treats a malformed hex as absent."""
    value = get_color_for_key(key, colors)
    return value if is_valid_hex(value) else None


# =============================================================================
# Validation
# =============================================================================


def is_valid_theme_colors(value):
    """editor.background must be a valid hex; other known keys must be valid if present."""
    if not isinstance(value, dict):
        return False
    if not is_valid_hex(value.get(EDITOR_BACKGROUND)):
        return False
    for key in THEME_COLOR_KEYS:
        if value.get(key) is not None and not is_valid_hex(value[key]):
            return False
    return True


def is_valid_theme_info(value):
    if not isinstance(value, dict):
        return False
    if value.get("type") not in THEME_TYPES:
        return False
    return is_valid_theme_colors(value.get("colors"))


def _normalize_hex(value):
    return "#" + value.lstrip("#").lower()


def normalize_theme_info(value):
    """Keep only known keys and normalize hexes to lowercase `#rrggbb`."""
    colors = {
        key: _normalize_hex(value["colors"][key])
        for key in THEME_COLOR_KEYS
        if value["colors"].get(key)
    }
    return ThemeInfo(colors, value["type"])


def parse_custom_themes(raw):
    """Turn the `theme.colors` settings value into ThemeInfo entries.

    Invalid entries are skipped with a warning.
    """
    if not isinstance(raw, dict):
        return {}
    themes = {}
    for name, entry in raw.items():
        if is_valid_theme_info(entry):
            themes[name] = normalize_theme_info(entry)
        else:
            logger.warning("Ignoring invalid custom theme entry %r", name)
    return themes


# =============================================================================
# Registry
# =============================================================================


def _expand_hex(value):
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return "#" + value.lower()


def decode_theme_entry(entry):
    """Decode a compact (colors, type_index) entry into a ThemeInfo."""
    values, type_index = entry
    colors = {
        key: _expand_hex(value)
        for key, value in zip(COMPACT_COLOR_KEY_ORDER, values)
        if value
    }
    return ThemeInfo(colors, THEME_TYPES[type_index])


@lru_cache(maxsize=None)
def get_builtin_theme(name):
    """Decode a built-in theme on first access; None if unknown."""
    entry = BUILTIN_THEME_DATA.get(name)
    if entry is None:
        return None
    logger.debug("Decoding built-in theme %r", name)
    return decode_theme_entry(entry)


def get_theme_info(name, custom_themes=None):
    """Look a theme up by name: custom entries first, then built-ins."""
    if custom_themes and name in custom_themes:
        return custom_themes[name]
    return get_builtin_theme(name)
