"""
Color keys managed by the tinter, and the UI elements they belong to.

Each managed key carries:
- element: the UI element it colors (sideBarSectionHeader keys belong to sideBar)
- color_type: "background" or "foreground"
- required: whether a theme is expected to define it
- in_palette: whether it is written to the output palette
"""

from collections import namedtuple

ColorKeyDefinition = namedtuple(
    "ColorKeyDefinition", ["element", "color_type", "required", "in_palette"]
)

THEME_TYPES = ("dark", "light", "hcDark", "hcLight")
DEFAULT_THEME_TYPE = "dark"

ELEMENTS = ("editor", "titleBar", "statusBar", "activityBar", "sideBar")
TINT_TARGETS = ("titleBar", "statusBar", "activityBar", "sideBar")

# Canonical order; harmonization votes are counted in this order
COLOR_KEY_DEFINITIONS = {
    "titleBar.activeBackground": ColorKeyDefinition("titleBar", "background", True, True),
    "titleBar.activeForeground": ColorKeyDefinition("titleBar", "foreground", True, True),
    "titleBar.inactiveBackground": ColorKeyDefinition("titleBar", "background", False, True),
    "titleBar.inactiveForeground": ColorKeyDefinition("titleBar", "foreground", False, True),
    "statusBar.background": ColorKeyDefinition("statusBar", "background", True, True),
    "statusBar.foreground": ColorKeyDefinition("statusBar", "foreground", True, True),
    "activityBar.background": ColorKeyDefinition("activityBar", "background", True, True),
    "activityBar.foreground": ColorKeyDefinition("activityBar", "foreground", True, True),
    "sideBar.background": ColorKeyDefinition("sideBar", "background", True, True),
    "sideBar.foreground": ColorKeyDefinition("sideBar", "foreground", False, True),
    "sideBarSectionHeader.background": ColorKeyDefinition("sideBar", "background", False, True),
    "sideBarSectionHeader.foreground": ColorKeyDefinition("sideBar", "foreground", False, True),
}

MANAGED_COLOR_KEYS = tuple(COLOR_KEY_DEFINITIONS)

# Theme keys read for fallback but never written
EDITOR_BACKGROUND = "editor.background"
EDITOR_FOREGROUND = "editor.foreground"
THEME_COLOR_KEYS = MANAGED_COLOR_KEYS + (EDITOR_BACKGROUND, EDITOR_FOREGROUND)

# Element-level fallback when a theme omits a key
COLOR_KEY_FALLBACKS = {
    "titleBar.inactiveBackground": "titleBar.activeBackground",
    "titleBar.inactiveForeground": "titleBar.activeForeground",
    "sideBarSectionHeader.background": "sideBar.background",
    "sideBarSectionHeader.foreground": "sideBar.foreground",
}

# Key whose final color represents each target element
PRIMARY_BACKGROUND_KEYS = {
    "titleBar": "titleBar.activeBackground",
    "statusBar": "statusBar.background",
    "activityBar": "activityBar.background",
    "sideBar": "sideBar.background",
}


def is_foreground_key(key):
    if key == EDITOR_FOREGROUND:
        return True
    definition = COLOR_KEY_DEFINITIONS.get(key)
    return definition is not None and definition.color_type == "foreground"


def element_for_key(key):
    return COLOR_KEY_DEFINITIONS[key].element


def element_groups():
    """Managed keys grouped by element, in canonical order."""
    groups = {}
    for key, definition in COLOR_KEY_DEFINITIONS.items():
        groups.setdefault(definition.element, []).append(key)
    return {element: tuple(keys) for element, keys in groups.items()}


def is_valid_theme_type(value):
    return value in THEME_TYPES


def validate_theme_type(value):
    """Return value if it is a known theme type, else the default."""
    return value if is_valid_theme_type(value) else DEFAULT_THEME_TYPE


def is_light_theme_type(theme_type):
    return theme_type in ("light", "hcLight")
