"""
Tint settings.

Settings are read from a JSON object whose keys mirror the editor settings:

    {
        "targets": ["titleBar", "statusBar"],
        "mode": "auto",
        "seed": 0,
        "baseHueOverride": null,
        "colorStyle": "pastel",
        "colorHarmony": "uniform",
        "blendMethod": "hueShift",
        "blendFactor": 0.35,
        "targetBlendFactors": {"statusBar": 0.5},
        "theme.colors": {"My Theme": {"type": "dark", "colors": {...}}},
        "workspaceIdentifier": {"source": "pathRelativeToHome", "customBasePath": ""}
    }

Every value is validated on load. Invalid values fall back to defaults
rather than failing; only an unreadable file or a non-object document
raises ConfigError.
"""

import json
import logging
from collections import namedtuple

from .color.blend import ALL_BLEND_METHODS, DEFAULT_BLEND_METHOD, clamp_blend_factor
from .color.harmony import ALL_HARMONIES, DEFAULT_HARMONY
from .color.styles import ALL_COLOR_STYLES, DEFAULT_COLOR_STYLE
from .color.tint import DEFAULT_BLEND_FACTOR
from .errors import ConfigError
from .theme.color_keys import TINT_TARGETS
from .theme.colors import parse_custom_themes
from .theme.providers import DEFAULT_THEME_MODE, THEME_MODES
from .workspace import DEFAULT_IDENTIFIER_SOURCE, IDENTIFIER_SOURCES

logger = logging.getLogger(__name__)

DEFAULT_TARGETS = ("titleBar", "statusBar", "activityBar")

TintConfig = namedtuple(
    "TintConfig",
    [
        "targets",
        "mode",
        "seed",
        "base_hue_override",
        "color_style",
        "color_harmony",
        "blend_method",
        "blend_factor",
        "target_blend_factors",
        "custom_themes",
        "identifier_source",
        "custom_base_path",
    ],
)
TintConfig.__new__.__defaults__ = (
    DEFAULT_TARGETS,
    DEFAULT_THEME_MODE,
    0,
    None,
    DEFAULT_COLOR_STYLE,
    DEFAULT_HARMONY,
    DEFAULT_BLEND_METHOD,
    DEFAULT_BLEND_FACTOR,
    None,
    None,
    DEFAULT_IDENTIFIER_SOURCE,
    "",
)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_enum(value, valid_values, default):
    """Return value if it is one of valid_values, otherwise default."""
    return value if value in valid_values else default


def validate_seed(value):
    return value if _is_int(value) else 0


def validate_base_hue_override(value):
    """An integer hue in [0, 359], or None."""
    if _is_int(value) and 0 <= value <= 359:
        return value
    return None


def validate_blend_factor(value, default=DEFAULT_BLEND_FACTOR):
    if not _is_number(value):
        return default
    return clamp_blend_factor(value)


def build_targets(value):
    """Build the ordered target list from a list of names or a dict of flags.

    The result is always in titleBar, statusBar, activityBar, sideBar order.
    """
    if isinstance(value, dict):
        enabled = {target for target, flag in value.items() if flag is True}
    elif isinstance(value, (list, tuple)):
        enabled = set(value)
    else:
        return DEFAULT_TARGETS
    return tuple(target for target in TINT_TARGETS if target in enabled)


def build_target_blend_factors(value):
    """Per-target blend factor overrides; non-numeric entries are dropped."""
    if not isinstance(value, dict):
        return {}
    return {
        target: clamp_blend_factor(value[target])
        for target in TINT_TARGETS
        if _is_number(value.get(target))
    }


def config_from_dict(data):
    """Build a validated TintConfig from a settings dict."""
    identifier = data.get("workspaceIdentifier")
    if not isinstance(identifier, dict):
        identifier = {}
    custom_base_path = identifier.get("customBasePath", "")

    return TintConfig(
        targets=build_targets(data.get("targets", DEFAULT_TARGETS)),
        mode=validate_enum(data.get("mode"), THEME_MODES, DEFAULT_THEME_MODE),
        seed=validate_seed(data.get("seed", 0)),
        base_hue_override=validate_base_hue_override(data.get("baseHueOverride")),
        color_style=validate_enum(data.get("colorStyle"), ALL_COLOR_STYLES, DEFAULT_COLOR_STYLE),
        color_harmony=validate_enum(data.get("colorHarmony"), ALL_HARMONIES, DEFAULT_HARMONY),
        blend_method=validate_enum(data.get("blendMethod"), ALL_BLEND_METHODS, DEFAULT_BLEND_METHOD),
        blend_factor=validate_blend_factor(data.get("blendFactor")),
        target_blend_factors=build_target_blend_factors(data.get("targetBlendFactors")),
        custom_themes=parse_custom_themes(data.get("theme.colors")),
        identifier_source=validate_enum(
            identifier.get("source"), IDENTIFIER_SOURCES, DEFAULT_IDENTIFIER_SOURCE
        ),
        custom_base_path=custom_base_path if isinstance(custom_base_path, str) else "",
    )


def load_config(filepath):
    """Load and validate a JSON settings file.

    Raises:
        ConfigError: if the file cannot be read, is not valid JSON,
            or does not hold a JSON object
    """
    try:
        with open(filepath) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read settings from {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {filepath} must be a JSON object")

    logger.debug("Loaded settings from %s", filepath)
    return config_from_dict(data)


def load_theme_colors(filepath):
    """Load a JSON object of color key -> hex for use as theme colors.

    Entries that are not valid hex are kept; the tinter treats them as absent.

    Raises:
        ConfigError: if the file cannot be read or is not a JSON object
    """
    try:
        with open(filepath) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read theme colors from {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Theme colors in {filepath} must be a JSON object")
    # Accept a full theme entry as well as a bare colors object
    if isinstance(data.get("colors"), dict):
        data = data["colors"]
    return data
