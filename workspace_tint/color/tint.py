"""
Tint computation for every managed color key.

compute_tint is the single entry point: it derives the base hue, resolves
a pre-blend tint per key from the style and harmony, then blends each key
toward its theme color. All keys are always computed; the `enabled` flag
on each detail says whether its element is a requested target.

Before blending, the background keys vote on a hue rotation direction so
that neighbouring elements never rotate opposite ways around the circle.
"""

from collections import namedtuple

from ..errors import InvalidColorError, MissingConfigurationError
from ..theme.color_keys import (
    COLOR_KEY_DEFINITIONS,
    MANAGED_COLOR_KEYS,
    PRIMARY_BACKGROUND_KEYS,
    is_light_theme_type,
    validate_theme_type,
)
from ..theme.colors import resolve_theme_color
from .blend import (
    DEFAULT_BLEND_METHOD,
    clamp_blend_factor,
    effective_hue_direction,
    get_blend_function,
    get_hue_blend_direction,
    majority_hue_direction,
)
from .convert import Oklch, hex_to_oklch, max_chroma, oklch_to_hex
from .harmony import DEFAULT_HARMONY, harmony_hue_offset
from .hash import compute_base_hue
from .hue import apply_hue_offset, normalize_hue
from .styles import DEFAULT_COLOR_STYLE, get_style_resolver

DEFAULT_BLEND_FACTOR = 0.35

# Display-only base tint
BASE_TINT_LIGHTNESS_LIGHT = 0.65
BASE_TINT_LIGHTNESS_DARK = 0.5
BASE_TINT_CHROMA_FACTOR = 0.7

TintDetail = namedtuple(
    "TintDetail",
    [
        "key",
        "element",
        "color_type",
        "enabled",
        "tint_hex",
        "theme_color",
        "blend_factor",
        "final_hex",
    ],
)

TintResult = namedtuple("TintResult", ["base_hue", "base_tint_hex", "keys"])

# Per-key working state between resolution and blending
_Resolved = namedtuple(
    "_Resolved", ["key", "definition", "tint_oklch", "hue_only", "theme_hex", "theme_hue"]
)


def compute_base_tint_hex(base_hue, theme_type):
    """Neutral display color for a hue, without style or theme blending."""
    if is_light_theme_type(theme_type):
        lightness = BASE_TINT_LIGHTNESS_LIGHT
    else:
        lightness = BASE_TINT_LIGHTNESS_DARK
    chroma = max_chroma(lightness, base_hue) * BASE_TINT_CHROMA_FACTOR
    return oklch_to_hex(Oklch(lightness, chroma, base_hue))


def _theme_hue(theme_hex):
    if theme_hex is None:
        return None
    try:
        return hex_to_oklch(theme_hex).h
    except InvalidColorError:
        return None


def _resolve_keys(base_hue, theme_type, color_style, color_harmony, theme_colors):
    resolver = get_style_resolver(color_style)
    resolved = []
    for key in MANAGED_COLOR_KEYS:
        definition = COLOR_KEY_DEFINITIONS[key]
        element_hue = apply_hue_offset(
            base_hue, harmony_hue_offset(color_harmony, definition.element)
        )
        theme_hex = resolve_theme_color(key, theme_colors)
        tint_oklch, hue_only = resolver(theme_type, key, element_hue, theme_hex)
        resolved.append(
            _Resolved(key, definition, tint_oklch, hue_only, theme_hex, _theme_hue(theme_hex))
        )
    return resolved


def _harmonized_directions(resolved):
    """Pick the hue direction each key should blend with.

    Background keys with a usable theme color vote with their natural
    direction; every background key is then guided by the majority.
    Foreground keys follow the direction their element's background
    actually took, or the majority when the element had no vote.
    """
    voters = [
        item
        for item in resolved
        if item.definition.color_type == "background" and item.theme_hue is not None
    ]
    majority = majority_hue_direction([(v.tint_oklch.h, v.theme_hue) for v in voters])

    element_directions = {}
    for item in voters:
        if item.definition.element in element_directions:
            continue
        direction = effective_hue_direction(item.tint_oklch.h, item.theme_hue, majority)
        element_directions[item.definition.element] = direction or get_hue_blend_direction(
            item.tint_oklch.h, item.theme_hue
        )

    directions = {}
    for item in resolved:
        if item.definition.color_type == "background":
            directions[item.key] = majority
        else:
            directions[item.key] = element_directions.get(item.definition.element, majority)
    return directions


def compute_tint(
    *,
    targets,
    theme_type,
    workspace_identifier=None,
    base_hue=None,
    color_style=DEFAULT_COLOR_STYLE,
    color_harmony=DEFAULT_HARMONY,
    theme_colors=None,
    theme_blend_factor=DEFAULT_BLEND_FACTOR,
    target_blend_factors=None,
    seed=0,
    blend_method=DEFAULT_BLEND_METHOD,
):
    """Compute the tint for every managed color key.

    Args:
        targets: Elements whose keys are reported as enabled
        theme_type: "dark", "light", "hcDark" or "hcLight"
        workspace_identifier: String hashed into the base hue
        base_hue: Explicit base hue; takes precedence over the identifier
        color_style: Style name; unknown names use the default
        color_harmony: Harmony name; unknown names use the default
        theme_colors: Dict of color key to hex for the active theme
        theme_blend_factor: How far to blend toward the theme (0-1)
        target_blend_factors: Per-element overrides of theme_blend_factor
        seed: Shifts the hashed hue; 0 leaves it unchanged
        blend_method: "hueShift" or "overlay"

    Returns:
        TintResult with one TintDetail per managed key, in canonical order

    Raises:
        MissingConfigurationError: if neither base_hue nor
            workspace_identifier is given
    """
    if base_hue is None:
        if workspace_identifier is None:
            raise MissingConfigurationError(
                "compute_tint requires either base_hue or workspace_identifier"
            )
        base_hue = compute_base_hue(workspace_identifier, seed)
    base_hue = normalize_hue(base_hue)
    theme_type = validate_theme_type(theme_type)

    resolved = _resolve_keys(base_hue, theme_type, color_style, color_harmony, theme_colors)
    directions = _harmonized_directions(resolved)
    blend = get_blend_function(blend_method)
    target_set = set(targets)
    overrides = target_blend_factors or {}

    details = []
    for item in resolved:
        element = item.definition.element
        tint_hex = oklch_to_hex(item.tint_oklch)

        factor = 0.0
        final_hex = tint_hex
        if item.theme_hue is not None:
            factor = clamp_blend_factor(overrides.get(element, theme_blend_factor))
            if factor > 0:
                final_hex = blend(
                    item.tint_oklch,
                    tint_hex,
                    item.theme_hex,
                    factor,
                    item.hue_only,
                    directions[item.key],
                )

        details.append(
            TintDetail(
                key=item.key,
                element=element,
                color_type=item.definition.color_type,
                enabled=element in target_set,
                tint_hex=tint_hex,
                theme_color=item.theme_hex,
                blend_factor=factor,
                final_hex=final_hex,
            )
        )

    return TintResult(base_hue, compute_base_tint_hex(base_hue, theme_type), tuple(details))


def tint_result_to_palette(result):
    """Map each enabled key to its final color."""
    return {detail.key: detail.final_hex for detail in result.keys if detail.enabled}


def tint_result_to_element_colors(result):
    """Base tint plus the primary background of each enabled target."""
    colors = {"baseTint": result.base_tint_hex}
    primary = {key: element for element, key in PRIMARY_BACKGROUND_KEYS.items()}
    for detail in result.keys:
        if detail.enabled and detail.key in primary:
            colors[primary[detail.key]] = detail.final_hex
    return colors
