"""
OKLCH hue-shift blending with harmonized hue direction.

Blending each key toward its own theme color along the shortest arc can
pick opposite rotation directions for keys whose theme hues differ by only
a few degrees, when those hues straddle the point opposite the tint hue.
The helpers here classify directions, pick a majority, and bound how far
a forced direction may rotate any single key.
"""

from ...errors import InvalidColorError
from ..convert import Oklch, clamp_to_gamut, hex_to_oklch, oklch_to_hex
from ..hue import directed_hue_delta, normalize_hue, shortest_hue_delta
from .definitions import clamp_blend_factor

# Longest arc a forced direction may take before falling back to shortest
MAX_FORCED_ARC_DEGREES = 270


def blend_hue_directed(hue1, hue2, factor, direction="shortest"):
    """Interpolate between two hues going the given way around the circle."""
    return normalize_hue(hue1 + directed_hue_delta(hue1, hue2, direction) * factor)


def blend_hue(hue1, hue2, factor):
    """Interpolate between two hues along the shortest arc."""
    return blend_hue_directed(hue1, hue2, factor, "shortest")


def get_hue_blend_direction(tint_hue, theme_hue):
    """Direction shortest-path blending would rotate: "cw" or "ccw".

    An exact half turn counts as "cw".
    """
    return "cw" if shortest_hue_delta(tint_hue, theme_hue) >= 0 else "ccw"


def effective_hue_direction(tint_hue, theme_hue, majority_dir=None):
    """Return majority_dir, or None when forcing it would arc too far.

    None means "use the shortest path".
    """
    if majority_dir is None:
        return None
    arc = abs(directed_hue_delta(tint_hue, theme_hue, majority_dir))
    return majority_dir if arc <= MAX_FORCED_ARC_DEGREES else None


def majority_hue_direction(votes):
    """Majority of the natural blend directions of (tint_hue, theme_hue) pairs.

    votes must be in a stable order; a tie goes to the direction of the
    first vote. Returns None when there are no votes.
    """
    directions = [get_hue_blend_direction(tint, theme) for tint, theme in votes]
    if not directions:
        return None
    cw = directions.count("cw")
    ccw = len(directions) - cw
    if cw == ccw:
        return directions[0]
    return "cw" if cw > ccw else "ccw"


def blend_with_theme_oklch(
    tint_oklch, theme_hex, factor, direction="shortest", hue_only=False
):
    """Blend a tint toward a theme color in OKLCH.

    Lightness and chroma interpolate linearly unless hue_only is set, in
    which case they are held at the tint's values. The hue travels in the
    requested direction. The result is clamped to the sRGB gamut. An
    invalid theme hex returns the tint unchanged.
    """
    try:
        theme = hex_to_oklch(theme_hex)
    except InvalidColorError:
        return tint_oklch

    f = clamp_blend_factor(factor)
    h = blend_hue_directed(tint_oklch.h, theme.h, f, direction)
    if hue_only:
        return clamp_to_gamut(Oklch(tint_oklch.l, tint_oklch.c, h))
    return clamp_to_gamut(
        Oklch(
            tint_oklch.l * (1 - f) + theme.l * f,
            tint_oklch.c * (1 - f) + theme.c * f,
            h,
        )
    )


def blend_directed_oklch(tint_oklch, theme_hex, factor, hue_only=False, majority_dir=None):
    """Blend in OKLCH, honouring majority_dir where the arc allows it."""
    try:
        theme_hue = hex_to_oklch(theme_hex).h
    except InvalidColorError:
        return tint_oklch
    direction = effective_hue_direction(tint_oklch.h, theme_hue, majority_dir)
    return blend_with_theme_oklch(
        tint_oklch, theme_hex, factor, direction or "shortest", hue_only
    )


def hue_shift_blend(tint_oklch, tint_hex, theme_hex, factor, hue_only=False, majority_dir=None):
    """Blend strategy: directed OKLCH interpolation, emitted as hex."""
    return oklch_to_hex(
        blend_directed_oklch(tint_oklch, theme_hex, factor, hue_only, majority_dir)
    )
