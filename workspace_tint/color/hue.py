"""Hue circle arithmetic. All angles are degrees."""


def normalize_hue(hue):
    """Wrap a hue angle into [0, 360)."""
    hue = hue % 360
    # float modulo of a tiny negative number can land exactly on 360
    return 0.0 if hue >= 360 else hue


def apply_hue_offset(hue, offset=None):
    """Add an optional offset to a hue, wrapping to [0, 360)."""
    return normalize_hue(hue + (offset or 0))


def shortest_hue_delta(from_hue, to_hue):
    """Signed rotation from one hue to another, normalized into (-180, 180]."""
    diff = normalize_hue(to_hue - from_hue)
    if diff > 180:
        diff -= 360
    return diff


def directed_hue_delta(from_hue, to_hue, direction):
    """Signed rotation from one hue to another going the given way.

    direction is "cw" (increasing hue), "ccw" (decreasing hue) or
    "shortest". The forced directions may return arcs longer than 180.
    """
    if direction == "cw":
        return normalize_hue(to_hue - from_hue)
    if direction == "ccw":
        diff = normalize_hue(to_hue - from_hue)
        return diff - 360 if diff > 0 else 0.0
    return shortest_hue_delta(from_hue, to_hue)


def hue_distance(hue1, hue2):
    """Unsigned angular distance between two hues, in [0, 180]."""
    return abs(shortest_hue_delta(hue1, hue2))
