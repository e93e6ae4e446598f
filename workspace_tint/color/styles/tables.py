"""
Static style tables.

Each table maps theme type -> managed color key -> ElementConfig. Lightness
is OKLCH lightness; chroma_factor is the fraction of the maximum in-gamut
chroma for that lightness and hue, so perceived saturation stays even
across hues. hue_offset is added to the element hue before resolving.
"""

from collections import namedtuple

from ...theme.color_keys import MANAGED_COLOR_KEYS, element_for_key

ElementConfig = namedtuple("ElementConfig", ["lightness", "chroma_factor", "hue_offset"])
ElementConfig.__new__.__defaults__ = (0,)


def _table(rows):
    """Build a style table from (lightness, chroma_factor) pairs in canonical key order."""
    return {
        theme_type: {
            key: ElementConfig(l, c) for key, (l, c) in zip(MANAGED_COLOR_KEYS, pairs)
        }
        for theme_type, pairs in rows.items()
    }


def _with_hue_offsets(table, offsets):
    """Copy a table, shifting the hue of every key whose element is in offsets."""
    return {
        theme_type: {
            key: config._replace(hue_offset=offsets.get(element_for_key(key), 0))
            for key, config in configs.items()
        }
        for theme_type, configs in table.items()
    }


# Pairs per row: titleBar active bg/fg, inactive bg/fg, statusBar bg/fg,
# activityBar bg/fg, sideBar bg/fg, sideBarSectionHeader bg/fg

PASTEL = _table(
    {
        "dark": [
            (0.42, 0.55), (0.92, 0.12), (0.36, 0.45), (0.72, 0.1),
            (0.45, 0.6), (0.92, 0.12),
            (0.34, 0.5), (0.88, 0.12),
            (0.31, 0.5), (0.88, 0.12), (0.34, 0.5), (0.88, 0.12),
        ],
        "light": [
            (0.76, 0.55), (0.15, 0.15), (0.8, 0.45), (0.35, 0.1),
            (0.72, 0.6), (0.15, 0.15),
            (0.82, 0.5), (0.18, 0.12),
            (0.85, 0.5), (0.18, 0.12), (0.82, 0.5), (0.18, 0.12),
        ],
        "hcDark": [
            (0.24, 0.6), (0.96, 0.1), (0.2, 0.5), (0.82, 0.08),
            (0.26, 0.65), (0.96, 0.1),
            (0.18, 0.55), (0.94, 0.1),
            (0.15, 0.55), (0.94, 0.1), (0.18, 0.55), (0.94, 0.1),
        ],
        "hcLight": [
            (0.88, 0.6), (0.1, 0.2), (0.9, 0.5), (0.25, 0.12),
            (0.85, 0.65), (0.1, 0.2),
            (0.92, 0.55), (0.12, 0.15),
            (0.95, 0.55), (0.12, 0.15), (0.92, 0.55), (0.12, 0.15),
        ],
    }
)

NEON = _table(
    {
        "dark": [
            (0.58, 1.0), (0.98, 0.15), (0.5, 0.85), (0.82, 0.12),
            (0.6, 1.0), (0.98, 0.15),
            (0.52, 0.95), (0.96, 0.14),
            (0.49, 0.95), (0.96, 0.14), (0.52, 0.95), (0.96, 0.14),
        ],
        "light": [
            (0.72, 0.95), (0.12, 0.25), (0.76, 0.8), (0.28, 0.18),
            (0.7, 1.0), (0.12, 0.25),
            (0.78, 0.9), (0.15, 0.2),
            (0.81, 0.9), (0.15, 0.2), (0.78, 0.9), (0.15, 0.2),
        ],
        "hcDark": [
            (0.45, 1.0), (0.99, 0.12), (0.38, 0.9), (0.9, 0.1),
            (0.48, 1.0), (0.99, 0.12),
            (0.4, 0.95), (0.98, 0.1),
            (0.37, 0.95), (0.98, 0.1), (0.4, 0.95), (0.98, 0.1),
        ],
        "hcLight": [
            (0.8, 1.0), (0.06, 0.3), (0.84, 0.85), (0.2, 0.2),
            (0.78, 1.0), (0.06, 0.3),
            (0.85, 0.95), (0.08, 0.25),
            (0.88, 0.95), (0.08, 0.25), (0.85, 0.95), (0.08, 0.25),
        ],
    }
)

VIBRANT = _table(
    {
        "dark": [
            (0.5, 0.8), (0.95, 0.12), (0.43, 0.7), (0.78, 0.1),
            (0.52, 0.85), (0.95, 0.12),
            (0.42, 0.75), (0.92, 0.12),
            (0.38, 0.75), (0.92, 0.12), (0.42, 0.75), (0.92, 0.12),
        ],
        "light": [
            (0.72, 0.8), (0.14, 0.2), (0.77, 0.65), (0.32, 0.14),
            (0.7, 0.85), (0.14, 0.2),
            (0.8, 0.75), (0.16, 0.16),
            (0.83, 0.75), (0.16, 0.16), (0.8, 0.75), (0.16, 0.16),
        ],
        "hcDark": [
            (0.32, 0.85), (0.98, 0.1), (0.27, 0.7), (0.86, 0.08),
            (0.34, 0.9), (0.98, 0.1),
            (0.26, 0.8), (0.96, 0.1),
            (0.22, 0.8), (0.96, 0.1), (0.26, 0.8), (0.96, 0.1),
        ],
        "hcLight": [
            (0.85, 0.85), (0.08, 0.25), (0.88, 0.7), (0.22, 0.15),
            (0.82, 0.9), (0.08, 0.25),
            (0.89, 0.8), (0.1, 0.2),
            (0.92, 0.8), (0.1, 0.2), (0.89, 0.8), (0.1, 0.2),
        ],
    }
)

MUTED = _table(
    {
        "dark": [
            (0.38, 0.3), (0.88, 0.08), (0.33, 0.25), (0.68, 0.06),
            (0.4, 0.35), (0.88, 0.08),
            (0.31, 0.28), (0.84, 0.07),
            (0.28, 0.28), (0.84, 0.07), (0.31, 0.28), (0.84, 0.07),
        ],
        "light": [
            (0.8, 0.3), (0.18, 0.1), (0.84, 0.25), (0.38, 0.07),
            (0.77, 0.35), (0.18, 0.1),
            (0.85, 0.28), (0.2, 0.08),
            (0.88, 0.28), (0.2, 0.08), (0.85, 0.28), (0.2, 0.08),
        ],
        "hcDark": [
            (0.2, 0.35), (0.94, 0.06), (0.16, 0.28), (0.8, 0.05),
            (0.22, 0.38), (0.94, 0.06),
            (0.14, 0.3), (0.92, 0.05),
            (0.11, 0.3), (0.92, 0.05), (0.14, 0.3), (0.92, 0.05),
        ],
        "hcLight": [
            (0.91, 0.35), (0.1, 0.12), (0.93, 0.28), (0.26, 0.08),
            (0.89, 0.38), (0.1, 0.12),
            (0.94, 0.3), (0.12, 0.1),
            (0.96, 0.3), (0.12, 0.1), (0.94, 0.3), (0.12, 0.1),
        ],
    }
)

TINTED = _table(
    {
        "dark": [
            (0.3, 0.1), (0.88, 0.08), (0.24, 0.08), (0.65, 0.06),
            (0.32, 0.12), (0.88, 0.08),
            (0.22, 0.1), (0.82, 0.06),
            (0.19, 0.1), (0.82, 0.06), (0.22, 0.1), (0.82, 0.06),
        ],
        "light": [
            (0.85, 0.1), (0.15, 0.08), (0.9, 0.08), (0.35, 0.06),
            (0.82, 0.12), (0.15, 0.08),
            (0.92, 0.1), (0.18, 0.06),
            (0.95, 0.1), (0.18, 0.06), (0.92, 0.1), (0.18, 0.06),
        ],
        "hcDark": [
            (0.14, 0.1), (0.96, 0.06), (0.1, 0.08), (0.8, 0.05),
            (0.16, 0.12), (0.96, 0.06),
            (0.08, 0.1), (0.92, 0.05),
            (0.05, 0.1), (0.92, 0.05), (0.08, 0.1), (0.92, 0.05),
        ],
        "hcLight": [
            (0.94, 0.1), (0.08, 0.06), (0.96, 0.08), (0.25, 0.05),
            (0.92, 0.12), (0.08, 0.06),
            (0.97, 0.1), (0.1, 0.05),
            (0.99, 0.1), (0.1, 0.05), (0.97, 0.1), (0.1, 0.05),
        ],
    }
)

DUOTONE = _with_hue_offsets(PASTEL, {"activityBar": 180, "sideBar": 180})
UNDERCURRENT = _with_hue_offsets(PASTEL, {"statusBar": 180})
ANALOGOUS = _with_hue_offsets(
    PASTEL, {"titleBar": -25, "statusBar": 25, "activityBar": -25, "sideBar": 0}
)

STATIC_STYLE_TABLES = {
    "neon": NEON,
    "vibrant": VIBRANT,
    "pastel": PASTEL,
    "muted": MUTED,
    "tinted": TINTED,
    "duotone": DUOTONE,
    "undercurrent": UNDERCURRENT,
    "analogous": ANALOGOUS,
}
