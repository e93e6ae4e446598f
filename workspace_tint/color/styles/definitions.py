"""Color style definitions: labels, descriptions and display order."""

COLOR_STYLE_DEFINITIONS = {
    "neon": {
        "label": "Neon",
        "description": "Maximum chroma with elevated lightness for vivid glow",
        "order": 0,
    },
    "vibrant": {
        "label": "Vibrant",
        "description": "Higher saturation for bolder, more noticeable colors",
        "order": 1,
    },
    "pastel": {
        "label": "Pastel",
        "description": "Soft, muted tones that blend gently with any theme",
        "order": 2,
    },
    "muted": {
        "label": "Muted",
        "description": "Desaturated, subtle tones for minimal visual impact",
        "order": 3,
    },
    "tinted": {
        "label": "Tinted",
        "description": "Very subtle color hints while retaining hue variation",
        "order": 4,
    },
    "duotone": {
        "label": "Duotone",
        "description": "Pastel tones with activity and side bars in the complementary hue",
        "order": 5,
    },
    "undercurrent": {
        "label": "Undercurrent",
        "description": "Pastel tones with a complementary status bar",
        "order": 6,
    },
    "analogous": {
        "label": "Analogous",
        "description": "Pastel tones spread across neighbouring hues",
        "order": 7,
    },
    "adaptive": {
        "label": "Adaptive",
        "description": "Preserves the theme's lightness and chroma, shifts only the hue",
        "order": 8,
    },
}

DEFAULT_COLOR_STYLE = "pastel"

ALL_COLOR_STYLES = tuple(
    sorted(COLOR_STYLE_DEFINITIONS, key=lambda s: COLOR_STYLE_DEFINITIONS[s]["order"])
)

COLOR_STYLE_LABELS = {s: COLOR_STYLE_DEFINITIONS[s]["label"] for s in ALL_COLOR_STYLES}


def is_valid_color_style(value):
    return value in COLOR_STYLE_DEFINITIONS


def validate_color_style(value):
    """Return value if it names a color style, else the default."""
    return value if is_valid_color_style(value) else DEFAULT_COLOR_STYLE
