"""
Color harmonies: per-element hue offsets applied to the base hue.

Offsets are in degrees and keyed by element. The editor offset is always 0;
it is listed so every element has an entry.
"""

HARMONY_DEFINITIONS = {
    "uniform": {
        "label": "Uniform",
        "description": "Same hue for every element",
        "order": 0,
    },
    "accent": {
        "label": "Accent",
        "description": "Activity bar shifted 60 degrees as an accent",
        "order": 1,
    },
    "gradient": {
        "label": "Gradient",
        "description": "Small hue steps fanning out across elements",
        "order": 2,
    },
    "analogous": {
        "label": "Analogous",
        "description": "Neighbouring hues 25 degrees either side",
        "order": 3,
    },
    "undercurrent": {
        "label": "Undercurrent",
        "description": "Status bar in the complementary hue",
        "order": 4,
    },
    "duotone": {
        "label": "Duotone",
        "description": "Activity and side bars in the complementary hue",
        "order": 5,
    },
    "split-complementary": {
        "label": "Split Complementary",
        "description": "Title and status bars 150 degrees either side",
        "order": 6,
    },
    "triadic": {
        "label": "Triadic",
        "description": "Three hues evenly spaced around the wheel",
        "order": 7,
    },
    "tetradic": {
        "label": "Tetradic",
        "description": "Four hues evenly spaced around the wheel",
        "order": 8,
    },
}

DEFAULT_HARMONY = "uniform"

ALL_HARMONIES = tuple(
    sorted(HARMONY_DEFINITIONS, key=lambda h: HARMONY_DEFINITIONS[h]["order"])
)

HARMONY_LABELS = {h: HARMONY_DEFINITIONS[h]["label"] for h in ALL_HARMONIES}

HARMONY_CONFIGS = {
    "uniform": {"editor": 0, "titleBar": 0, "statusBar": 0, "activityBar": 0, "sideBar": 0},
    "accent": {"editor": 0, "titleBar": 0, "statusBar": 0, "activityBar": 60, "sideBar": 0},
    "gradient": {"editor": 0, "titleBar": -30, "statusBar": 30, "activityBar": -15, "sideBar": 15},
    "analogous": {"editor": 0, "titleBar": -25, "statusBar": 25, "activityBar": 0, "sideBar": 0},
    "undercurrent": {"editor": 0, "titleBar": 0, "statusBar": 180, "activityBar": 0, "sideBar": 0},
    "duotone": {"editor": 0, "titleBar": 0, "statusBar": 0, "activityBar": 180, "sideBar": 180},
    "split-complementary": {
        "editor": 0, "titleBar": -150, "statusBar": 150, "activityBar": 0, "sideBar": 0,
    },
    "triadic": {"editor": 0, "titleBar": -120, "statusBar": 120, "activityBar": 0, "sideBar": 0},
    "tetradic": {"editor": 0, "titleBar": 90, "statusBar": 180, "activityBar": 270, "sideBar": 0},
}


def is_valid_harmony(value):
    return value in HARMONY_DEFINITIONS


def validate_harmony(value):
    """Return value if it names a harmony, else the default."""
    return value if is_valid_harmony(value) else DEFAULT_HARMONY


def harmony_hue_offset(harmony, element):
    """Hue offset in degrees for an element under a harmony.

    Unknown harmonies behave like the default; unknown elements get 0.
    """
    config = HARMONY_CONFIGS.get(harmony, HARMONY_CONFIGS[DEFAULT_HARMONY])
    return config.get(element, 0)
