"""
Built-in theme colors in compact form.

Each entry is (colors, type_index). colors is a sparse list of hex strings
without the leading #, 3 or 6 digits, in COMPACT_COLOR_KEY_ORDER; None
marks a key the theme leaves unset. type_index indexes THEME_TYPES.
"""

COMPACT_COLOR_KEY_ORDER = (
    "editor.background",
    "editor.foreground",
    "titleBar.activeBackground",
    "titleBar.activeForeground",
    "titleBar.inactiveBackground",
    "titleBar.inactiveForeground",
    "statusBar.background",
    "statusBar.foreground",
    "activityBar.background",
    "activityBar.foreground",
)

BUILTIN_THEME_DATA = {
    "Default Dark Modern": (
        ["1F1F1F", "CCC", "181818", "CCC", "1F1F1F", "9D9D9D", "181818", "CCC", "181818", "D7D7D7"],
        0,
    ),
    "Default Dark+": (
        ["1E1E1E", "D4D4D4", "3C3C3C", "CCC", "3C3C3C", None, "007ACC", "FFF", "333", "FFF"],
        0,
    ),
    "Visual Studio Dark": (
        ["1E1E1E", "D4D4D4", "3C3C3C", "CCC", "3C3C3C", None, "007ACC", "FFF", "333", "FFF"],
        0,
    ),
    "Default Light Modern": (
        ["FFF", "3B3B3B", "F8F8F8", "1E1E1E", "F8F8F8", "8B949E", "F8F8F8", "3B3B3B", "F8F8F8", "1F1F1F"],
        1,
    ),
    "Default Light+": (
        ["FFF", "000", "DDD", "333", "DDD", None, "007ACC", "FFF", "2C2C2C", "FFF"],
        1,
    ),
    "Default High Contrast": (
        ["000", "FFF", "000", "FFF", "000", "FFF", "000", "FFF", "000", "FFF"],
        2,
    ),
    "Default High Contrast Light": (
        ["FFF", "292929", "FFF", "292929", "FFF", "292929", "FFF", "292929", "FFF", "292929"],
        3,
    ),
    "Atom One Dark": (
        ["282C34", "ABB2BF", "21252B", "9DA5B4", "21252B", "9DA5B4", "21252B", "9DA5B4", "333842", "D7DAE0"],
        0,
    ),
    "Nord": (
        ["2E3440", "D8DEE9", "2E3440", "D8DEE9", "2E3440", "D8DEE9", "3B4252", "D8DEE9", "2E3440", "D8DEE9"],
        0,
    ),
    "Monokai": (
        ["272822", "F8F8F2", "1E1F1C", None, None, None, "414339", None, "272822", None],
        0,
    ),
    "Solarized Light": (
        ["FDF6E3", "657B83", "EEE8D5", "586E75", None, None, "EEE8D5", "586E75", "DDD6C1", "584C27"],
        1,
    ),
}
