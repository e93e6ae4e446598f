"""Derive the workspace identifier string that gets hashed into a hue."""

import os

IDENTIFIER_SOURCES = ("name", "pathRelativeToHome", "pathAbsolute", "pathRelativeToCustom")
DEFAULT_IDENTIFIER_SOURCE = "pathRelativeToHome"


def normalize_path(path):
    """Use forward slashes so the same folder hashes alike on every platform."""
    return path.replace("\\", "/")


def expand_tilde(path, home=None):
    """Expand a leading ~ or $HOME to the home directory.

    Only the current user's home is expanded; "~other/x" is left as is.
    """
    home = home or os.path.expanduser("~")
    for prefix in ("~", "$HOME"):
        rest = path[len(prefix):]
        if path.startswith(prefix) and (not rest or rest[0] in "/\\"):
            return os.path.join(home, rest.lstrip("/\\"))
    return path


def get_relative_path(base_path, target_path):
    """Path of target relative to base, or None if target is outside base."""
    base = normalize_path(os.path.abspath(base_path)).rstrip("/")
    target = normalize_path(os.path.abspath(target_path))
    if target == base:
        return "."
    if not target.startswith(base + "/"):
        return None
    return target[len(base) + 1 :]


def get_workspace_identifier(folder_path, source=DEFAULT_IDENTIFIER_SOURCE, custom_base_path="", home=None):
    """Build the identifier for a workspace folder.

    Args:
        folder_path: Path to the workspace folder
        source: One of IDENTIFIER_SOURCES; unknown values use the folder name
        custom_base_path: Base for "pathRelativeToCustom"; ~ is expanded
        home: Home directory override, defaults to the user's home

    Paths outside their base fall back to the normalized absolute path.
    """
    home = home or os.path.expanduser("~")
    absolute = normalize_path(os.path.abspath(folder_path))

    if source == "pathAbsolute":
        return absolute
    if source == "pathRelativeToHome":
        relative = get_relative_path(home, folder_path)
        return relative if relative is not None else absolute
    if source == "pathRelativeToCustom":
        if not custom_base_path:
            return absolute
        relative = get_relative_path(expand_tilde(custom_base_path, home), folder_path)
        return relative if relative is not None else absolute
    return os.path.basename(os.path.normpath(folder_path))
