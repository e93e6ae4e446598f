"""
Sources of theme colors and OS appearance.

The tint engine never talks to an editor or the OS directly. It is fed
through two narrow interfaces:
- ThemeColorSource: an optional hex per color key
- AppearanceSource: an optional "dark" or "light"
"""

import logging
import platform
import re
import subprocess
from typing import Optional, Protocol, runtime_checkable

from ..color.convert import is_valid_hex
from .color_keys import THEME_COLOR_KEYS, validate_theme_type
from .colors import get_theme_info

logger = logging.getLogger(__name__)

DETECTION_TIMEOUT = 2

MACOS_COMMAND = ["defaults", "read", "-g", "AppleInterfaceStyle"]
WINDOWS_COMMAND = [
    "reg",
    "query",
    r"HKCU\Software\Microsoft\Windows\CurrentVersion\Themes\Personalize",
    "/v",
    "AppsUseLightTheme",
]
LINUX_COMMAND = ["gsettings", "get", "org.gnome.desktop.interface", "color-scheme"]

_REG_DWORD_PATTERN = re.compile(r"REG_DWORD\s+(0x[0-9a-fA-F]+)", re.IGNORECASE)

THEME_MODES = ("auto", "dark", "light")
DEFAULT_THEME_MODE = "auto"


@runtime_checkable
class ThemeColorSource(Protocol):
    """Anything that can report the active theme's color for a key."""

    def get_color(self, key: str) -> Optional[str]:
        ...


@runtime_checkable
class AppearanceSource(Protocol):
    """Anything that can report whether the desktop is in dark or light mode."""

    def detect(self) -> Optional[str]:
        ...


class MappingThemeColorSource:
    """ThemeColorSource backed by a plain dict of key -> hex."""

    def __init__(self, colors):
        self.colors = dict(colors or {})

    def get_color(self, key):
        value = self.colors.get(key)
        return value if is_valid_hex(value) else None


class RegistryThemeColorSource:
    """ThemeColorSource backed by a named theme in the registry."""

    def __init__(self, theme_name, custom_themes=None):
        self.theme_name = theme_name
        self.theme_info = get_theme_info(theme_name, custom_themes)
        if self.theme_info is None:
            logger.warning("Unknown theme %r; no theme colors available", theme_name)

    @property
    def theme_type(self):
        return self.theme_info.type if self.theme_info else None

    def get_color(self, key):
        if self.theme_info is None:
            return None
        return self.theme_info.colors.get(key)


def collect_theme_colors(source):
    """Gather every known theme key from a source into a dict."""
    colors = {}
    for key in THEME_COLOR_KEYS:
        value = source.get_color(key)
        if value:
            colors[key] = value
    return colors


# =============================================================================
# OS appearance
# =============================================================================


def parse_windows_reg_output(output):
    """Read AppsUseLightTheme out of `reg query` output.

    The value is a REG_DWORD where 0 means dark and anything else light.
    Returns None when the value is not present.
    """
    match = _REG_DWORD_PATTERN.search(output)
    if not match:
        return None
    return "dark" if int(match.group(1), 16) == 0 else "light"


def _run(command):
    result = subprocess.run(
        command,
        capture_output=True,
        text=True,
        timeout=DETECTION_TIMEOUT,
        check=True,
    )
    return result.stdout


class OsAppearanceSource:
    """AppearanceSource that shells out to the platform's settings tool."""

    def __init__(self, system=None):
        self.system = system or platform.system()

    def detect(self):
        detector = {
            "Darwin": self._detect_macos,
            "Windows": self._detect_windows,
            "Linux": self._detect_linux,
        }.get(self.system)
        if detector is None:
            logger.debug("No appearance detection for platform %r", self.system)
            return None
        return detector()

    def _detect_macos(self):
        try:
            output = _run(MACOS_COMMAND)
        except (OSError, subprocess.SubprocessError):
            # The key does not exist while light mode is active
            return "light"
        return "dark" if output.strip().lower() == "dark" else "light"

    def _detect_windows(self):
        try:
            output = _run(WINDOWS_COMMAND)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Windows appearance detection failed: %s", e)
            return None
        return parse_windows_reg_output(output)

    def _detect_linux(self):
        try:
            output = _run(LINUX_COMMAND)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Linux appearance detection failed: %s", e)
            return None
        return "dark" if "dark" in output.lower() else "light"


def resolve_theme_type(mode, theme_type=None, appearance_source=None):
    """Decide which theme type to tint for.

    An explicit "dark" or "light" mode wins. In "auto" mode the known
    theme type is used, then the OS appearance, then "dark".
    """
    if mode in ("dark", "light"):
        return mode
    if theme_type is not None:
        return validate_theme_type(theme_type)
    if appearance_source is not None:
        detected = appearance_source.detect()
        if detected is not None:
            logger.debug("Detected OS appearance: %s", detected)
            return detected
    return "dark"
