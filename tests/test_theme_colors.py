"""
Unit tests for theme color lookup and the theme registry.
"""
import logging

from workspace_tint.theme.color_keys import element_groups, is_foreground_key
from workspace_tint.theme.colors import (
    ThemeInfo,
    decode_theme_entry,
    get_builtin_theme,
    get_color_for_key,
    get_theme_info,
    parse_custom_themes,
    resolve_theme_color,
)


class TestColorKeys:
    """Test managed key metadata."""

    def test_element_groups(self):
        groups = element_groups()
        assert list(groups) == ["titleBar", "statusBar", "activityBar", "sideBar"]
        assert groups["sideBar"] == (
            "sideBar.background",
            "sideBar.foreground",
            "sideBarSectionHeader.background",
            "sideBarSectionHeader.foreground",
        )

    def test_foreground_keys(self):
        assert is_foreground_key("statusBar.foreground")
        assert is_foreground_key("editor.foreground")
        assert not is_foreground_key("statusBar.background")


class TestGetColorForKey:
    """Test the direct -> element -> editor fallback chain."""

    def test_direct_key(self):
        colors = {"editor.background": "#111111", "statusBar.background": "#222222"}
        assert get_color_for_key("statusBar.background", colors) == "#222222"

    def test_element_fallback(self):
        colors = {
            "editor.background": "#111111",
            "titleBar.activeBackground": "#333333",
            "sideBar.foreground": "#444444",
        }
        assert get_color_for_key("titleBar.inactiveBackground", colors) == "#333333"
        assert get_color_for_key("sideBarSectionHeader.foreground", colors) == "#444444"

    def test_editor_fallback(self):
        colors = {"editor.background": "#111111", "editor.foreground": "#eeeeee"}
        assert get_color_for_key("activityBar.background", colors) == "#111111"
        assert get_color_for_key("activityBar.foreground", colors) == "#eeeeee"

    def test_missing_foreground(self):
        assert get_color_for_key("statusBar.foreground", {"editor.background": "#111111"}) is None

    def test_no_colors(self):
        assert get_color_for_key("statusBar.background", None) is None
        assert get_color_for_key("statusBar.background", {}) is None

    def test_resolve_drops_invalid_hex(self):
        colors = {"editor.background": "#111111", "statusBar.background": "blue"}
        assert resolve_theme_color("statusBar.background", colors) is None
        assert resolve_theme_color("activityBar.background", colors) == "#111111"


class TestRegistry:
    """Test custom and built-in theme lookup."""

    def test_builtin_theme(self):
        info = get_theme_info("Default Dark+")
        assert info.type == "dark"
        assert info.colors["statusBar.background"] == "#007acc"
        assert info.colors["activityBar.background"] == "#333333"

    def test_builtin_theme_is_cached(self):
        assert get_builtin_theme("Nord") is get_builtin_theme("Nord")

    def test_unknown_theme(self):
        assert get_theme_info("No Such Theme") is None

    def test_decode_expands_short_hex(self):
        info = decode_theme_entry((["ABC", None, "123456"], 3))
        assert info == ThemeInfo(
            {"editor.background": "#aabbcc", "titleBar.activeBackground": "#123456"}, "hcLight"
        )

    def test_custom_theme_takes_precedence(self):
        custom = parse_custom_themes(
            {"Default Dark+": {"type": "light", "colors": {"editor.background": "#FAFAFA"}}}
        )
        info = get_theme_info("Default Dark+", custom)
        assert info == ThemeInfo({"editor.background": "#fafafa"}, "light")

    def test_invalid_custom_entries_are_skipped(self, caplog):
        raw = {
            "Good": {"type": "hcDark", "colors": {"editor.background": "000000", "editor.foreground": "#FFFFFF"}},
            "Bad type": {"type": "sepia", "colors": {"editor.background": "#000000"}},
            "No background": {"type": "dark", "colors": {"statusBar.background": "#000000"}},
            "Bad optional": {"type": "dark", "colors": {"editor.background": "#000000", "statusBar.background": "red"}},
        }
        with caplog.at_level(logging.WARNING):
            themes = parse_custom_themes(raw)
        assert list(themes) == ["Good"]
        assert themes["Good"].colors == {"editor.background": "#000000", "editor.foreground": "#ffffff"}
        assert "Bad type" in caplog.text

    def test_custom_themes_must_be_a_dict(self):
        assert parse_custom_themes(["not", "a", "dict"]) == {}
