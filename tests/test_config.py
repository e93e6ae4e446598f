"""
Unit tests for settings loading and validation.
"""
import json

import pytest

from workspace_tint.config import (
    DEFAULT_TARGETS,
    TintConfig,
    build_target_blend_factors,
    build_targets,
    config_from_dict,
    load_config,
    load_theme_colors,
    validate_base_hue_override,
    validate_blend_factor,
    validate_seed,
)
from workspace_tint.errors import ConfigError


@pytest.fixture
def write_json(tmp_path):
    """Write an object as JSON to a temporary file and return its path."""

    def _write(data, name="settings.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write


class TestValidators:
    """Test the individual value validators."""

    def test_seed(self):
        assert validate_seed(7) == 7
        assert validate_seed(-3) == -3
        assert validate_seed(1.5) == 0
        assert validate_seed("7") == 0
        assert validate_seed(True) == 0

    def test_base_hue_override(self):
        assert validate_base_hue_override(0) == 0
        assert validate_base_hue_override(359) == 359
        assert validate_base_hue_override(360) is None
        assert validate_base_hue_override(-1) is None
        assert validate_base_hue_override(12.5) is None
        assert validate_base_hue_override(None) is None

    def test_blend_factor(self):
        assert validate_blend_factor(-0.5) == 0.0
        assert validate_blend_factor(1.5) == 1.0
        assert validate_blend_factor(0.6) == 0.6
        assert validate_blend_factor("high") == 0.35

    def test_targets_are_ordered(self):
        assert build_targets(["sideBar", "titleBar", "bogus"]) == ("titleBar", "sideBar")
        assert build_targets({"statusBar": True, "activityBar": False, "sideBar": True}) == (
            "statusBar",
            "sideBar",
        )
        assert build_targets([]) == ()
        assert build_targets("titleBar") == DEFAULT_TARGETS

    def test_target_blend_factors(self):
        raw = {"statusBar": -1, "titleBar": "x", "sideBar": 0.5, "editor": 0.2}
        assert build_target_blend_factors(raw) == {"statusBar": 0.0, "sideBar": 0.5}
        assert build_target_blend_factors(None) == {}


class TestConfigFromDict:
    """Test building a full TintConfig."""

    def test_defaults(self):
        config = config_from_dict({})
        assert config.targets == DEFAULT_TARGETS
        assert config.mode == "auto"
        assert config.seed == 0
        assert config.base_hue_override is None
        assert config.color_style == "pastel"
        assert config.color_harmony == "uniform"
        assert config.blend_method == "hueShift"
        assert config.blend_factor == 0.35
        assert config.identifier_source == "pathRelativeToHome"
        assert config.custom_base_path == ""

    def test_namedtuple_defaults_match(self):
        config = TintConfig()
        assert config.targets == DEFAULT_TARGETS
        assert config.blend_factor == 0.35
        assert config.target_blend_factors is None

    def test_invalid_enums_fall_back(self):
        config = config_from_dict(
            {
                "mode": "dusk",
                "colorStyle": "glitter",
                "colorHarmony": "chaos",
                "blendMethod": "multiply",
                "workspaceIdentifier": {"source": "hostname"},
            }
        )
        assert config.mode == "auto"
        assert config.color_style == "pastel"
        assert config.color_harmony == "uniform"
        assert config.blend_method == "hueShift"
        assert config.identifier_source == "pathRelativeToHome"

    def test_full_settings(self, write_json):
        path = write_json(
            {
                "targets": ["titleBar", "sideBar"],
                "mode": "light",
                "seed": 3,
                "baseHueOverride": 42,
                "colorStyle": "neon",
                "colorHarmony": "triadic",
                "blendMethod": "overlay",
                "blendFactor": 0.5,
                "targetBlendFactors": {"sideBar": 0.1},
                "theme.colors": {"Mine": {"type": "dark", "colors": {"editor.background": "#101010"}}},
                "workspaceIdentifier": {"source": "pathRelativeToCustom", "customBasePath": "~/code"},
            }
        )
        config = load_config(path)
        assert config.targets == ("titleBar", "sideBar")
        assert config.mode == "light"
        assert config.seed == 3
        assert config.base_hue_override == 42
        assert config.color_style == "neon"
        assert config.color_harmony == "triadic"
        assert config.blend_method == "overlay"
        assert config.blend_factor == 0.5
        assert config.target_blend_factors == {"sideBar": 0.1}
        assert config.custom_themes["Mine"].colors == {"editor.background": "#101010"}
        assert config.identifier_source == "pathRelativeToCustom"
        assert config.custom_base_path == "~/code"


class TestLoadErrors:
    """Test that unusable files raise ConfigError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_not_an_object(self, write_json):
        with pytest.raises(ConfigError):
            load_config(write_json([1, 2, 3]))


class TestLoadThemeColors:
    """Test loading theme colors from a file."""

    def test_bare_colors(self, write_json):
        path = write_json({"editor.background": "#101010"}, "colors.json")
        assert load_theme_colors(path) == {"editor.background": "#101010"}

    def test_theme_entry_is_unwrapped(self, write_json):
        path = write_json({"type": "dark", "colors": {"editor.background": "#101010"}}, "theme.json")
        assert load_theme_colors(path) == {"editor.background": "#101010"}

    def test_not_an_object(self, write_json):
        with pytest.raises(ConfigError):
            load_theme_colors(write_json("#101010", "colors.json"))
