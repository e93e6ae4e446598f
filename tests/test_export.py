"""
Unit tests for JSON, HTML, PNG and text output.
"""
import json

from PIL import Image

from workspace_tint.color.convert import hex_to_rgb
from workspace_tint.export import (
    create_html_preview,
    create_swatch_image,
    export_json,
    format_tint_result,
    save_swatch_image,
    tint_result_to_json,
)
from workspace_tint.theme.color_keys import MANAGED_COLOR_KEYS


class TestJsonExport:
    """Test the colorCustomizations JSON document."""

    def test_document_shape(self, sample_result):
        data = tint_result_to_json(
            sample_result, color_style="pastel", blend_method="hueShift", theme_type="dark"
        )
        assert data["_base_hue"] == sample_result.base_hue
        assert data["_base_tint"] == sample_result.base_tint_hex
        assert data["_color_style"] == "Pastel"
        assert data["_blend_method"] == "Hue Shift"
        assert "_color_harmony" not in data
        assert list(data["_keys"]) == list(MANAGED_COLOR_KEYS)
        assert "sideBar.background" not in data
        assert data["statusBar.background"] == data["_keys"]["statusBar.background"]["final"]

    def test_export_writes_file(self, sample_result, tmp_path):
        path = tmp_path / "tint.json"
        export_json(sample_result, str(path), workspace_identifier="my-project")
        data = json.loads(path.read_text())
        assert data["_workspace_identifier"] == "my-project"
        assert data["_keys"]["sideBar.background"]["enabled"] is False


class TestPreviews:
    """Test HTML and PNG previews."""

    def test_html_preview(self, sample_result, tmp_path):
        path = tmp_path / "preview.html"
        create_html_preview(sample_result, str(path), "dark")
        html = path.read_text()
        assert sample_result.base_tint_hex in html
        for key in MANAGED_COLOR_KEYS:
            assert key in html
        assert "{element_sections}" not in html
        assert "{base_tint}" not in html

    def test_swatch_image(self, sample_result):
        img = create_swatch_image(sample_result)
        assert img.mode == "RGB"
        assert img.size[1] > len(sample_result.keys) * 30
        assert img.getpixel((0, 0)) == hex_to_rgb(sample_result.base_tint_hex)

    def test_save_swatch_image(self, sample_result, tmp_path):
        path = tmp_path / "preview.png"
        save_swatch_image(sample_result, str(path))
        with Image.open(path) as img:
            assert img.format == "PNG"


class TestReport:
    """Test the printed text report."""

    def test_format(self, sample_result):
        text = format_tint_result(sample_result, "dark")
        assert "DARK THEME" in text
        assert f"Base hue:  {sample_result.base_hue}" in text
        assert "sideBar:  (disabled)" in text
        assert "statusBar:\n" in text
