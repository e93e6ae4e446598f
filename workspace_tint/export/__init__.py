from .json_export import export_json, tint_result_to_json
from .preview import create_html_preview, create_swatch_image, save_swatch_image
from .report import format_tint_result, print_tint_result

__all__ = [
    "create_html_preview",
    "create_swatch_image",
    "export_json",
    "format_tint_result",
    "print_tint_result",
    "save_swatch_image",
    "tint_result_to_json",
]
