import json
import logging

from ..color.blend import BLEND_METHOD_LABELS
from ..color.harmony import HARMONY_LABELS
from ..color.styles import COLOR_STYLE_LABELS
from ..color.tint import tint_result_to_palette

logger = logging.getLogger(__name__)


def tint_result_to_json(
    result,
    color_style=None,
    color_harmony=None,
    blend_method=None,
    theme_type=None,
    workspace_identifier=None,
    theme_name=None,
):
    """Build the JSON document for a tint result.

    The top level is an editor `colorCustomizations` object holding the
    enabled keys. Metadata lives under `_`-prefixed keys so the document
    can be pasted into settings as-is.
    """
    data = dict(tint_result_to_palette(result))

    data["_base_hue"] = result.base_hue
    data["_base_tint"] = result.base_tint_hex
    if workspace_identifier is not None:
        data["_workspace_identifier"] = workspace_identifier
    if theme_name:
        data["_theme"] = theme_name
    if theme_type:
        data["_theme_type"] = theme_type
    if color_style:
        data["_color_style"] = COLOR_STYLE_LABELS.get(color_style, color_style)
    if color_harmony:
        data["_color_harmony"] = HARMONY_LABELS.get(color_harmony, color_harmony)
    if blend_method:
        data["_blend_method"] = BLEND_METHOD_LABELS.get(blend_method, blend_method)

    data["_keys"] = {
        detail.key: {
            "element": detail.element,
            "type": detail.color_type,
            "enabled": detail.enabled,
            "tint": detail.tint_hex,
            "theme": detail.theme_color,
            "blend_factor": round(detail.blend_factor, 4),
            "final": detail.final_hex,
        }
        for detail in result.keys
    }
    return data


def export_json(result, filepath, **metadata):
    """Write a tint result as JSON.

    Args:
        result: The TintResult to export
        filepath: Output file path
        **metadata: Passed through to tint_result_to_json
    """
    data = tint_result_to_json(result, **metadata)
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
    logger.debug("Wrote %s", filepath)
