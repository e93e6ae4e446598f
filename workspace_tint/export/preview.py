import logging

from PIL import Image, ImageDraw

from ..color.convert import hex_to_oklch, hex_to_rgb
from ..theme.color_keys import element_groups

logger = logging.getLogger(__name__)

SWATCH_WIDTH = 120
SWATCH_HEIGHT = 36
LABEL_WIDTH = 260
PADDING = 8


def _text_color(hex_color):
    """Black or white, whichever reads better on hex_color."""
    return "#ffffff" if hex_to_oklch(hex_color).l < 0.6 else "#000000"


def create_html_preview(result, output_path, theme_type="dark"):
    """Write an HTML page showing the tint, theme and final color of every key."""
    html = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Workspace Tint Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: system-ui, sans-serif; background: {page_bg}; color: {page_fg}; padding: 24px; }
        h1 { font-size: 20px; margin-bottom: 4px; }
        .meta { opacity: 0.7; margin-bottom: 24px; font-family: monospace; }
        .base { display: inline-block; width: 48px; height: 48px; border-radius: 8px; background: {base_tint}; vertical-align: middle; margin-right: 12px; }
        h2 { font-size: 15px; margin: 20px 0 8px; }
        h2.disabled { opacity: 0.4; }
        .row { display: grid; grid-template-columns: 280px repeat(3, 130px); gap: 8px; align-items: center; margin-bottom: 6px; }
        .key { font-family: monospace; font-size: 13px; }
        .swatch { height: 36px; border-radius: 6px; display: flex; align-items: center; justify-content: center; font-family: monospace; font-size: 12px; }
        .empty { border: 1px dashed currentColor; opacity: 0.3; }
        .header { font-size: 11px; text-transform: uppercase; opacity: 0.6; }
    </style>
</head>
<body>
    <h1><span class="base"></span>Workspace Tint</h1>
    <div class="meta">base hue {base_hue} &middot; base tint {base_tint} &middot; {theme_type}</div>
    <div class="row header"><div></div><div>tint</div><div>theme</div><div>final</div></div>
    {element_sections}
</body>
</html>"""

    def make_swatch(hex_color):
        if not hex_color:
            return '<div class="swatch empty">-</div>'
        return (
            f'<div class="swatch" style="background: {hex_color}; '
            f'color: {_text_color(hex_color)}">{hex_color}</div>'
        )

    def make_row(detail):
        return f"""<div class="row">
        <div class="key">{detail.key}</div>
        {make_swatch(detail.tint_hex)}
        {make_swatch(detail.theme_color)}
        {make_swatch(detail.final_hex)}
    </div>"""

    details = {detail.key: detail for detail in result.keys}
    sections = []
    for element, keys in element_groups().items():
        css_class = "" if details[keys[0]].enabled else ' class="disabled"'
        rows = "\n".join(make_row(details[key]) for key in keys)
        sections.append(f"<h2{css_class}>{element}</h2>\n{rows}")

    is_light = theme_type in ("light", "hcLight")
    replacements = {
        "{page_bg}": "#f5f5f5" if is_light else "#1e1e1e",
        "{page_fg}": "#1e1e1e" if is_light else "#e0e0e0",
        "{base_tint}": result.base_tint_hex,
        "{base_hue}": str(result.base_hue),
        "{theme_type}": theme_type,
    }
    for old, new in replacements.items():
        html = html.replace(old, new)
    html = html.replace("{element_sections}", "\n".join(sections))

    with open(output_path, "w") as f:
        f.write(html)
    logger.debug("Wrote %s", output_path)


def create_swatch_image(result):
    """Render a tint result as a Pillow image.

    One row per key with tint, theme and final swatches. Missing theme
    colors are drawn as an outline only.
    """
    rows = len(result.keys) + 1
    width = LABEL_WIDTH + 3 * (SWATCH_WIDTH + PADDING) + PADDING
    height = rows * (SWATCH_HEIGHT + PADDING) + PADDING
    img = Image.new("RGB", (width, height), hex_to_rgb(result.base_tint_hex))
    draw = ImageDraw.Draw(img)

    header_color = _text_color(result.base_tint_hex)
    draw.text((PADDING, PADDING + 10), f"base hue {result.base_hue}", fill=header_color)
    for col, title in enumerate(("tint", "theme", "final")):
        x = LABEL_WIDTH + col * (SWATCH_WIDTH + PADDING)
        draw.text((x, PADDING + 10), title, fill=header_color)

    for row, detail in enumerate(result.keys, start=1):
        y = PADDING + row * (SWATCH_HEIGHT + PADDING)
        draw.text((PADDING, y + 10), detail.key, fill=header_color)
        for col, hex_color in enumerate((detail.tint_hex, detail.theme_color, detail.final_hex)):
            x = LABEL_WIDTH + col * (SWATCH_WIDTH + PADDING)
            box = [x, y, x + SWATCH_WIDTH, y + SWATCH_HEIGHT]
            if hex_color:
                draw.rectangle(box, fill=hex_to_rgb(hex_color))
                draw.text((x + 6, y + 10), hex_color, fill=_text_color(hex_color))
            else:
                draw.rectangle(box, outline=header_color)
    return img


def save_swatch_image(result, output_path):
    create_swatch_image(result).save(output_path)
    logger.debug("Wrote %s", output_path)
