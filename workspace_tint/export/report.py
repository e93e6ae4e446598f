from ..theme.color_keys import element_groups


def format_tint_result(result, theme_type=None):
    """Human-readable summary of a tint result, one line per key."""
    lines = ["=" * 60]
    title = "WORKSPACE TINT"
    if theme_type:
        title += f" ({theme_type.upper()} THEME)"
    lines.append(title)
    lines.append("=" * 60)
    lines.append(f"Base hue:  {result.base_hue}")
    lines.append(f"Base tint: {result.base_tint_hex}")

    details = {detail.key: detail for detail in result.keys}
    for element, keys in element_groups().items():
        enabled = details[keys[0]].enabled
        lines.append("")
        lines.append(f"{element}:" + ("" if enabled else "  (disabled)"))
        for key in keys:
            d = details[key]
            theme = d.theme_color or "-"
            lines.append(
                f"  {key:34} {d.final_hex}  (tint {d.tint_hex}, theme {theme:7}, blend {d.blend_factor:.2f})"
            )
    return "\n".join(lines)


def print_tint_result(result, theme_type=None):
    print("\n" + format_tint_result(result, theme_type))
