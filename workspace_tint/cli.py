import argparse
import logging
import os

from .color.blend import ALL_BLEND_METHODS
from .color.harmony import ALL_HARMONIES
from .color.styles import ALL_COLOR_STYLES
from .color.tint import compute_tint
from .config import TintConfig, load_config, load_theme_colors
from .errors import ConfigError
from .export import create_html_preview, export_json, print_tint_result, save_swatch_image
from .theme.color_keys import THEME_TYPES, TINT_TARGETS
from .theme.providers import (
    THEME_MODES,
    MappingThemeColorSource,
    OsAppearanceSource,
    RegistryThemeColorSource,
    collect_theme_colors,
    resolve_theme_type,
)
from .workspace import get_workspace_identifier

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="workspace-tint",
        description="Compute deterministic editor chrome colors for a workspace",
    )
    parser.add_argument(
        "identifier",
        nargs="?",
        default=None,
        help="Workspace identifier string to hash into a hue",
    )
    parser.add_argument(
        "--path",
        metavar="DIR",
        help="Workspace folder; the identifier is derived from it",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed that shifts the hue")
    parser.add_argument(
        "--base-hue",
        type=int,
        default=None,
        help="Use this integer hue (0-359) instead of hashing an identifier",
    )
    parser.add_argument("--style", choices=ALL_COLOR_STYLES, default=None)
    parser.add_argument("--harmony", choices=ALL_HARMONIES, default=None)
    parser.add_argument("--blend-method", choices=ALL_BLEND_METHODS, default=None)
    parser.add_argument(
        "--theme-type",
        choices=THEME_TYPES,
        default=None,
        help="Theme type to tint for; overrides --mode",
    )
    parser.add_argument("--mode", choices=THEME_MODES, default=None)
    parser.add_argument("--theme", metavar="NAME", help="Theme name to blend toward")
    parser.add_argument(
        "--theme-colors",
        metavar="JSON",
        help="JSON file of color key -> hex to blend toward (overrides --theme)",
    )
    parser.add_argument(
        "--blend-factor",
        type=float,
        default=None,
        help="How far to blend toward the theme (0.0-1.0)",
    )
    parser.add_argument(
        "--target",
        action="append",
        choices=TINT_TARGETS,
        help="Element to tint; repeat for several (default from settings)",
    )
    parser.add_argument("--config", metavar="JSON", help="Settings file")
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Write JSON, HTML and PNG previews to this directory",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else TintConfig()
        theme_colors_file = load_theme_colors(args.theme_colors) if args.theme_colors else None
    except ConfigError as e:
        parser.error(str(e))

    if args.identifier and args.path:
        parser.error("Cannot use both identifier and --path")

    identifier = args.identifier
    if args.path:
        identifier = get_workspace_identifier(
            args.path, config.identifier_source, config.custom_base_path
        )
    base_hue = _first(args.base_hue, config.base_hue_override)
    if base_hue is not None and not 0 <= base_hue <= 359:
        parser.error("--base-hue must be between 0 and 359")
    if identifier is None and base_hue is None:
        parser.error("An identifier, --path or --base-hue is required")

    known_theme_type = None
    theme_colors = None
    if theme_colors_file is not None:
        theme_colors = collect_theme_colors(MappingThemeColorSource(theme_colors_file))
    elif args.theme:
        source = RegistryThemeColorSource(args.theme, config.custom_themes)
        theme_colors = collect_theme_colors(source) or None
        known_theme_type = source.theme_type

    theme_type = args.theme_type or resolve_theme_type(
        args.mode or config.mode, known_theme_type, OsAppearanceSource()
    )
    style = args.style or config.color_style
    harmony = args.harmony or config.color_harmony
    blend_method = args.blend_method or config.blend_method
    targets = tuple(args.target) if args.target else config.targets

    logger.debug("Identifier %r, theme type %s", identifier, theme_type)

    result = compute_tint(
        targets=targets,
        theme_type=theme_type,
        workspace_identifier=identifier,
        base_hue=base_hue,
        color_style=style,
        color_harmony=harmony,
        theme_colors=theme_colors,
        theme_blend_factor=_first(args.blend_factor, config.blend_factor),
        target_blend_factors=config.target_blend_factors,
        seed=_first(args.seed, config.seed),
        blend_method=blend_method,
    )

    print_tint_result(result, theme_type)

    if args.output:
        _export(result, args.output, theme_type, identifier, style, harmony, blend_method, args.theme)
    return 0


def _export(result, output_dir, theme_type, identifier, style, harmony, blend_method, theme_name):
    """Write JSON, HTML and PNG outputs for a tint result."""
    os.makedirs(output_dir, exist_ok=True)

    json_path = os.path.join(output_dir, f"tint-{theme_type}.json")
    html_path = os.path.join(output_dir, f"tint_preview-{theme_type}.html")
    png_path = os.path.join(output_dir, f"tint_preview-{theme_type}.png")

    export_json(
        result,
        json_path,
        color_style=style,
        color_harmony=harmony,
        blend_method=blend_method,
        theme_type=theme_type,
        workspace_identifier=identifier,
        theme_name=theme_name,
    )
    create_html_preview(result, html_path, theme_type)
    save_swatch_image(result, png_path)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {json_path}")
    print(f"  - {html_path}")
    print(f"  - {png_path}")
    print("=" * 60)


if __name__ == "__main__":
    raise SystemExit(main())
