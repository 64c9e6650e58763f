import argparse
import sys
from dataclasses import replace
from pathlib import Path

from PIL import Image

from .compositor import Compositor
from .config import (
    CAPTURE_MODES,
    BorderConfig,
    BorderStyle,
    load_config,
    parse_color,
    save_config,
)
from .plugin import BordersPlugin


def _apply_overrides(config: BorderConfig, args: argparse.Namespace) -> BorderConfig:
    """Return *config* with any command-line overrides applied."""
    overrides = {}
    if args.style is not None:
        overrides["style"] = BorderStyle.parse(args.style)
    if args.size is not None:
        overrides["size"] = args.size
    if args.color is not None:
        overrides["color"] = parse_color(args.color)
    if args.radius is not None:
        overrides["corner_radius"] = args.radius
    if args.padding is not None:
        overrides["padding"] = args.padding
    return replace(config, **overrides) if overrides else config


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def main() -> None:
    """CLI entry point: load config, frame the input image, and write the result."""
    styles = [s.value for s in BorderStyle]
    parser = argparse.ArgumentParser(
        prog="capborders",
        description="Add a border, drop shadow and rounded corners to an image",
    )
    parser.add_argument("image", type=Path, help="Path to the input image")
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to borders.yaml (optional)"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output image path (default: <image>_bordered.png)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=str.lower,
        choices=CAPTURE_MODES,
        default=None,
        help="Capture mode to check against the config's only_modes filter",
    )
    parser.add_argument(
        "-s",
        "--style",
        type=str.lower,
        choices=styles,
        default=None,
        help=f"Border style (choices: {', '.join(styles)})",
    )
    parser.add_argument("--size", type=_non_negative, default=None, help="Border thickness in pixels")
    parser.add_argument(
        "--color", type=str, default=None, help="Border colour as #RRGGBB or #RRGGBBAA"
    )
    parser.add_argument("--radius", type=_non_negative, default=None, help="Corner radius in pixels")
    parser.add_argument("--padding", type=_non_negative, default=None, help="Padding in pixels")
    parser.add_argument(
        "--write-config",
        type=Path,
        default=None,
        help="Also save the effective config to this YAML file",
    )

    args = parser.parse_args()

    if not args.image.exists():
        print(f"Error: '{args.image}' not found.", file=sys.stderr)
        sys.exit(1)

    try:
        config = _apply_overrides(load_config(args.config), args)
    except Exception as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    output_path = args.output or args.image.with_name(f"{args.image.stem}_bordered.png")

    try:
        with Image.open(args.image) as img:
            source = img.convert("RGBA")
    except OSError as exc:
        print(f"Error: cannot read '{args.image}': {exc}", file=sys.stderr)
        sys.exit(1)

    plugin = BordersPlugin.with_config(config)
    if args.mode is not None and not plugin.should_process(args.mode):
        print(f"Skipping: border disabled for mode '{args.mode}'; copying image unchanged.")
        result = source
    elif not config.enabled:
        print("Skipping: border disabled in config; copying image unchanged.")
        result = source
    else:
        result = Compositor(config).compose(source)

    try:
        result.save(output_path)
    except (OSError, ValueError) as exc:
        print(f"Error: cannot write '{output_path}': {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Written → {output_path} ({result.width}x{result.height})")

    if args.write_config is not None:
        save_config(config, args.write_config)
        print(f"Config written → {args.write_config}")


if __name__ == "__main__":
    main()
