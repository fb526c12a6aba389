"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

import gallery_layout.api as gl_api
import gallery_layout.config as gl_config
from gallery_layout.layout.search import resolve_search_window
from gallery_layout.logging_utils import logger, set_verbosity
from gallery_layout.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="gallery-layout",
        description=(
            "Compute justified-row or masonry-column positions for a list "
            "of image sizes and print them as JSON."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gallery-layout --images photos.json --width 1200\n"
            "  gallery-layout --images photos.json --width 1200 "
            "--direction column --columns 3\n"
            "  gallery-layout --config gallery.toml --validate-config-only"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    inputs = p.add_argument_group("input")
    inputs.add_argument(
        "--images", type=str,
        help="JSON file with an array of {width, height, ...} objects")
    inputs.add_argument(
        "--width", type=float,
        help="Container width in pixels")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--direction", choices=list(gl_api.DIRECTION_CHOICES),
        help="Justified rows or masonry columns (default: row)")
    layout.add_argument(
        "--margin", type=float,
        help="Spacing around each image in pixels")
    layout.add_argument(
        "--extra-height", type=float,
        help="Extra height added below each image, e.g. for captions")

    row = p.add_argument_group("row mode")
    row.add_argument(
        "--target-row-height", type=float,
        help="Preferred row height in pixels")
    row.add_argument(
        "--search-window", type=int,
        help="Max images per candidate row (default: derived from width)")
    row.add_argument(
        "--last-row-max-scale", type=float,
        help="Cap on how far a short last row is scaled past the target")

    column = p.add_argument_group("column mode")
    column.add_argument(
        "--columns", type=int,
        help="Number of columns (default: chosen from the width)")

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str,
        help="Write the layout JSON here instead of stdout")
    output.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Enable debug logging")
    output.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log warnings and errors")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to a gallery.toml settings file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate the config file and exit without computing a layout")

    return p


def log_parameters(
    settings: gl_config.GallerySettings,
    config: gl_config.LayoutConfig,
    args: argparse.Namespace,
) -> None:
    """Log the resolved layout parameters."""
    if args.config:
        logger.info("Loaded config from: %s", args.config)
    logger.info("Image list: %s", args.images)
    logger.info("Direction: %s", settings.direction)
    logger.info("Container Width: %g", config.container_width)
    logger.info("Margin: %g", config.margin)
    logger.info("Extra Height: %g", config.extra_height)
    if settings.direction == "row":
        logger.info("Target Row Height: %g", config.target_row_height)
        logger.info("Search Window: %d%s", resolve_search_window(config),
                    "" if config.search_window else " (derived)")
        logger.info("Last Row Max Scale: %s",
                    config.last_row_max_scale or "(uncapped)")
    else:
        logger.info("Columns: %d%s", config.columns,
                    "" if settings.columns else " (derived)")


def run_from_args(args: argparse.Namespace) -> int:
    """Compute and emit a layout from parsed command-line arguments."""
    base_settings: gl_config.GallerySettings | None = None
    if args.config:
        base_settings = gl_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return 0

    settings = gl_config.build_settings_from_cli(
        vars(args), base_settings=base_settings,
    )
    config = settings.resolve(args.width)
    log_parameters(settings, config, args)

    images = gl_api.read_images(args.images)
    result = gl_api.compute_layout(images, config, settings.direction)
    text = gl_api.write_layout(result, args.output)
    if args.output:
        logger.info("Layout for %d images saved to: %s",
                    len(result), args.output)
    else:
        sys.stdout.write(text + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    set_verbosity(-1 if args.quiet else args.verbose)

    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and (
        not args.images or args.width is None
    ):
        arg_parser.error("the following arguments are required: --images,"
                         " --width")

    try:
        return run_from_args(args)
    except (OSError, ValueError) as exc:
        arg_parser.error(str(exc))
    return 2  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
