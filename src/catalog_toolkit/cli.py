"""
Command-line entry point for processing a single photo.

Usage:
    # Square crop for catalog thumbnails
    python run_process_photo.py photo.png --mode crop --width 400 --height 400

    # Fit inside a box, custom output
    python run_process_photo.py photo.png --mode resize --width 1024 --height 768 -o out.jpg

    # Options from a JSON file
    python run_process_photo.py photo.png --config options.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from catalog_toolkit import __version__
from catalog_toolkit.config import ConfigError, OutputPolicy, ProcessingOptions, load_options
from catalog_toolkit.core.models import InvalidDimensionsError, Mode
from catalog_toolkit.images import DimensionProbeError, ImageProcessingError
from catalog_toolkit.processor import process_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="process-photo",
        description="Crop or resize a photo into a target box and encode it.",
    )
    parser.add_argument("source", help="Path to the source photo")
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in Mode],
        help="crop: centered crop then stretch; resize: fit inside the box",
    )
    parser.add_argument("--width", "-W", type=int, help="Target width in pixels")
    parser.add_argument("--height", "-H", type=int, help="Target height in pixels")
    parser.add_argument("--output", "-o", help="Output path (default: <source>_<mode>.<ext>)")
    parser.add_argument("--format", "-f", default=None, help="Output format: JPEG, PNG or WEBP")
    parser.add_argument("--quality", "-q", type=int, default=None, help="Encoder quality 1-95")
    parser.add_argument("--config", "-c", help="JSON options file (command-line flags override it)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_options(args: argparse.Namespace, parser: argparse.ArgumentParser) -> ProcessingOptions:
    """Merge the options file (if any) with command-line flags."""
    base = load_options(args.config).to_dict() if args.config else {}

    mode = args.mode or base.get("mode")
    width = args.width if args.width is not None else base.get("target_width")
    height = args.height if args.height is not None else base.get("target_height")
    if mode is None or width is None or height is None:
        parser.error("--mode, --width and --height are required unless given by --config")

    output = dict(base.get("output") or {})
    if args.format is not None:
        output["format"] = args.format
    if args.quality is not None:
        output["quality"] = args.quality

    return ProcessingOptions(
        mode=mode,
        target_width=width,
        target_height=height,
        output=OutputPolicy.from_dict(output),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    try:
        options = _resolve_options(args, parser)
        result = process_image(args.source, options, destination=args.output)
    except (ConfigError, InvalidDimensionsError, DimensionProbeError, ImageProcessingError) as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        return 1

    print(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
