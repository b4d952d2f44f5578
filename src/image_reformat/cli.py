"""Command line entry point.

    image-reformat -p photo.png --target-width 200
    image-reformat -p https://example.com/cat.jpg -q 50 --target-format png
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence

from loguru import logger

from .common.config import ReformatConfig
from .common.errors import ImageToolError
from .common.schemas import ReformatParams
from .pipeline import run_pipeline


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="image-reformat",
        description="Resize or compress an image from a local path or URL",
    )

    parser.add_argument("-p", "--path", required=True, help="Local image path or http(s) URL")

    # Sizing
    parser.add_argument(
        "--target-width",
        type=non_negative_int,
        help="Output width in pixels (height inferred when omitted)",
    )
    parser.add_argument(
        "--target-height",
        type=non_negative_int,
        help="Output height in pixels (width inferred when omitted)",
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=int,
        help="Scale both sides to this percentage (1-100); ignored with an explicit size",
    )

    # Output
    parser.add_argument("--target-format", help="Output format (png, jpg, webp, gif, bmp, tiff)")
    parser.add_argument("-o", "--output", help="Output file path (default: derived in --output-dir)")
    parser.add_argument(
        "--output-dir",
        help="Directory for derived output names (default: ./output or $IMAGE_REFORMAT_OUTPUT_DIR)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline progress")

    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logger.remove()
    _ = logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    # --output-dir wins over IMAGE_REFORMAT_OUTPUT_DIR
    config = ReformatConfig(output_dir=args.output_dir) if args.output_dir else ReformatConfig()
    params = ReformatParams(
        source=args.path,
        width=args.target_width,
        height=args.target_height,
        quality=args.quality,
        output_path=args.output,
        target_format=args.target_format,
    )

    try:
        result = asyncio.run(run_pipeline(params, config))
    except ImageToolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
