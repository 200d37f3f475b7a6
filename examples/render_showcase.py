#!/usr/bin/env python3
"""Render the showcase scene.

This script demonstrates end-to-end rendering with the Whitted ray tracer.
It builds the showcase scene, configures the tracer, renders the frame on
a pool of worker threads and saves the result.

Usage:
    python -m examples.render_showcase [options]

Options:
    --width WIDTH       Image width in pixels (default: 320)
    --height HEIGHT     Image height in pixels (default: 240)
    --workers N         Number of worker threads (default: CPU count)
    --depth DEPTH       Maximum trace depth (default: 10)
    --output OUTPUT     Output file path, .ppm or .png (default: showcase.ppm)
    --quiet             Suppress progress output

Example:
    python -m examples.render_showcase --width 160 --height 120 --workers 4
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from whitted.core.integrator import RenderConfig
from whitted.core.ray import Color
from whitted.scene.showcase import ShowcaseParams, create_showcase_scene


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(
        description="Render the showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=320,
        help="Image width in pixels (default: 320)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=240,
        help="Image height in pixels (default: 240)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=defaults.thread_worker_count,
        help=f"Number of worker threads (default: {defaults.thread_worker_count})",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=defaults.trace_depth,
        help=f"Maximum trace depth (default: {defaults.trace_depth})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="showcase.ppm",
        help="Output file path, .ppm or .png (default: showcase.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_showcase(
    width: int = 320,
    height: int = 240,
    workers: int = 1,
    depth: int = 10,
    output_path: str = "showcase.ppm",
) -> Path:
    """Render the showcase scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        workers: Number of worker threads.
        depth: Maximum trace depth.
        output_path: Output file path. PNG is written for a .png suffix,
            PPM otherwise.

    Returns:
        Path to the saved image file.
    """
    params = ShowcaseParams()
    config = RenderConfig(
        thread_worker_count=workers,
        trace_depth=depth,
        environment_color=Color.of(params.environment_color),
    )

    logging.info("creating showcase scene (%dx%d)", width, height)
    scene = create_showcase_scene(width, height, params=params, config=config)

    start_time = time.time()
    scene.render()

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".png":
        scene.save_png(output_file)
    else:
        scene.save(output_file)

    logging.info("saved to %s", output_file.absolute())
    logging.info("total time: %.2fs", time.time() - start_time)
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        render_showcase(
            width=args.width,
            height=args.height,
            workers=args.workers,
            depth=args.depth,
            output_path=args.output,
        )
        return 0
    except (ValueError, RuntimeError, OSError) as e:
        logging.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
