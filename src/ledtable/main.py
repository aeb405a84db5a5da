"""
Main entry point for the LED table streamer.

Connects to the table, picks the configured pattern and streams frames
until interrupted (or until the pattern's tick budget runs out).
"""

import asyncio
import logging
import random
import sys

from ledtable.config.settings import Settings, get_settings
from ledtable.graphics.color import get_palette
from ledtable.hardware.base import Display
from ledtable.hardware.display.udp import UDPMatrixDisplay
from ledtable.hardware.runner import StreamConfig, StreamRunner
from ledtable.patterns import create_pattern

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def create_display(settings: Settings) -> UDPMatrixDisplay:
    """Build the network display from settings (not yet connected)."""
    display_cfg = settings.display
    return UDPMatrixDisplay(
        width=display_cfg.width,
        height=display_cfg.height,
        host=display_cfg.host,
        port=display_cfg.port,
        byte_order=display_cfg.header_byte_order,
    )


def build_runner(settings: Settings, display: Display) -> StreamRunner:
    """Wire pattern, palette and pacing from settings onto a display."""
    stream_cfg = settings.stream

    # Seeded from the system clock unless a seed is configured
    rng = random.Random(stream_cfg.seed)
    pattern = create_pattern(
        stream_cfg.pattern,
        width=display.width,
        height=display.height,
        rng=rng,
    )
    palette_name = stream_cfg.palette or pattern.default_palette
    palette = get_palette(palette_name)

    frame_period = None
    if stream_cfg.frame_period_ms is not None:
        frame_period = stream_cfg.frame_period_ms / 1000.0

    config = StreamConfig.for_pattern(
        pattern,
        frame_period=frame_period,
        max_ticks=stream_cfg.max_ticks,
        log_interval=stream_cfg.log_interval,
    )
    logger.info(f"Pattern: {pattern.kind.value}, palette: {palette_name}")
    return StreamRunner(pattern, palette, display, config)


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger.info("LED table streamer starting...")

    display = create_display(settings)
    if not display.init():
        logger.error("Could not reach the LED table, giving up")
        sys.exit(1)

    try:
        runner = build_runner(settings, display)
        asyncio.run(runner.run())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
    finally:
        display.cleanup()

    logger.info("LED table streamer stopped")


if __name__ == "__main__":
    main()
