#!/usr/bin/env python3
"""
Diagnostic patterns for the 15x15 LED table.

Sends solid colors, sweeps and every palette ramp so wiring, color order
and header byte order can be checked by eye.

Usage:
    python scripts/table_diagnostic.py [--mock] [--little-endian] [host]
"""

import sys
import time
import numpy as np

from ledtable.graphics.color import PALETTES
from ledtable.graphics.mapper import image_from_gradient
from ledtable.hardware.display import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    UDPMatrixDisplay,
    UDPMatrixDisplayMock,
)
from ledtable.protocol.frame import ByteOrder


def show_solid_colors(display, delay=0.5):
    """Display solid colors."""
    colors = [
        ((255, 0, 0), "RED"),
        ((0, 255, 0), "GREEN"),
        ((0, 0, 255), "BLUE"),
        ((255, 255, 255), "WHITE"),
    ]

    for (r, g, b), name in colors:
        print(f"  {name}...")
        display.clear(r, g, b)
        display.show()
        time.sleep(delay)


def show_column_sweep(display, delay=0.05):
    """Sweep a column across the display (checks x ordering)."""
    print("  Column sweep...")

    for x in range(display.width):
        display.clear(0, 0, 0)
        for y in range(display.height):
            display.set_pixel(x, y, 0, 255, 0)
        display.show()
        time.sleep(delay)


def show_row_sweep(display, delay=0.05):
    """Sweep a row down the display (checks y ordering)."""
    print("  Row sweep...")

    for y in range(display.height):
        display.clear(0, 0, 0)
        for x in range(display.width):
            display.set_pixel(x, y, 255, 0, 0)
        display.show()
        time.sleep(delay)


def show_palettes(display, delay=1.5):
    """Left-to-right ramp through every palette."""
    ramp = np.tile(np.linspace(0.0, 1.0, display.width), display.height)
    for name, factory in PALETTES.items():
        print(f"  Palette {name}...")
        display.set_buffer(image_from_gradient(ramp, factory()))
        display.show()
        time.sleep(delay)


def main():
    print("=" * 50)
    print("LED Table Diagnostic")
    print("=" * 50)

    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    use_mock = "--mock" in sys.argv or "-m" in sys.argv
    byte_order = ByteOrder.LITTLE if "--little-endian" in sys.argv else ByteOrder.BIG
    host = args[0] if args else DEFAULT_HOST

    if use_mock:
        print("\nUsing mock display (no network)")
        display = UDPMatrixDisplayMock(byte_order=byte_order)
    else:
        print(f"\nUsing LED table at {host}:{DEFAULT_PORT} ({byte_order.name.lower()}-endian)")
        display = UDPMatrixDisplay(host=host, port=DEFAULT_PORT, byte_order=byte_order)

    if not display.init():
        print("ERROR: could not connect to the table")
        sys.exit(1)

    print("\nPress Ctrl+C to exit at any time.\n")

    try:
        while True:
            print("Testing solid colors...")
            show_solid_colors(display)

            print("Testing column sweep...")
            show_column_sweep(display)

            print("Testing row sweep...")
            show_row_sweep(display)

            print("Testing palettes...")
            show_palettes(display)

            print("\n--- Loop complete, repeating ---\n")

    except KeyboardInterrupt:
        print("\n\nTest interrupted by user.")

    finally:
        print("Cleaning up...")
        display.clear(0, 0, 0)
        display.show()
        display.cleanup()


if __name__ == "__main__":
    main()
