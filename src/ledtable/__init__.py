"""Pattern streamer for the 15x15 LED table."""

__version__ = "0.1.0"
