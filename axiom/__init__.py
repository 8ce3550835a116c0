"""Building blocks for a small application framework: algorithms, bitsets,
arrays, simulated allocators, threading helpers, headless windows and an
application loop."""

__version__ = "0.1.0"