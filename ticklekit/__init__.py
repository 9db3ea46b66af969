"""Emulator front-end building blocks: streams, surfaces, fonts, audio sinks, profiling and screen state."""

__version__ = "0.1.0"