"""Match-three jewel puzzle: engine, console game and a headless board model."""

__version__ = "0.1.0"