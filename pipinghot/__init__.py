"""Piping Hot: a pipe-routing puzzle game with Tiled level loading and a text-mode game loop."""

__version__ = "0.1.0"