"""Renderer implementations."""

from .console_renderer import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
