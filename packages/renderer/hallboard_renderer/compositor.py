"""Opaque overlay of a finished panel onto a base image."""

from __future__ import annotations

from .pixels import PixelBuffer


def overlay(base: PixelBuffer, panel: PixelBuffer, x: int, y: int) -> PixelBuffer:
    """Copy ``panel`` over ``base`` at ``(x, y)`` without blending.

    The panel must fit inside ``base``; otherwise ``IndexError`` is raised
    before any pixel is written. Returns ``base`` for chaining.
    """
    base.blit(panel, x, y)
    return base
