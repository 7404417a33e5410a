"""
render.
======

Does: Source emitters for parsed survey colors.
Returns: RenderOptions and render_csharp().
"""

from .csharp import RenderOptions, format_channel, render_csharp, reserved_identifiers

__all__ = ["RenderOptions", "format_channel", "render_csharp", "reserved_identifiers"]
