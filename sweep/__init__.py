"""
sweep package
=============

Animated radar-sweep backdrop for the Radar Sweep window.
"""

__all__ = [
    "constants",
    "config",
    "markers",
    "viewport",
    "frame",
    "canvas",
    "clock",
    "loop",
    "motion",
    "svg_utils",
    "gui",
]

__version__ = "1.0"
