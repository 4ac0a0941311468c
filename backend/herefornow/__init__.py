"""Here, For Now — presence-driven SVG renderer and token metadata codec."""

__version__ = "0.1.0"
