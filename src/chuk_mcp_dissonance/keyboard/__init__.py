"""
Physical keyboard layout.
"""

from chuk_mcp_dissonance.keyboard.layout import Keyboard, PhysicalKey

__all__ = ["Keyboard", "PhysicalKey"]
