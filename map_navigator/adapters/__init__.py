"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces that
connect the path-finding core to its front-ends:
- Rendering (plain text)
"""
