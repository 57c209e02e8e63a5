"""Bezier surface patches, input events and asset management for a small 3D engine."""

__version__ = "0.1.0"